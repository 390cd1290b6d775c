"""
In-memory vector store for development and tests.

Keeps records in a dict keyed by id and ranks them by cosine similarity.
Same contract as S3VectorsStore, nothing is persisted.

Dependencies: numpy
System role: Local vector store (dev/test only)
"""

import logging
from collections.abc import Sequence

import numpy as np

from webrag.core.exceptions import VectorStoreError
from webrag.models import ChunkMetadata, EmbeddedRecord, VectorMatch

logger = logging.getLogger(__name__)


class InMemoryVectorStore:
    """Dict-backed vector store with brute-force cosine search."""

    def __init__(self) -> None:
        self._records: dict[str, EmbeddedRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def ids(self) -> list[str]:
        return list(self._records)

    def get(self, record_id: str) -> EmbeddedRecord | None:
        return self._records.get(record_id)

    async def upsert(self, record_id: str, vector: list[float], metadata: ChunkMetadata) -> None:
        """
        Insert or replace a vector.

        Raises:
            VectorStoreError: When the vector is empty or its dimension differs
                from vectors already stored
        """
        dimension = self._dimension()
        if not vector or (dimension is not None and len(vector) != dimension):
            raise VectorStoreError(
                "Vector dimension mismatch",
                operation="upsert",
                details={"record_id": record_id, "expected": dimension, "actual": len(vector)},
            )
        self._records[record_id] = EmbeddedRecord(id=record_id, vector=vector, metadata=metadata)

    async def query(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool = True,
    ) -> list[VectorMatch]:
        """
        Return up to top_k records by descending cosine similarity.

        Raises:
            VectorStoreError: When the query vector dimension does not match
        """
        if not self._records or top_k <= 0:
            return []

        dimension = self._dimension()
        if len(vector) != dimension:
            raise VectorStoreError(
                "Query vector dimension mismatch",
                operation="query",
                details={"expected": dimension, "actual": len(vector)},
            )

        records = list(self._records.values())
        matrix = np.asarray([record.vector for record in records], dtype=np.float64)
        query_vector = np.asarray(vector, dtype=np.float64)

        denominators = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query_vector)
        dots = matrix @ query_vector
        scores = np.divide(dots, denominators, out=np.zeros_like(dots), where=denominators > 0)
        order = np.argsort(-scores, kind="stable")[:top_k]

        return [
            VectorMatch(
                id=records[i].id,
                score=float(scores[i]),
                metadata=records[i].metadata if include_metadata else None,
            )
            for i in order
        ]

    async def delete(self, ids: Sequence[str]) -> None:
        for record_id in ids:
            self._records.pop(record_id, None)

    def _dimension(self) -> int | None:
        for record in self._records.values():
            return len(record.vector)
        return None
