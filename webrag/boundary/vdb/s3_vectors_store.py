"""
S3 Vectors store for production.

Stores chunk vectors in an Amazon S3 Vectors index via the boto3
`s3vectors` client. Throttling is retried with exponential backoff here,
inside the collaborator; the pipelines never retry.

Metadata keys: url, source, content (content should be declared
non-filterable on the index to stay under the filterable-metadata limit).

Dependencies: boto3, botocore, tenacity
System role: Production vector store (S3 Vectors)
"""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from webrag.core.exceptions import VectorStoreError
from webrag.models import ChunkMetadata, VectorMatch

logger = logging.getLogger(__name__)

# S3 Vectors accepts at most this many keys per delete call
DELETE_BATCH_SIZE = 500

_THROTTLING_CODES = {
    "ThrottlingException",
    "TooManyRequestsException",
    "ServiceUnavailableException",
    "SlowDown",
}


def _is_throttling(exc: BaseException) -> bool:
    if not isinstance(exc, ClientError):
        return False
    return exc.response.get("Error", {}).get("Code") in _THROTTLING_CODES


class S3VectorsStore:
    """
    S3 Vectors index wrapper.

    Upserts with put_vectors (same key replaces the vector), queries with
    query_vectors and converts distances to scores (higher is closer).
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str = "documents",
        region: str = "us-east-1",
        distance_metric: str = "cosine",
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 Vectors store.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region for S3 Vectors
            distance_metric: Metric the index was created with ("cosine" or "euclidean")
            client: Optional pre-built boto3 s3vectors client

        Raises:
            ValueError: When vectors_bucket or index_name is empty
        """
        if not vectors_bucket:
            raise ValueError("vectors_bucket cannot be empty")
        if not index_name:
            raise ValueError("index_name cannot be empty")

        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self._distance_metric = distance_metric
        self._client = client or boto3.client("s3vectors", region_name=region)

    @retry(
        retry=retry_if_exception(_is_throttling),
        stop=stop_after_attempt(5),
        wait=wait_exponential_jitter(initial=1, max=30, jitter=5),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:_call - Retry {retry_state.attempt_number}/5 after throttling"
        ),
        reraise=True,
    )
    def _call(self, operation: str, **kwargs: Any) -> dict:
        """Invoke an s3vectors API operation with retry on throttling."""
        return getattr(self._client, operation)(
            vectorBucketName=self._vectors_bucket,
            indexName=self._index_name,
            **kwargs,
        )

    async def _invoke(self, operation: str, **kwargs: Any) -> dict:
        try:
            return await asyncio.to_thread(self._call, operation, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise VectorStoreError(
                f"S3 Vectors {operation} failed: {e}",
                operation=operation,
                details={"bucket": self._vectors_bucket, "index": self._index_name},
            ) from e

    async def upsert(self, record_id: str, vector: list[float], metadata: ChunkMetadata) -> None:
        """
        Put one vector; an existing vector with the same key is replaced.

        Raises:
            VectorStoreError: When the put fails
        """
        await self._invoke(
            "put_vectors",
            vectors=[
                {
                    "key": record_id,
                    "data": {"float32": [float(value) for value in vector]},
                    "metadata": metadata.model_dump(),
                }
            ],
        )

    async def query(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool = True,
    ) -> list[VectorMatch]:
        """
        Nearest-neighbor query.

        Returns:
            list[VectorMatch]: Matches in the order S3 Vectors ranked them

        Raises:
            VectorStoreError: When the query fails
        """
        response = await self._invoke(
            "query_vectors",
            topK=top_k,
            queryVector={"float32": [float(value) for value in vector]},
            returnMetadata=include_metadata,
            returnDistance=True,
        )

        matches = []
        for item in response.get("vectors", []):
            metadata = item.get("metadata") if include_metadata else None
            matches.append(
                VectorMatch(
                    id=item["key"],
                    score=self._score(item.get("distance", 0.0)),
                    metadata=self._parse_metadata(metadata) if metadata else None,
                )
            )

        logger.info(
            "%s:query - Found %d results",
            __name__,
            len(matches),
            extra={"top_k": top_k, "index": self._index_name},
        )
        return matches

    async def delete(self, ids: Sequence[str]) -> None:
        """
        Delete vectors by key, in batches.

        Raises:
            VectorStoreError: When a delete call fails
        """
        keys = list(ids)
        for start in range(0, len(keys), DELETE_BATCH_SIZE):
            await self._invoke("delete_vectors", keys=keys[start:start + DELETE_BATCH_SIZE])

    def _score(self, distance: float) -> float:
        if self._distance_metric == "cosine":
            return 1.0 - float(distance)
        return -float(distance)

    @staticmethod
    def _parse_metadata(metadata: dict) -> ChunkMetadata:
        url = str(metadata.get("url", ""))
        return ChunkMetadata(
            url=url,
            source=str(metadata.get("source", url)),
            content=str(metadata.get("content", "")),
        )
