"""
Retrieval pipeline.

Embeds a query, asks the vector store for its nearest chunks and assembles
the (source, content) context in the store's ranking order.

Dependencies: webrag.boundary.protocols, webrag.models
System role: RAG retrieval business logic
"""

import logging

from webrag.boundary.protocols import EmbeddingService, VectorStore
from webrag.models import ContextEntry, QueryContext, VectorMatch

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


class Retriever:
    """Query-time retrieval over the shared vector store."""

    def __init__(self, embedder: EmbeddingService, vector_store: VectorStore) -> None:
        """
        Initialize retriever with its collaborators.

        Args:
            embedder: Embedding service used for the query text
            vector_store: Vector store populated by ingestion
        """
        self._embedder = embedder
        self._vector_store = vector_store

    async def retrieve(self, query: str, top_k: int = DEFAULT_TOP_K) -> QueryContext:
        """
        Retrieve context for a question.

        Fewer than top_k matches (including none) is not an error; the
        context is just shorter.

        Args:
            query: Natural-language question
            top_k: Maximum number of context entries

        Returns:
            QueryContext: Entries ordered closest first

        Raises:
            ValueError: When top_k is not positive
            EmbeddingError: When the query cannot be embedded
            VectorStoreError: When the store query fails
        """
        if top_k <= 0:
            raise ValueError(f"top_k must be positive, got {top_k}")

        vector = await self._embedder.embed(query)
        matches = await self._vector_store.query(vector, top_k, include_metadata=True)
        context = self.assemble_context(matches[:top_k])

        logger.info(
            "%s:retrieve - Retrieved %d context entries",
            __name__,
            len(context.entries),
            extra={"top_k": top_k, "query_length": len(query)},
        )
        return context

    @staticmethod
    def assemble_context(matches: list[VectorMatch]) -> QueryContext:
        """Map matches to context entries, keeping their order."""
        entries = []
        for match in matches:
            if match.metadata is None:
                logger.warning(
                    "%s:assemble_context - Match without metadata dropped",
                    __name__,
                    extra={"chunk_id": match.id},
                )
                continue
            entries.append(ContextEntry(source=match.metadata.source, content=match.metadata.content))
        return QueryContext(entries=entries)
