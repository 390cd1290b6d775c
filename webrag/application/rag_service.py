"""
RAG service orchestrator.

Single facade over ingestion, retrieval and generation. Every collaborator
is passed in; nothing here reaches for a process-wide client.

Dependencies: webrag.core, webrag.configs
System role: Application-level orchestration
"""

import logging
from collections.abc import Sequence

from webrag.configs import Settings
from webrag.core.generation import GenerationAdapter
from webrag.core.ingestion import IngestionPipeline
from webrag.core.retrieval import Retriever
from webrag.models import IngestionReport, QueryContext, RAGAnswer

logger = logging.getLogger(__name__)


class RAGService:
    """Ingest web sources and answer questions over them."""

    def __init__(
        self,
        pipeline: IngestionPipeline,
        retriever: Retriever,
        generator: GenerationAdapter,
        settings: Settings,
    ) -> None:
        self._pipeline = pipeline
        self._retriever = retriever
        self._generator = generator
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    async def ingest(self, urls: Sequence[str] | None = None) -> IngestionReport:
        """
        Ingest source URLs into the vector store.

        Args:
            urls: Source URLs (configured source_urls when None)

        Returns:
            IngestionReport: Per-source outcome
        """
        if urls is None:
            urls = self._settings.ingestion.source_urls
        if not urls:
            logger.warning("%s:ingest - No source URLs to ingest", __name__)
        return await self._pipeline.ingest(urls)

    async def aclose(self) -> None:
        await self._pipeline.aclose()

    async def retrieve(self, question: str, top_k: int | None = None) -> QueryContext:
        """Retrieve context for a question (configured top_k when None)."""
        if top_k is None:
            top_k = self._settings.retrieval.top_k
        return await self._retriever.retrieve(question, top_k)

    async def ask(self, question: str, top_k: int | None = None) -> RAGAnswer:
        """
        Answer a question from the ingested sources.

        Raises:
            EmbeddingError: When the question cannot be embedded
            VectorStoreError: When the store query fails
            GenerationError: When the completion service fails
        """
        context = await self.retrieve(question, top_k)
        answer = await self._generator.answer(question, context)
        logger.info(
            "%s:ask - Answered question",
            __name__,
            extra={"context_entries": len(context.entries), "answer_length": len(answer)},
        )
        return RAGAnswer(question=question, answer=answer, context=context)
