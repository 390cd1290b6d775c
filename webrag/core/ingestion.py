"""
Ingestion pipeline orchestrator.

Coordinates fetch -> normalize -> chunk -> embed -> upsert for a batch of
source URLs. Failures below the batch level are logged and skipped: a bad
source never aborts the batch, a bad chunk never aborts its source.

Dependencies: webrag.boundary.protocols, webrag.core, webrag.configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from webrag.boundary.protocols import DocumentFetcher, EmbeddingService, VectorStore
from webrag.configs import IngestionSettings
from webrag.core.chunking import ChunkingTask
from webrag.core.exceptions import FetchError
from webrag.core.identity import stale_chunk_ids
from webrag.core.normalizer import normalize_text
from webrag.models import (
    Chunk,
    ChunkMetadata,
    IngestionReport,
    SourceDocument,
    SourceIngestionResult,
    SourceStatus,
)
from webrag.observability import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


@dataclass
class _ChunkOutcome:
    chunk: Chunk
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class IngestionPipeline:
    """Orchestrate ingestion: fetch -> normalize -> chunk -> embed+upsert."""

    def __init__(
        self,
        fetcher: DocumentFetcher,
        embedder: EmbeddingService,
        vector_store: VectorStore,
        settings: IngestionSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with collaborators and configuration.

        Args:
            fetcher: Document fetcher (URL -> text)
            embedder: Embedding service (text -> vector)
            vector_store: Vector store receiving the upserts
            settings: Ingestion settings (defaults if None)
        """
        self._settings = settings or IngestionSettings()
        self._fetcher = fetcher
        self._embedder = embedder
        self._vector_store = vector_store
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            strategy=self._settings.chunk_strategy,
        )

    async def ingest(self, urls: Sequence[str]) -> IngestionReport:
        """
        Ingest every source URL.

        Returns once all sources and all of their chunks have been attempted.
        Upserts already committed stay in the store if the run is cancelled.

        Args:
            urls: Source URLs

        Returns:
            IngestionReport: Per-source summary of what was committed
        """
        start_time = time.perf_counter()
        semaphore = asyncio.Semaphore(self._settings.source_concurrency)

        async def bounded(url: str) -> SourceIngestionResult:
            async with semaphore:
                return await self._ingest_source_safely(url)

        results = await asyncio.gather(*(bounded(url) for url in urls))
        report = IngestionReport(
            sources=list(results),
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        logger.info(
            "%s:ingest - Completed ingestion of %d sources",
            __name__,
            len(report.sources),
            extra={
                "upserted": report.upserted_count,
                "failed_chunks": report.failed_chunk_count,
                "skipped_sources": len(report.by_status(SourceStatus.SKIPPED)),
                "failed_sources": len(report.by_status(SourceStatus.FAILED)),
                "processing_time_ms": report.processing_time_ms,
            },
        )
        return report

    async def ingest_source(self, url: str) -> SourceIngestionResult:
        """
        Ingest one source URL.

        Args:
            url: Source URL

        Returns:
            SourceIngestionResult: Outcome for this source

        Raises:
            FetchError: When the source yields no content
        """
        document = await self._fetch(url)
        text = normalize_text(document.text, self._settings.max_content_length)
        if not text:
            raise FetchError("Source has no content after normalization", url=url)

        chunks = self._chunking_task.chunk(url, text)
        outcomes = await self._embed_and_upsert(chunks)

        upserted_ids = []
        failed_indices = []
        for outcome in outcomes:
            if outcome.ok:
                upserted_ids.append(outcome.chunk.id)
            else:
                failed_indices.append(outcome.chunk.sequence_index)
                log_exception_with_context(
                    logger,
                    f"{__name__}:ingest_source - Skipped chunk",
                    outcome.error,
                    level=logging.WARNING,
                    url=url,
                    chunk_id=outcome.chunk.id,
                    sequence_index=outcome.chunk.sequence_index,
                )

        pruned_ids = []
        if self._settings.prune_stale_chunks:
            pruned_ids = await self._prune_stale(url, len(chunks))

        status = SourceStatus.INGESTED
        if failed_indices:
            status = SourceStatus.PARTIAL if upserted_ids else SourceStatus.FAILED

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest_source - Ingested source",
            url=url,
            status=status.value,
            chunk_count=len(chunks),
            upserted=len(upserted_ids),
            failed=len(failed_indices),
        )
        return SourceIngestionResult(
            url=url,
            status=status,
            chunk_count=len(chunks),
            upserted_ids=upserted_ids,
            failed_indices=failed_indices,
            pruned_ids=pruned_ids,
        )

    async def aclose(self) -> None:
        """Release the fetcher's connections."""
        await self._fetcher.aclose()

    async def _ingest_source_safely(self, url: str) -> SourceIngestionResult:
        try:
            return await self.ingest_source(url)
        except FetchError as e:
            logger.warning("%s:ingest - Skipping source: %s", __name__, e, extra={"url": url})
            return SourceIngestionResult(url=url, status=SourceStatus.SKIPPED, error=e.message)
        except Exception as e:
            logger.exception(
                "%s:ingest - Source failed: %s",
                __name__,
                e,
                extra={"url": url, "error_type": type(e).__name__},
            )
            return SourceIngestionResult(url=url, status=SourceStatus.FAILED, error=str(e))

    async def _fetch(self, url: str) -> SourceDocument:
        text = await self._fetcher.fetch(url)
        if not text or not text.strip():
            raise FetchError("Fetcher returned no content", url=url)
        return SourceDocument(url=url, text=text)

    async def _embed_and_upsert(self, chunks: list[Chunk]) -> list[_ChunkOutcome]:
        """Process chunks with bounded concurrency; outcomes keep sequence order."""
        semaphore = asyncio.Semaphore(self._settings.chunk_concurrency)

        async def bounded(chunk: Chunk) -> _ChunkOutcome:
            async with semaphore:
                return await self._ingest_chunk(chunk)

        return list(await asyncio.gather(*(bounded(chunk) for chunk in chunks)))

    async def _ingest_chunk(self, chunk: Chunk) -> _ChunkOutcome:
        try:
            vector = await self._embedder.embed(chunk.text)
            await self._vector_store.upsert(chunk.id, vector, ChunkMetadata.for_chunk(chunk))
        except Exception as e:
            # EmbeddingError / VectorStoreError, or whatever a third-party collaborator raises
            return _ChunkOutcome(chunk=chunk, error=e)
        return _ChunkOutcome(chunk=chunk)

    async def _prune_stale(self, url: str, live_count: int) -> list[str]:
        """Delete ids left over from a previous, longer version of the source."""
        max_count = self._chunking_task.max_chunks(self._settings.max_content_length)
        ids = stale_chunk_ids(url, live_count, max_count)
        if not ids:
            return []
        try:
            await self._vector_store.delete(ids)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:ingest_source - Failed to prune stale chunks",
                e,
                level=logging.WARNING,
                url=url,
                stale_count=len(ids),
            )
            return []
        return ids
