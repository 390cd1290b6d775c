"""
Ingestion report models.

Summarize what an ingestion run committed to the vector store.

Dependencies: pydantic
System role: Return type for IngestionPipeline.ingest()
"""

from enum import Enum

from pydantic import BaseModel, Field


class SourceStatus(str, Enum):
    """Outcome of ingesting one source."""

    INGESTED = "ingested"
    PARTIAL = "partial"
    SKIPPED = "skipped"
    FAILED = "failed"


class SourceIngestionResult(BaseModel):
    """Result of ingesting a single source URL."""

    url: str = Field(description="Source URL")
    status: SourceStatus = Field(description="Overall outcome for this source")
    chunk_count: int = Field(default=0, description="Number of chunks produced")
    upserted_ids: list[str] = Field(default_factory=list, description="Chunk IDs upserted, in order")
    failed_indices: list[int] = Field(
        default_factory=list,
        description="Sequence indices of chunks that failed to embed or upsert",
    )
    pruned_ids: list[str] = Field(default_factory=list, description="Stale IDs deleted")
    error: str | None = Field(default=None, description="Reason for skipped/failed sources")


class IngestionReport(BaseModel):
    """Result of an ingestion run over a batch of sources."""

    sources: list[SourceIngestionResult] = Field(default_factory=list)
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")

    @property
    def upserted_count(self) -> int:
        return sum(len(result.upserted_ids) for result in self.sources)

    @property
    def failed_chunk_count(self) -> int:
        return sum(len(result.failed_indices) for result in self.sources)

    def by_status(self, status: SourceStatus) -> list[SourceIngestionResult]:
        return [result for result in self.sources if result.status == status]
