"""
Pipeline configuration settings.

Ingestion (fetch, normalize, chunk, upsert) and retrieval knobs.

Dependencies: pydantic, pydantic_settings
System role: Configuration for ingestion and retrieval pipelines
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IngestionSettings(BaseSettings):
    """Settings for the web document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="WEBRAG_INGESTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    source_urls: list[str] = Field(
        default_factory=list,
        description="Source URLs ingested when no explicit list is given",
    )
    chunk_size: int = Field(
        default=800,
        gt=0,
        description="Chunk size in characters",
    )
    max_content_length: int = Field(
        default=5000,
        gt=0,
        description="Normalized text is truncated to this many characters",
    )
    chunk_strategy: Literal["fixed", "recursive"] = Field(
        default="fixed",
        description="'fixed' slices every chunk_size chars, 'recursive' cuts at text boundaries",
    )
    chunk_concurrency: int = Field(
        default=4,
        ge=1,
        description="Max chunks of one source embedded/upserted concurrently",
    )
    source_concurrency: int = Field(
        default=1,
        ge=1,
        description="Max sources ingested concurrently (1 = sequential)",
    )
    prune_stale_chunks: bool = Field(
        default=False,
        description="Delete ids left over from a longer previous version of a source",
    )
    fetch_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout for document fetches",
    )
    user_agent: str = Field(
        default="webrag/0.1",
        description="User-Agent header sent by the web fetcher",
    )


class RetrievalSettings(BaseSettings):
    """Settings for query-time retrieval."""

    model_config = SettingsConfigDict(
        env_prefix="WEBRAG_RETRIEVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=5, gt=0, description="Number of top results to retrieve")
