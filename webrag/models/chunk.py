"""
Chunk domain models.

Represents fetched source text, its chunks with deterministic IDs,
and the fixed metadata record stored alongside every vector.

Dependencies: pydantic
System role: Data structures for the ingestion pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class SourceDocument(BaseModel):
    """Fetched plain text of one source URL. Never persisted."""

    url: str = Field(description="Source URL")
    text: str = Field(default="", description="Extracted plain text")


class Chunk(BaseModel):
    """Contiguous slice of a source's normalized text."""

    id: str = Field(description="Deterministic chunk identifier (source + position)")
    source_url: str = Field(description="URL of the source document")
    sequence_index: int = Field(ge=0, description="Position of the chunk within the source")
    text: str = Field(description="Chunk text content")


class ChunkMetadata(BaseModel):
    """Metadata attached to each stored vector."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Source URL")
    source: str = Field(description="Source label shown in the prompt context")
    content: str = Field(description="Chunk text content")

    @classmethod
    def for_chunk(cls, chunk: Chunk) -> "ChunkMetadata":
        """Build metadata for a chunk; source doubles as the URL."""
        return cls(url=chunk.source_url, source=chunk.source_url, content=chunk.text)


class EmbeddedRecord(BaseModel):
    """Chunk embedding as persisted in the vector store."""

    id: str = Field(description="Chunk identifier used as the vector key")
    vector: list[float] = Field(description="Embedding vector")
    metadata: ChunkMetadata = Field(description="Chunk metadata")
