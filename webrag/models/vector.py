"""
Vector search result model.

Dependencies: pydantic
System role: Type definition for vector store query results
"""

from pydantic import BaseModel, Field

from webrag.models.chunk import ChunkMetadata


class VectorMatch(BaseModel):
    """Single result from vector search, closest first in a result list."""

    id: str = Field(description="Chunk identifier")
    score: float = Field(description="Similarity score reported by the store (higher is closer)")
    metadata: ChunkMetadata | None = Field(
        default=None,
        description="Chunk metadata (None when not requested)",
    )
