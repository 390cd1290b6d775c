"""
Collaborator contracts used by the core pipelines.

The core never imports a concrete SDK; it depends on these protocols and
receives implementations by injection.

Dependencies: typing
System role: Boundary interfaces for fetcher, embeddings, vector store, LLM
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from webrag.models import ChunkMetadata, VectorMatch


@runtime_checkable
class DocumentFetcher(Protocol):
    """Turns a URL into extracted plain text."""

    async def fetch(self, url: str) -> str:
        """Return the document text, or "" when nothing could be fetched."""
        ...

    async def aclose(self) -> None:
        """Release connections held by the fetcher."""
        ...


@runtime_checkable
class EmbeddingService(Protocol):
    """Turns text into a fixed-length vector."""

    async def embed(self, text: str) -> list[float]:
        """Embed text. Raises EmbeddingError on quota/network failure."""
        ...


@runtime_checkable
class VectorStore(Protocol):
    """Stores (id, vector, metadata) tuples and answers nearest-neighbor queries."""

    async def upsert(self, record_id: str, vector: list[float], metadata: ChunkMetadata) -> None:
        """Insert or replace the vector keyed by record_id."""
        ...

    async def query(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool = True,
    ) -> list[VectorMatch]:
        """Return up to top_k matches, closest first."""
        ...

    async def delete(self, ids: Sequence[str]) -> None:
        """Delete vectors by id; unknown ids are ignored."""
        ...


@runtime_checkable
class CompletionService(Protocol):
    """Turns a prompt into generated text."""

    async def complete(self, prompt: str) -> str:
        """Single-shot completion. Raises GenerationError on failure."""
        ...
