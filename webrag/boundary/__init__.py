"""
Boundary layer.

Collaborator protocols and their concrete adapters:
fetcher (requests + bs4), embeddings and llm (Gemini via LangChain),
vdb (in-memory and S3 Vectors).
"""

from webrag.boundary.protocols import (
    CompletionService,
    DocumentFetcher,
    EmbeddingService,
    VectorStore,
)

__all__ = ["DocumentFetcher", "EmbeddingService", "VectorStore", "CompletionService"]
