"""Embedding service adapters."""

from webrag.boundary.embeddings.gemini_embeddings import GeminiEmbeddingService

__all__ = ["GeminiEmbeddingService"]
