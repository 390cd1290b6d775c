"""
Google Generative AI embeddings adapter.

Wraps GoogleGenerativeAIEmbeddings behind the EmbeddingService contract and
enforces a fixed output dimensionality when one is configured, so every
vector written to the index has the same size.

Dependencies: langchain_google_genai
System role: Embedding Service collaborator for ingestion and retrieval
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from webrag.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "models/gemini-embedding-001"


class GeminiEmbeddingService:
    """Embed text with a Gemini embedding model."""

    def __init__(
        self,
        model: str = DEFAULT_EMBEDDING_MODEL,
        google_api_key: str | None = None,
        dimension: int | None = None,
        embeddings: Embeddings | None = None,
    ) -> None:
        """
        Initialize embedding service.

        Args:
            model: Google embedding model ID
            google_api_key: API key (falls back to GOOGLE_API_KEY env when None)
            dimension: Expected vector size; None accepts the model's native size
            embeddings: Pre-built LangChain embeddings (overrides model/key)
        """
        if embeddings is None:
            kwargs = {"model": model}
            if google_api_key:
                kwargs["google_api_key"] = google_api_key
            embeddings = GoogleGenerativeAIEmbeddings(**kwargs)

        self._embeddings = embeddings
        self._model = model
        self._dimension = dimension
        logger.info(
            "%s:__init__ - Initialized with model=%s, dimension=%s",
            __name__,
            model,
            dimension,
        )

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Chunk or query text

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: When the API call fails or the vector has the wrong size
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embedding: {e}",
                details={"model": self._model, "text_length": len(text)},
            ) from e

        if self._dimension is not None and len(vector) != self._dimension:
            raise EmbeddingError(
                "Embedding dimension mismatch",
                details={"expected": self._dimension, "actual": len(vector), "model": self._model},
            )
        return [float(value) for value in vector]
