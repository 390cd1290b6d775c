"""
Service assembly.

Builds every collaborator from settings and wires them into a RAGService.

Dependencies: webrag.boundary, webrag.core, webrag.configs
System role: Composition root
"""

import logging

from webrag.application.rag_service import RAGService
from webrag.boundary.embeddings import GeminiEmbeddingService
from webrag.boundary.fetcher import WebDocumentFetcher
from webrag.boundary.llm import GeminiCompletionService
from webrag.boundary.vdb import get_vector_store
from webrag.configs import Settings, get_settings
from webrag.core.exceptions import ConfigurationError
from webrag.core.generation import GenerationAdapter
from webrag.core.ingestion import IngestionPipeline
from webrag.core.retrieval import Retriever

logger = logging.getLogger(__name__)


def build_rag_service(settings: Settings | None = None) -> RAGService:
    """
    Build a RAGService from settings.

    The same embedder instance serves ingestion and retrieval so both sides
    of the index use one model.

    Args:
        settings: Application settings (cached settings when None)

    Returns:
        RAGService: Ready-to-use service

    Raises:
        ConfigurationError: When the Gemini API key is missing or the store type is unknown
    """
    settings = settings or get_settings()
    if not settings.google_api_key:
        raise ConfigurationError(
            "Gemini API key is not set (GEMINI_API_KEY or GOOGLE_API_KEY)",
            setting="google_api_key",
        )

    vector_store = get_vector_store(settings.vector_store)
    embedder = GeminiEmbeddingService(
        model=settings.embedding.model,
        google_api_key=settings.google_api_key,
        dimension=settings.embedding.dimension,
    )
    fetcher = WebDocumentFetcher(
        timeout=settings.ingestion.fetch_timeout_seconds,
        user_agent=settings.ingestion.user_agent,
    )
    completion = GeminiCompletionService(
        model=settings.generation.model,
        temperature=settings.generation.temperature,
        google_api_key=settings.google_api_key,
    )

    logger.info(
        "%s:build_rag_service - Built service",
        __name__,
        extra={
            "environment": settings.environment,
            "store_type": settings.vector_store.store_type,
            "embedding_model": settings.embedding.model,
            "generation_model": settings.generation.model,
        },
    )
    return RAGService(
        pipeline=IngestionPipeline(fetcher, embedder, vector_store, settings.ingestion),
        retriever=Retriever(embedder, vector_store),
        generator=GenerationAdapter(completion),
        settings=settings,
    )
