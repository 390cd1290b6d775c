"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import AliasChoices, Field

from webrag.configs.base import BaseSettings
from webrag.configs.models import EmbeddingSettings, GenerationSettings
from webrag.configs.pipeline import IngestionSettings, RetrievalSettings
from webrag.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    google_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "google_api_key", "WEBRAG_GOOGLE_API_KEY"),
        description="Google AI Studio key used by Gemini embeddings and completions",
    )
    question: str = Field(
        default="What is the capital of France?",
        description="Question answered by `python -m webrag`",
    )

    # Aggregated settings
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables and .env are read once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from webrag.configs import get_settings
        settings = get_settings()
    """
    return Settings()
