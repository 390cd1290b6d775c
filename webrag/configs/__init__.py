"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from webrag.configs.models import EmbeddingSettings, GenerationSettings
from webrag.configs.pipeline import IngestionSettings, RetrievalSettings
from webrag.configs.settings import Settings, get_settings
from webrag.configs.vector_store import VectorStoreSettings

__all__ = [
    "Settings",
    "get_settings",
    "IngestionSettings",
    "RetrievalSettings",
    "EmbeddingSettings",
    "GenerationSettings",
    "VectorStoreSettings",
]
