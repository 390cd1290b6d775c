"""
Model configuration settings.

Embedding and generation model identifiers for Google Gemini.

Dependencies: pydantic, pydantic_settings
System role: Configuration for embedding and completion collaborators
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Gemini embedding model settings."""

    model_config = SettingsConfigDict(
        env_prefix="WEBRAG_EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    dimension: int | None = Field(
        default=None,
        gt=0,
        description="Expected vector dimension; vectors of any other size are rejected",
    )


class GenerationSettings(BaseSettings):
    """Gemini completion model settings."""

    model_config = SettingsConfigDict(
        env_prefix="WEBRAG_GENERATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(default="gemini-2.5-flash", description="Google Gemini chat model ID")
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Model temperature (0.0 for deterministic)",
    )
