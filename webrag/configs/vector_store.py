"""
Vector store configuration settings.

Selects the vector store backend and holds S3 Vectors coordinates.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for ingestion and retrieval
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="WEBRAG_VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="memory",
        description="Vector store type: 'memory' for local dev, 's3' for production",
    )
    vectors_bucket: str = Field(
        default="webrag-dev-vectors",
        description="S3 Vectors bucket name",
    )
    index_name: str = Field(default="documents", description="S3 Vectors index name")
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    distance_metric: Literal["cosine", "euclidean"] = Field(
        default="cosine",
        description="Distance metric of the S3 Vectors index (used to turn distance into score)",
    )
