"""
Vector store factory for selecting between in-memory (dev) and S3 Vectors (prod).

Depends on WEBRAG_VECTOR_STORE_STORE_TYPE.

Dependencies: webrag.boundary.vdb, webrag.configs
System role: Vector store instantiation and selection
"""

import logging

from webrag.boundary.protocols import VectorStore
from webrag.boundary.vdb.in_memory_store import InMemoryVectorStore
from webrag.boundary.vdb.s3_vectors_store import S3VectorsStore
from webrag.configs import VectorStoreSettings, get_settings
from webrag.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_vector_store(settings: VectorStoreSettings | None = None) -> VectorStore:
    """
    Factory function to get vector store based on configuration.

    Args:
        settings: Vector store settings (application settings when None)

    Returns:
        InMemoryVectorStore or S3VectorsStore: Configured vector store instance

    Raises:
        ConfigurationError: If store_type is invalid
    """
    settings = settings or get_settings().vector_store
    store_type = settings.store_type.lower()

    if store_type == "memory":
        logger.info("%s:get_vector_store - Creating in-memory vector store (local dev mode)", __name__)
        return InMemoryVectorStore()

    if store_type == "s3":
        logger.info("%s:get_vector_store - Creating S3 Vectors store (production mode)", __name__)
        return S3VectorsStore(
            vectors_bucket=settings.vectors_bucket,
            index_name=settings.index_name,
            region=settings.aws_region,
            distance_metric=settings.distance_metric,
        )

    raise ConfigurationError(
        f"Invalid vector store type: {store_type}. Must be 'memory' (dev) or 's3' (production).",
        setting="vector_store.store_type",
    )
