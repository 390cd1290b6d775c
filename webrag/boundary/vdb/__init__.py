"""
Vector database boundary layer.

Provides vector store clients for storage and retrieval operations.
- InMemoryVectorStore: local dev/test store
- S3VectorsStore: production S3 Vectors client

Dependencies: numpy, boto3
System role: Vector store adapter for ingestion and retrieval
"""

from webrag.boundary.vdb.in_memory_store import InMemoryVectorStore
from webrag.boundary.vdb.s3_vectors_store import S3VectorsStore
from webrag.boundary.vdb.vector_store_factory import get_vector_store

__all__ = ["InMemoryVectorStore", "S3VectorsStore", "get_vector_store"]
