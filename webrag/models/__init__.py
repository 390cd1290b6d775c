"""
Domain models.

Exports: SourceDocument, Chunk, ChunkMetadata, EmbeddedRecord, VectorMatch,
ContextEntry, QueryContext, RAGAnswer, SourceStatus, SourceIngestionResult,
IngestionReport
"""

from .chunk import Chunk, ChunkMetadata, EmbeddedRecord, SourceDocument
from .context import ContextEntry, QueryContext, RAGAnswer
from .ingestion import IngestionReport, SourceIngestionResult, SourceStatus
from .vector import VectorMatch

__all__ = [
    "SourceDocument",
    "Chunk",
    "ChunkMetadata",
    "EmbeddedRecord",
    "VectorMatch",
    "ContextEntry",
    "QueryContext",
    "RAGAnswer",
    "SourceStatus",
    "SourceIngestionResult",
    "IngestionReport",
]
