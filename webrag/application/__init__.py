"""
Application layer.

Exports: RAGService, build_rag_service
"""

from webrag.application.factory import build_rag_service
from webrag.application.rag_service import RAGService

__all__ = ["RAGService", "build_rag_service"]
