"""
Exception hierarchy for the webrag pipeline.

Provides layered exception structure for collaborator failures.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across ingestion, retrieval and generation
"""

from typing import Any


class WebRagException(Exception):
    """Base exception for all webrag errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(WebRagException):
    """Raised when settings cannot produce a working collaborator."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class FetchError(WebRagException):
    """Raised when a source document yields no usable content."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize fetch error.

        Args:
            message: Error message
            url: Source URL that could not be fetched
            details: Additional context
        """
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)


class EmbeddingError(WebRagException):
    """Raised when embedding generation fails."""

    def __init__(
        self,
        message: str,
        chunk_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding error.

        Args:
            message: Error message
            chunk_id: Chunk being embedded, if any (None for queries)
            details: Additional context
        """
        details = details or {}
        if chunk_id:
            details["chunk_id"] = chunk_id
        super().__init__(message, details)


class VectorStoreError(WebRagException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class GenerationError(WebRagException):
    """Raised when the completion service fails to answer."""

    pass
