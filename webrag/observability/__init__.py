"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from webrag.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from webrag.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
]
