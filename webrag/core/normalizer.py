"""
Text normalization for fetched documents.

Collapses whitespace and caps content length before chunking, which bounds
embedding cost and per-request payload size.

Dependencies: re
System role: Ingestion stage between fetch and chunk
"""

import re

DEFAULT_MAX_CONTENT_LENGTH = 5000

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str, max_length: int = DEFAULT_MAX_CONTENT_LENGTH) -> str:
    """
    Collapse whitespace runs to single spaces, trim, then truncate.

    Args:
        text: Raw extracted text
        max_length: Maximum number of characters kept

    Returns:
        str: Normalized text, at most max_length characters

    Raises:
        ValueError: When max_length is not positive
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()[:max_length]
