"""
Deterministic chunk identity.

A chunk's id depends only on its source URL and its position, so re-ingesting
an unchanged source overwrites its vectors instead of duplicating them.

Dependencies: hashlib
System role: Vector key derivation for idempotent upserts
"""

import hashlib

_URL_DIGEST_LENGTH = 32


def _source_key(source_url: str) -> str:
    return hashlib.sha256(source_url.encode("utf-8")).hexdigest()[:_URL_DIGEST_LENGTH]


def chunk_id(source_url: str, sequence_index: int) -> str:
    """
    Generate deterministic chunk ID from source URL and position.

    Args:
        source_url: URL of the source document
        sequence_index: Position of the chunk within the source (0-based)

    Returns:
        str: SHA-256 prefix of the URL followed by the index, e.g. "9f86d0...-3"

    Raises:
        ValueError: When sequence_index is negative
    """
    if sequence_index < 0:
        raise ValueError(f"sequence_index must be non-negative, got {sequence_index}")
    return f"{_source_key(source_url)}-{sequence_index}"


def stale_chunk_ids(source_url: str, live_count: int, max_count: int) -> list[str]:
    """IDs at positions [live_count, max_count) for a source."""
    return [chunk_id(source_url, index) for index in range(max(live_count, 0), max_count)]
