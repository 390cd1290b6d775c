"""
Text chunking task.

Splits normalized text into contiguous, non-overlapping chunks. Joining the
chunks of a source in order always gives back the input text exactly.

Dependencies: langchain_text_splitters
System role: Chunking stage of the ingestion pipeline
"""

import math
from typing import Literal

from langchain_text_splitters import RecursiveCharacterTextSplitter

from webrag.core.identity import chunk_id
from webrag.models import Chunk

DEFAULT_CHUNK_SIZE = 800

ChunkStrategy = Literal["fixed", "recursive"]


def chunk_text(text: str, size: int) -> list[str]:
    """
    Partition text into consecutive slices of `size` characters.

    The last slice holds the remainder (1..size characters).

    Args:
        text: Normalized text
        size: Slice length in characters

    Returns:
        list[str]: Slices in order; empty for empty text

    Raises:
        ValueError: When size is not positive
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [text[start:start + size] for start in range(0, len(text), size)]


class ChunkingTask:
    """Split source text into identity-addressable chunks."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        strategy: ChunkStrategy = "fixed",
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Chunk size in characters
            strategy: "fixed" for exact slices, "recursive" to cut at
                paragraph/sentence/word boundaries

        Raises:
            ValueError: When chunk_size is not positive or strategy is unknown
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if strategy not in ("fixed", "recursive"):
            raise ValueError(f"Unknown chunk strategy: {strategy}")

        self.chunk_size = chunk_size
        self.strategy = strategy
        self._splitter: RecursiveCharacterTextSplitter | None = None
        if strategy == "recursive":
            self._splitter = RecursiveCharacterTextSplitter(
                chunk_size=chunk_size,
                chunk_overlap=0,
                add_start_index=True,
                length_function=len,
            )

    def split(self, text: str) -> list[str]:
        """
        Split text into chunk strings.

        Args:
            text: Normalized text

        Returns:
            list[str]: Contiguous pieces whose concatenation equals text
        """
        if not text:
            return []
        if self._splitter is None:
            return chunk_text(text, self.chunk_size)
        return self._split_at_boundaries(text)

    def chunk(self, source_url: str, text: str) -> list[Chunk]:
        """
        Split text and assign sequence indices and ids.

        Args:
            source_url: URL the text was fetched from
            text: Normalized text

        Returns:
            list[Chunk]: Chunks ordered by sequence_index
        """
        return [
            Chunk(
                id=chunk_id(source_url, index),
                source_url=source_url,
                sequence_index=index,
                text=piece,
            )
            for index, piece in enumerate(self.split(text))
        ]

    def max_chunks(self, text_length: int) -> int:
        """Upper bound on the chunk count for text of the given length."""
        if self.strategy == "fixed":
            return math.ceil(text_length / self.chunk_size)
        # Recursive pieces are only guaranteed to be non-empty.
        return text_length

    def _split_at_boundaries(self, text: str) -> list[str]:
        """
        Cut text at the start offsets chosen by the recursive splitter.

        The whitespace the splitter strips between two chunks opens the next
        piece, so a piece spans exactly what the splitter measured. Pieces
        still longer than chunk_size are sliced to size.
        """
        documents = self._splitter.create_documents([text])
        cuts = set()
        for doc in documents:
            start = doc.metadata.get("start_index", -1)
            if 0 < start < len(text):
                cuts.add(start - 1 if text[start - 1].isspace() else start)
        cuts.discard(0)

        starts = [0, *sorted(cuts)]
        ends = [*sorted(cuts), len(text)]
        pieces = []
        for start, end in zip(starts, ends):
            pieces.extend(chunk_text(text[start:end], self.chunk_size))
        return pieces
