"""Fixed-size overlapping chunker.

Splits text into windows of ``chunk_size`` characters, each window starting
``chunk_size - overlap`` characters after the previous one. Lengths are
counted in Unicode code points (Python string indexing), so multi-byte
characters are never split.
"""

import logging

from pdfsegment.models.schemas import TextChunk

logger = logging.getLogger(__name__)


class ChunkConfigError(ValueError):
    """Raised when a chunk size and overlap cannot produce chunks.

    Attributes:
        chunk_size: The chunk size that was supplied.
        overlap: The overlap that was supplied.
    """

    def __init__(self, chunk_size: int, overlap: int, reason: str) -> None:
        self.chunk_size = chunk_size
        self.overlap = overlap
        super().__init__(
            f"Invalid chunk config (chunk_size={chunk_size}, overlap={overlap}): {reason}"
        )


def validate_chunk_config(chunk_size: int, overlap: int) -> None:
    """Check that a chunk configuration advances through the text.

    Args:
        chunk_size: Window length in characters.
        overlap: Characters shared between consecutive windows.

    Raises:
        ChunkConfigError: If chunk_size is not positive, overlap is negative,
            or overlap is not smaller than chunk_size.
    """
    if chunk_size <= 0:
        raise ChunkConfigError(chunk_size, overlap, "chunk_size must be greater than zero")
    if overlap < 0:
        raise ChunkConfigError(chunk_size, overlap, "overlap must not be negative")
    if overlap >= chunk_size:
        raise ChunkConfigError(chunk_size, overlap, "overlap must be smaller than chunk_size")


class TextChunker:
    """Chunker bound to a validated size and overlap.

    Validation happens at construction, so a misconfigured chunker is
    rejected before any text is seen.
    """

    def __init__(self, chunk_size: int, overlap: int) -> None:
        validate_chunk_config(chunk_size, overlap)
        self.chunk_size = chunk_size
        self.overlap = overlap

    @property
    def stride(self) -> int:
        """Distance between the starts of consecutive windows."""
        return self.chunk_size - self.overlap

    def split(self, text: str) -> list[TextChunk]:
        """Split text into overlapping chunks.

        The last window may be shorter than ``chunk_size``. Iteration stops
        as soon as a window reaches the end of the text, so the result never
        ends with an empty chunk or one wholly contained in its predecessor.

        Args:
            text: Text to split.

        Returns:
            Chunks in document order with ids 0, 1, 2, ...
        """
        chunks: list[TextChunk] = []
        start = 0

        while start < len(text):
            end = start + self.chunk_size
            chunks.append(TextChunk(id=len(chunks), text=text[start:end]))
            if end >= len(text):
                break
            start += self.stride

        logger.debug(
            f"Split {len(text)} characters into {len(chunks)} chunks "
            f"(chunk_size={self.chunk_size}, overlap={self.overlap})"
        )
        return chunks


def chunk_text(text: str, chunk_size: int, overlap: int) -> list[TextChunk]:
    """Split text into fixed-size overlapping chunks.

    Args:
        text: Cleaned document text.
        chunk_size: Window length in characters.
        overlap: Characters shared between consecutive windows.

    Returns:
        Chunks in document order with sequential ids starting at 0.

    Raises:
        ChunkConfigError: If the configuration is invalid. Raised before any
            chunk is produced.
    """
    return TextChunker(chunk_size, overlap).split(text)
