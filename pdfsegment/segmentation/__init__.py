"""Text segmentation core.

Pure, synchronous functions over already-decoded document text.

Responsibilities:
    - Removing page-number-only lines (artifact filter)
    - Rebuilding logical pages from standalone page-number lines
    - Fixed-size chunking with overlap for downstream indexing

None of these functions perform I/O, and none of them call each other.
Callers compose them per use case.
"""

from pdfsegment.segmentation.chunking import (
    ChunkConfigError,
    TextChunker,
    chunk_text,
    validate_chunk_config,
)
from pdfsegment.segmentation.cleaning import clean_text, is_artifact_line
from pdfsegment.segmentation.lines import is_numeric_line
from pdfsegment.segmentation.pages import (
    MAX_PAGE_NUMBER,
    parse_page_marker,
    split_text_into_pages,
)

__all__ = [
    "MAX_PAGE_NUMBER",
    "ChunkConfigError",
    "TextChunker",
    "chunk_text",
    "clean_text",
    "is_artifact_line",
    "is_numeric_line",
    "parse_page_marker",
    "split_text_into_pages",
    "validate_chunk_config",
]
