"""Host operations composing PDF decoding with the segmentation core.

Three use cases, each taking either a path (async) or raw bytes (sync):
    - full text: decode, then remove page-number lines
    - pages: decode, then rebuild logical pages from page-number lines
    - chunks: decode, remove page-number lines, then chunk with overlap

Decoding is CPU-bound, so the async variants run it in a worker thread.
Reader, decoder, and chunk configuration errors propagate unchanged.
"""

import asyncio
import logging
from pathlib import Path

from pdfsegment.config import get_chunking_config, get_document_config
from pdfsegment.models.schemas import Page, TextChunk
from pdfsegment.parsing.pdf_parser import extract_pdf_text
from pdfsegment.parsing.reader import read_document_bytes
from pdfsegment.segmentation.chunking import TextChunker
from pdfsegment.segmentation.cleaning import clean_text
from pdfsegment.segmentation.pages import split_text_into_pages

logger = logging.getLogger(__name__)


def _decode(content: bytes) -> str:
    return extract_pdf_text(content, max_file_size=get_document_config().max_file_size)


def text_from_bytes(content: bytes) -> str:
    """Decode a PDF and return its text without page-number lines."""
    return clean_text(_decode(content))


def pages_from_bytes(content: bytes) -> list[Page]:
    """Decode a PDF and split its raw text into logical pages."""
    return split_text_into_pages(_decode(content))


def chunks_from_bytes(content: bytes, chunker: TextChunker) -> list[TextChunk]:
    """Decode a PDF, clean its text, and split it with ``chunker``."""
    return chunker.split(clean_text(_decode(content)))


def resolve_chunker(chunk_size: int | None = None, chunk_overlap: int | None = None) -> TextChunker:
    """Build a chunker, falling back to configured defaults.

    Configured defaults are only read when an argument is missing, so
    explicit settings work whatever the environment holds.

    Args:
        chunk_size: Chunk length in characters, or None for the default.
        chunk_overlap: Overlap in characters, or None for the default.

    Returns:
        A validated TextChunker.

    Raises:
        ChunkConfigError: If the resulting combination is invalid.
        ValidationError: If a default is needed and the environment value
            is out of range.
    """
    if chunk_size is None or chunk_overlap is None:
        defaults = get_chunking_config()
        if chunk_size is None:
            chunk_size = defaults.chunk_size
        if chunk_overlap is None:
            chunk_overlap = defaults.chunk_overlap

    return TextChunker(chunk_size, chunk_overlap)


async def extract_text_from_pdf(path: str | Path) -> str:
    """Extract the cleaned full text of a PDF.

    Args:
        path: Filesystem path of the PDF.

    Returns:
        Document text with page-number-only lines removed.

    Raises:
        DocumentReadError: If the file cannot be read.
        PDFParseError: If the file is not a readable PDF.
    """
    content = await read_document_bytes(path)
    text = await asyncio.to_thread(text_from_bytes, content)
    logger.info(f"Extracted {len(text)} characters from {path}")
    return text


async def extract_text_pages(path: str | Path) -> list[Page]:
    """Extract logical pages from a PDF.

    Args:
        path: Filesystem path of the PDF.

    Returns:
        Pages found via standalone page-number lines.

    Raises:
        DocumentReadError: If the file cannot be read.
        PDFParseError: If the file is not a readable PDF.
    """
    content = await read_document_bytes(path)
    pages = await asyncio.to_thread(pages_from_bytes, content)
    logger.info(f"Extracted {len(pages)} pages from {path}")
    return pages


async def extract_text_chunks(
    path: str | Path,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
) -> list[TextChunk]:
    """Extract overlapping text chunks from a PDF.

    The chunk configuration is validated before the file is touched.

    Args:
        path: Filesystem path of the PDF.
        chunk_size: Chunk length in characters, or None for the default.
        chunk_overlap: Overlap in characters, or None for the default.

    Returns:
        Chunks of the cleaned text with sequential ids.

    Raises:
        ChunkConfigError: If chunk_size and chunk_overlap are incompatible.
        DocumentReadError: If the file cannot be read.
        PDFParseError: If the file is not a readable PDF.
    """
    chunker = resolve_chunker(chunk_size, chunk_overlap)
    content = await read_document_bytes(path)
    chunks = await asyncio.to_thread(chunks_from_bytes, content, chunker)
    logger.info(
        f"Extracted {len(chunks)} chunks from {path} "
        f"(chunk_size={chunker.chunk_size}, overlap={chunker.overlap})"
    )
    return chunks
