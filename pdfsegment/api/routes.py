"""PDF extraction endpoints.

Handles file upload, validation, and text extraction as full text, pages,
or overlapping chunks.
"""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Query, UploadFile, status

from pdfsegment.config import get_document_config
from pdfsegment.extraction import (
    chunks_from_bytes,
    pages_from_bytes,
    resolve_chunker,
    text_from_bytes,
)
from pdfsegment.models.schemas import (
    ChunkExtractionResponse,
    PageExtractionResponse,
    TextExtractionResponse,
)
from pdfsegment.parsing.pdf_parser import PDFParseError
from pdfsegment.segmentation.chunking import ChunkConfigError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/extract", tags=["extract"])


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()
    max_size = get_document_config().max_file_size

    if len(content) > max_size:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=(
                f"File size ({size_mb:.1f}MB) exceeds maximum allowed "
                f"({max_size / (1024 * 1024):.0f}MB)"
            ),
        )

    return content


async def _read_upload(file: UploadFile) -> tuple[str, bytes]:
    filename = _validate_file_extension(file.filename)
    content = await _read_and_validate_size(file)
    return filename, content


def _parse_error(filename: str, e: PDFParseError) -> HTTPException:
    logger.warning(f"PDF parse error for {filename}: {e}")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/text", response_model=TextExtractionResponse)
async def extract_text(file: UploadFile) -> TextExtractionResponse:
    """Extract the full text of a PDF without page-number lines.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        TextExtractionResponse with the cleaned text.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds the size limit.
    """
    filename, content = await _read_upload(file)

    try:
        text = await asyncio.to_thread(text_from_bytes, content)
    except PDFParseError as e:
        raise _parse_error(filename, e) from e

    logger.info(f"Extracted text from {filename} ({len(text)} characters)")
    return TextExtractionResponse(filename=filename, text=text)


@router.post("/pages", response_model=PageExtractionResponse)
async def extract_pages(file: UploadFile) -> PageExtractionResponse:
    """Split a PDF's text into logical pages.

    Pages are delimited by page numbers printed on lines of their own.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        PageExtractionResponse with pages in document order.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds the size limit.
    """
    filename, content = await _read_upload(file)

    try:
        pages = await asyncio.to_thread(pages_from_bytes, content)
    except PDFParseError as e:
        raise _parse_error(filename, e) from e

    logger.info(f"Extracted {len(pages)} pages from {filename}")
    return PageExtractionResponse(filename=filename, pages=pages)


@router.post("/chunks", response_model=ChunkExtractionResponse)
async def extract_chunks(
    file: UploadFile,
    chunk_size: int | None = Query(None, description="Chunk length in characters"),
    chunk_overlap: int | None = Query(None, description="Overlap between chunks in characters"),
) -> ChunkExtractionResponse:
    """Split a PDF's cleaned text into overlapping chunks.

    Args:
        file: The uploaded PDF file (multipart/form-data).
        chunk_size: Chunk length; configured default when omitted.
        chunk_overlap: Overlap; configured default when omitted.

    Returns:
        ChunkExtractionResponse with chunks and the settings used.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds the size limit.
        422: chunk_overlap is not smaller than chunk_size, or chunk_size is not positive.
    """
    try:
        chunker = resolve_chunker(chunk_size, chunk_overlap)
    except ChunkConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        ) from e

    filename, content = await _read_upload(file)

    try:
        chunks = await asyncio.to_thread(chunks_from_bytes, content, chunker)
    except PDFParseError as e:
        raise _parse_error(filename, e) from e

    logger.info(f"Extracted {len(chunks)} chunks from {filename}")
    return ChunkExtractionResponse(
        filename=filename,
        chunk_size=chunker.chunk_size,
        chunk_overlap=chunker.overlap,
        chunks=chunks,
    )
