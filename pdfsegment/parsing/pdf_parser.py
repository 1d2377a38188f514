"""PDF decoding with pypdf.

Turns PDF bytes into one flat text string. Page boundaries are not marked
in the output; the segmentation core recovers logical pages from page
numbers printed in the text itself.
"""

import io
import logging

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

from pdfsegment.config import DEFAULT_MAX_FILE_SIZE

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"


class PDFParseError(Exception):
    """Raised when PDF bytes cannot be decoded to text."""

    pass


def _check_pdf_bytes(content: bytes, max_file_size: int) -> None:
    """Reject content that is empty, too large, or not a PDF.

    Raises:
        PDFParseError: If any check fails.
    """
    if not content:
        raise PDFParseError("Empty file provided")

    if len(content) > max_file_size:
        size_mb = len(content) / (1024 * 1024)
        limit_mb = max_file_size / (1024 * 1024)
        raise PDFParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    # Some producers emit whitespace before the header
    if not content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _open_pages(content: bytes) -> list[PageObject]:
    try:
        return list(PdfReader(io.BytesIO(content)).pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e


def extract_pdf_text(content: bytes, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Decode a PDF and return the text of all its pages.

    Page texts are joined with a single newline, so a page number printed
    on its own line at the top or bottom of a page stays a standalone line.
    Pages whose text cannot be extracted are skipped with a warning.

    Args:
        content: Raw bytes of the PDF file.
        max_file_size: Largest accepted size in bytes.

    Returns:
        Document text; empty for scanned or image-only PDFs.

    Raises:
        PDFParseError: If the file is empty, too large, not a PDF, corrupt,
            or has no pages.
    """
    _check_pdf_bytes(content, max_file_size)

    pages = _open_pages(content)
    if not pages:
        raise PDFParseError("PDF contains no pages")

    texts: list[str] = []
    for number, page in enumerate(pages, start=1):
        try:
            text = page.extract_text()
        except Exception as e:
            logger.warning(f"Failed to extract text from page {number}: {e}")
            continue
        if text:
            texts.append(text)

    if not texts:
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    logger.debug(f"Decoded {len(pages)} PDF pages, {len(texts)} with text")
    return "\n".join(texts)
