"""Document reading and PDF text extraction.

Turns a document path or raw bytes into a single flat text string for the
segmentation core.

Responsibilities:
    - Reading document bytes off the event loop
    - PDF validation and text extraction with pypdf
"""

from pdfsegment.parsing.pdf_parser import PDFParseError, extract_pdf_text
from pdfsegment.parsing.reader import DocumentReadError, read_document_bytes

__all__ = [
    "DocumentReadError",
    "PDFParseError",
    "extract_pdf_text",
    "read_document_bytes",
]
