"""Pydantic models for segmentation results and API responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Page: One logical page rebuilt from page-number markers
    - TextChunk: One overlapping window of cleaned text
    - TextExtractionResponse: Cleaned full text of an uploaded document
    - PageExtractionResponse: Pages of an uploaded document
    - ChunkExtractionResponse: Chunks of an uploaded document
"""

from pydantic import BaseModel, Field


class Page(BaseModel):
    """A logical page reconstructed from extracted text.

    Attributes:
        page_number: Number printed on the page, as found in the text.
        text: Trimmed page body.
    """

    page_number: int = Field(..., gt=0, description="Page number found in the document text")
    text: str = Field(..., min_length=1, description="Page body text")


class TextChunk(BaseModel):
    """A fixed-size window of cleaned document text.

    Attributes:
        id: Position of the chunk in document order, starting at 0.
        text: Chunk content.
    """

    id: int = Field(..., ge=0, description="Sequential chunk id starting at 0")
    text: str = Field(..., description="Chunk text")


class TextExtractionResponse(BaseModel):
    """Cleaned text extracted from an uploaded PDF.

    Attributes:
        filename: Name of the uploaded file.
        text: Full text with page-number lines removed.
    """

    filename: str
    text: str


class PageExtractionResponse(BaseModel):
    """Pages extracted from an uploaded PDF.

    Attributes:
        filename: Name of the uploaded file.
        pages: Logical pages in document order.
    """

    filename: str
    pages: list[Page] = Field(default_factory=list)


class ChunkExtractionResponse(BaseModel):
    """Chunks extracted from an uploaded PDF.

    Attributes:
        filename: Name of the uploaded file.
        chunk_size: Window length used, in characters.
        chunk_overlap: Overlap used, in characters.
        chunks: Chunks in document order.
    """

    filename: str
    chunk_size: int
    chunk_overlap: int
    chunks: list[TextChunk] = Field(default_factory=list)
