"""Pydantic models for segmentation results and API payloads."""

from pdfsegment.models.schemas import (
    ChunkExtractionResponse,
    Page,
    PageExtractionResponse,
    TextChunk,
    TextExtractionResponse,
)

__all__ = [
    "ChunkExtractionResponse",
    "Page",
    "PageExtractionResponse",
    "TextChunk",
    "TextExtractionResponse",
]
