"""Extraction configuration with environment variable loading.

Pydantic-based settings, split by concern so that reading a document never
depends on chunk settings:
    - DocumentConfig: upload and decode limits
    - ChunkingConfig: default chunk size and overlap
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from pdfsegment.segmentation.chunking import TextChunker

# Load environment variables from .env file
load_dotenv()

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB


class DocumentConfig(BaseModel):
    """Limits applied to incoming documents.

    Attributes:
        max_file_size: Largest accepted document, in bytes.
    """

    max_file_size: int = Field(
        default_factory=lambda: os.getenv("MAX_FILE_SIZE", str(DEFAULT_MAX_FILE_SIZE)),
        ge=1,
        validate_default=True,
        description="Maximum accepted document size in bytes",
    )


class ChunkingConfig(BaseModel):
    """Default chunk settings.

    Each field is range-checked on its own. Whether the pair can actually
    chunk text (overlap smaller than size) is decided by ``TextChunker``,
    so a bad pair raises ``ChunkConfigError`` like any other caller input.

    Attributes:
        chunk_size: Default chunk length in characters.
        chunk_overlap: Default characters shared by consecutive chunks.
    """

    chunk_size: int = Field(
        default_factory=lambda: os.getenv("CHUNK_SIZE", "1000"),
        ge=1,
        validate_default=True,
        description="Chunk length in characters",
    )
    chunk_overlap: int = Field(
        default_factory=lambda: os.getenv("CHUNK_OVERLAP", "200"),
        ge=0,
        validate_default=True,
        description="Overlap between consecutive chunks in characters",
    )

    def chunker(self) -> TextChunker:
        """Build a chunker from these defaults.

        Raises:
            ChunkConfigError: If chunk_overlap is not smaller than chunk_size.
        """
        return TextChunker(self.chunk_size, self.chunk_overlap)


def get_document_config() -> DocumentConfig:
    """Create document limits from environment.

    Raises:
        ValidationError: If MAX_FILE_SIZE is not a positive integer.
    """
    return DocumentConfig()


def get_chunking_config() -> ChunkingConfig:
    """Create chunk defaults from environment.

    Raises:
        ValidationError: If CHUNK_SIZE or CHUNK_OVERLAP is out of range.
    """
    return ChunkingConfig()
