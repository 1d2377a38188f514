"""Document byte source.

Reads a document from disk without blocking the event loop.
"""

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DocumentReadError(Exception):
    """Raised when a document cannot be read from disk."""

    pass


async def read_document_bytes(path: str | Path) -> bytes:
    """Read a document's raw bytes.

    Args:
        path: Filesystem path of the document.

    Returns:
        File content as bytes.

    Raises:
        DocumentReadError: If the file is missing, unreadable, or a directory.
    """
    try:
        content = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise DocumentReadError(f"Failed to read file at '{path}': {e}") from e

    logger.debug(f"Read {len(content)} bytes from {path}")
    return content
