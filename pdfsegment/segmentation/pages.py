"""Page segmentation from a flat text stream.

Text extracted from paginated documents usually repeats the printed page
number as an isolated line. This module treats those lines as page
delimiters and rebuilds one text block per logical page.

No validation is done on the sequence of numbers: scanned or reordered
documents may repeat, skip or go backwards, and every marker simply opens
a new page.
"""

import logging

from pdfsegment.models.schemas import Page
from pdfsegment.segmentation.lines import is_numeric_line, iter_lines

logger = logging.getLogger(__name__)

# Digit runs above this are identifiers (ISBNs, phone numbers), not pages
MAX_PAGE_NUMBER = 2**32 - 1


def parse_page_marker(line: str) -> int | None:
    """Parse a line as a standalone page number.

    The line must be numeric in the sense of ``is_numeric_line``, the same
    rule the artifact filter uses, and at most ``MAX_PAGE_NUMBER``. Signs,
    decimal points, non-ASCII digits, and surrounding words ("Page 3") are
    rejected.

    Args:
        line: A single line of text, untrimmed.

    Returns:
        The page number, or None if the line is body text.
    """
    if not is_numeric_line(line):
        return None

    number = int(line.strip())
    if number > MAX_PAGE_NUMBER:
        return None
    return number


def split_text_into_pages(text: str, joiner: str = "") -> list[Page]:
    """Split text into pages using standalone numeric lines as markers.

    The first marker only opens a page. Each later marker closes the open
    page and opens a new one. Body lines are appended raw (untrimmed) to the
    open page, joined by ``joiner``; by default nothing is inserted, so
    ``"Hello"`` and ``"world"`` on consecutive lines become ``"Helloworld"``.

    Text before the first marker is not discarded: it is carried into the
    first page. Pages whose trimmed text is empty are never emitted, and a
    document without any marker yields no pages.

    Args:
        text: Extracted document text (unfiltered).
        joiner: String inserted between consecutive body lines of a page.

    Returns:
        Pages in document order.
    """
    pages: list[Page] = []
    current_page = 0
    buffer: list[str] = []

    for line in iter_lines(text):
        marker = parse_page_marker(line)

        if marker is None:
            buffer.append(line)
            continue

        if current_page > 0:
            body = joiner.join(buffer).strip()
            if body:
                pages.append(Page(page_number=current_page, text=body))
            else:
                logger.debug(f"Dropping empty page {current_page}")
            buffer.clear()

        current_page = marker

    if current_page > 0:
        body = joiner.join(buffer).strip()
        if body:
            pages.append(Page(page_number=current_page, text=body))

    logger.debug(f"Segmented text into {len(pages)} pages")
    return pages
