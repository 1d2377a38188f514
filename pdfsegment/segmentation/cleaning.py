"""Artifact filter for extracted document text.

Page-oriented text extraction leaves page numbers behind as lines of their
own. They carry no content and pollute full-text output and chunk
boundaries, so they are removed before either is produced.
"""

import logging

from pdfsegment.segmentation.lines import is_numeric_line, iter_lines

logger = logging.getLogger(__name__)


def is_artifact_line(line: str) -> bool:
    """Return True if the line holds nothing but a number.

    Uses the same numeric-line rule as page segmentation, so any line the
    segmenter could take as a page marker is removed here. Digit runs too
    long to be page numbers are removed too. Blank and whitespace-only
    lines are not artifacts.

    Args:
        line: A single line of text, untrimmed.

    Returns:
        Whether the line should be dropped from cleaned output.
    """
    return is_numeric_line(line)


def clean_text(text: str) -> str:
    """Remove page-number-only lines from text.

    Surviving lines are joined with ``\\n`` whatever the input line endings
    were; no trailing newline is added. Applying it twice is the same as
    applying it once.

    Args:
        text: Extracted document text.

    Returns:
        Text without numeric-only lines (possibly empty).
    """
    kept: list[str] = []
    dropped = 0

    for line in iter_lines(text):
        if is_artifact_line(line):
            dropped += 1
            continue
        kept.append(line)

    logger.debug(f"Artifact filter kept {len(kept)} lines, dropped {dropped}")
    return "\n".join(kept)
