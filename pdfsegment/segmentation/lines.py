"""Line handling shared by the artifact filter and the page segmenter.

Both components read text line by line and both single out lines that hold
nothing but a number, so the line and number definitions live here.
"""

import re
from collections.abc import Iterator

_NUMERIC_LINE = re.compile(r"[0-9]+")


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``.

    Lines are separated by ``\\n``; trailing ``\\r`` characters are dropped
    so CRLF input behaves like LF input. Text ending in a newline ends with
    an empty line, which keeps ``"\\n".join(iter_lines(t))`` stable when
    applied again. An empty string has no lines at all.

    Unlike ``str.splitlines``, form feeds and other Unicode line separators
    are kept inside the line they appear in.

    Args:
        text: Document text.

    Yields:
        Each line without its terminator.
    """
    if not text:
        return

    for part in text.split("\n"):
        yield part.rstrip("\r")


def is_numeric_line(line: str) -> bool:
    """Return True if the trimmed line is one run of ASCII digits.

    Blank lines, signs, decimal points, inner spaces, words, and non-ASCII
    digits such as "٣" all make a line non-numeric.
    """
    return _NUMERIC_LINE.fullmatch(line.strip()) is not None
