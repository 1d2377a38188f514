"""Pytest fixtures and shared test configuration.

Fixtures:
    - make_pdf: Builds a text-only PDF from a list of pages of lines
    - sample_pdf_bytes: Two-page PDF with page numbers printed on their own lines
    - sample_pdf_path: sample_pdf_bytes written to a temporary file
    - async_client: HTTPX client for API testing
    - clean_env: Removes extraction settings from the environment
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from pdfsegment.api import app

SAMPLE_PAGES = [
    ["1", "Information security", "policy"],
    ["2", "Access control", "rules"],
]


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _build_pdf(pages: list[list[str]]) -> bytes:
    """Assemble a minimal PDF with one Helvetica text line per entry."""
    page_count = len(pages)
    # 1: catalog, 2: page tree, 3: font, then (page, content) pairs
    page_ids = [4 + 2 * i for i in range(page_count)]

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        (
            "<< /Type /Pages /Kids ["
            + " ".join(f"{pid} 0 R" for pid in page_ids)
            + f"] /Count {page_count} >>"
        ).encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    for pid, lines in zip(page_ids, pages):
        ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
        for i, line in enumerate(lines):
            if i:
                ops.append("T*")
            ops.append(f"({_escape(line)}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")

        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
            ).encode()
        )
        objects.append(
            b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def make_pdf() -> Callable[[list[list[str]]], bytes]:
    """Return a builder for text-only PDFs.

    Returns:
        Function taking pages (each a list of text lines) and returning PDF bytes.
    """
    return _build_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Two-page PDF whose first line on each page is the page number."""
    return _build_pdf(SAMPLE_PAGES)


@pytest.fixture
def sample_pdf_path(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    """Write the sample PDF to a temporary file.

    Args:
        tmp_path: Pytest temporary directory.
        sample_pdf_bytes: Content to write.

    Returns:
        Path to sample.pdf.
    """
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with default extraction settings."""
    for name in ("CHUNK_SIZE", "CHUNK_OVERLAP", "MAX_FILE_SIZE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
