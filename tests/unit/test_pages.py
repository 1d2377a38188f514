"""Unit tests for page segmentation."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from pdfsegment.models.schemas import Page
from pdfsegment.segmentation.pages import (
    MAX_PAGE_NUMBER,
    parse_page_marker,
    split_text_into_pages,
)


class TestParsePageMarker:
    """Tests for standalone page number detection."""

    def test_plain_number(self) -> None:
        """A bare number parses."""
        assert parse_page_marker("12") == 12

    def test_surrounding_whitespace(self) -> None:
        """Whitespace around the number is ignored."""
        assert parse_page_marker("   3 \t") == 3

    @pytest.mark.parametrize("line", ["Page 3", "+3", "-3", "3.0", "3a", "", "  ", "1 000", "٣"])
    def test_rejects_non_markers(self, line: str) -> None:
        """Words, signs, decimals, blanks and non-ASCII digits are body text."""
        assert parse_page_marker(line) is None

    def test_rejects_oversized_numbers(self) -> None:
        """Digit runs too large for a page number are body text."""
        check.equal(parse_page_marker(str(MAX_PAGE_NUMBER)), MAX_PAGE_NUMBER)
        check.is_none(parse_page_marker(str(MAX_PAGE_NUMBER + 1)))
        check.is_none(parse_page_marker("9780306406157"))


class TestSplitTextIntoPages:
    """Tests for split_text_into_pages."""

    def test_basic_pages_concatenate_lines(self) -> None:
        """Body lines join without a separator."""
        pages = split_text_into_pages("1\nHello\nworld\n2\nFoo\nbar")

        assert pages == [
            Page(page_number=1, text="Helloworld"),
            Page(page_number=2, text="Foobar"),
        ]

    def test_marker_without_body_is_dropped(self) -> None:
        """A page with nothing between two markers is not emitted."""
        pages = split_text_into_pages("1\n2\nBody")

        assert pages == [Page(page_number=2, text="Body")]

    def test_no_markers_yields_no_pages(self) -> None:
        """Text without standalone numbers has no pages."""
        assert split_text_into_pages("Just prose\nwith Page 3 inside") == []

    def test_empty_input(self) -> None:
        """Empty text has no pages."""
        assert split_text_into_pages("") == []

    def test_trailing_marker_without_body_is_dropped(self) -> None:
        """A final marker followed by nothing emits nothing."""
        pages = split_text_into_pages("1\nBody\n2\n   \n")

        assert pages == [Page(page_number=1, text="Body")]

    def test_preamble_joins_first_page(self) -> None:
        """Text before the first marker is carried into the first page."""
        pages = split_text_into_pages("Preamble\n1\nBody\n2\nNext")

        check.equal(pages[0], Page(page_number=1, text="PreambleBody"))
        check.equal(pages[1], Page(page_number=2, text="Next"))

    def test_non_monotonic_numbers(self) -> None:
        """Page numbers may repeat or go backwards."""
        pages = split_text_into_pages("5\nA\n3\nB\n3\nC")

        assert [p.page_number for p in pages] == [5, 3, 3]
        assert [p.text for p in pages] == ["A", "B", "C"]

    def test_zero_marker_is_never_emitted(self) -> None:
        """Page 0 does not open a page."""
        pages = split_text_into_pages("0\nCover\n1\nIntro")

        assert pages == [Page(page_number=1, text="CoverIntro")]

    def test_body_lines_untrimmed_inside_page(self) -> None:
        """Only the ends of a page body are trimmed."""
        pages = split_text_into_pages("1\n  lead \n trail  ")

        assert pages[0].text == "lead  trail"

    def test_marker_with_whitespace(self) -> None:
        """Markers are recognized after trimming."""
        pages = split_text_into_pages("  7  \r\nText\r\n")

        assert pages == [Page(page_number=7, text="Text")]

    def test_joiner_keeps_separators(self) -> None:
        """A joiner is inserted between body lines when requested."""
        pages = split_text_into_pages("1\nHello\nworld", joiner="\n")

        assert pages[0].text == "Hello\nworld"

    def test_every_page_is_valid(self) -> None:
        """Emitted pages always have positive numbers and non-empty text."""
        text = "x\n0\n\n3\n\n1\n \nA\n9\n"
        for page in split_text_into_pages(text):
            check.greater(page.page_number, 0)
            check.not_equal(page.text.strip(), "")


class TestPageModel:
    """Tests for Page validation."""

    def test_rejects_page_zero(self) -> None:
        """Page 0 is the no-page sentinel and cannot be built."""
        with pytest.raises(ValidationError):
            Page(page_number=0, text="x")

    def test_serializes_field_names(self) -> None:
        """Pages dump with page_number and text keys."""
        assert Page(page_number=2, text="Body").model_dump() == {"page_number": 2, "text": "Body"}
