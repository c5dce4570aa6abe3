from __future__ import annotations

import io

import pytest
from pypdf import PdfReader
from reportlab.pdfbase.pdfmetrics import stringWidth

from anypdf.exceptions import UnsupportedCharacterError
from anypdf.render.text import (
    FONT_NAME,
    FONT_SIZE,
    layout_text,
    render_text,
    unsupported_characters,
)
from anypdf.types import TEXT_PAGE, PageGeometry

SAMPLE = (
    "The quick brown fox jumps over the lazy dog.\n\n"
    "Pack my box with five dozen liquor jugs.\tHow vexingly quick daft zebras jump! "
) * 40


def _width(text: str) -> float:
    return stringWidth(text, FONT_NAME, FONT_SIZE)


def test_every_token_appears_in_order() -> None:
    layout = layout_text(SAMPLE)

    drawn = [token for line in layout.lines() for token in line.text.split(" ")]
    assert drawn == SAMPLE.split()


def test_lines_are_filled_greedily_within_content_width() -> None:
    layout = layout_text(SAMPLE)
    lines = list(layout.lines())

    assert len(lines) > 1
    for current, following in zip(lines, lines[1:]):
        assert _width(current.text) <= TEXT_PAGE.content_width
        next_token = following.text.split(" ")[0]
        assert _width(f"{current.text} {next_token}") > TEXT_PAGE.content_width


def test_lines_start_at_left_margin_inside_vertical_bounds() -> None:
    layout = layout_text(SAMPLE)
    top = TEXT_PAGE.height - TEXT_PAGE.margin

    for page in layout.pages:
        assert page[0].y == top
        for line in page:
            assert line.x == TEXT_PAGE.margin
            assert TEXT_PAGE.margin <= line.y <= top


def test_pagination_starts_new_page_below_bottom_margin() -> None:
    # Each token is wider than half the content width, so one token per line.
    token = "x" * 60
    layout = layout_text(" ".join([token] * 120))

    assert layout.page_count == 3
    assert [len(page) for page in layout.pages] == [52, 52, 16]


def test_overlong_token_is_placed_unsplit_on_its_own_line() -> None:
    long_token = "W" * 100
    layout = layout_text(f"a {long_token} b")

    assert [line.text for line in layout.lines()] == ["a", long_token, "b"]
    assert _width(long_token) > TEXT_PAGE.content_width


def test_overlong_first_token_does_not_leave_blank_line() -> None:
    long_token = "W" * 100
    layout = layout_text(long_token)

    assert [line.text for line in layout.lines()] == [long_token]


def test_empty_text_yields_single_blank_page() -> None:
    layout = layout_text("   \n\t ")
    assert layout.page_count == 1
    assert layout.pages == [[]]


def test_render_text_produces_matching_pdf() -> None:
    layout = layout_text(SAMPLE)
    reader = PdfReader(io.BytesIO(render_text(SAMPLE.encode("utf-8"))))

    assert len(reader.pages) == layout.page_count
    box = reader.pages[0].mediabox
    assert round(float(box.width), 2) == 595.28
    assert round(float(box.height), 2) == 841.89
    assert "quick brown fox" in reader.pages[0].extract_text()


def test_render_text_is_deterministic() -> None:
    data = b"same input, same bytes"
    assert render_text(data) == render_text(data)


def test_render_text_handles_bom_and_invalid_bytes() -> None:
    reader = PdfReader(io.BytesIO(render_text(b"\xef\xbb\xbfHello \xff world")))

    text = reader.pages[0].extract_text()
    assert "Hello" in text
    assert "?" in text
    assert "world" in text


def test_render_empty_text_has_one_page() -> None:
    reader = PdfReader(io.BytesIO(render_text(b"")))
    assert len(reader.pages) == 1


def test_unsupported_characters_lists_each_once() -> None:
    assert unsupported_characters("café “quoted” €5 – fine") == ""
    assert unsupported_characters("Привет мир, привет") == "Приветмп"


def test_render_text_draws_western_punctuation() -> None:
    reader = PdfReader(io.BytesIO(render_text("café “quoted” €5".encode("utf-8"))))

    assert "café" in reader.pages[0].extract_text()


def test_render_text_rejects_characters_outside_font() -> None:
    with pytest.raises(UnsupportedCharacterError) as excinfo:
        render_text("Hello Привет мир 你好 😀".encode("utf-8"))

    assert "П" in excinfo.value.characters
    assert "你" in excinfo.value.characters
    assert "😀" in excinfo.value.characters
    assert "H" not in excinfo.value.characters


def test_render_text_uses_layout_page_size() -> None:
    geometry = PageGeometry(width=300, height=400, margin=20)
    reader = PdfReader(io.BytesIO(render_text(b"small page", geometry=geometry)))

    box = reader.pages[0].mediabox
    assert (float(box.width), float(box.height)) == (300, 400)
