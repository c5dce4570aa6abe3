"""Plain text to PDF rendering with word wrapping and pagination."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Iterator

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..exceptions import UnsupportedCharacterError
from ..types import TEXT_PAGE, PageGeometry

LOGGER = logging.getLogger("anypdf.render.text")

FONT_NAME = "Times-Roman"
FONT_SIZE = 12
LINE_HEIGHT = FONT_SIZE * 1.2

# Built-in Type 1 fonts are drawn with WinAnsiEncoding.
FONT_ENCODING = "cp1252"


@dataclass(frozen=True)
class TextLine:
    """A single line of text anchored at its baseline origin."""

    text: str
    x: float
    y: float


@dataclass
class TextLayout:
    """Lines grouped per page, in drawing order."""

    geometry: PageGeometry
    pages: list[list[TextLine]] = field(default_factory=lambda: [[]])

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def lines(self) -> Iterator[TextLine]:
        for page in self.pages:
            yield from page


def layout_text(
    text: str,
    *,
    geometry: PageGeometry = TEXT_PAGE,
    font_name: str = FONT_NAME,
    font_size: float = FONT_SIZE,
    line_height: float = LINE_HEIGHT,
) -> TextLayout:
    """Greedily wrap *text* into lines that fit the content width of *geometry*.

    Lines only break on whitespace. A token that is wider than the content
    area on its own is still placed on a line by itself and overflows the
    right margin. When the baseline drops below the bottom margin a new page
    is started at the top margin.
    """

    layout = TextLayout(geometry=geometry)
    max_width = geometry.content_width
    top = geometry.height - geometry.margin
    y = top
    line = ""

    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if not line or stringWidth(candidate, font_name, font_size) <= max_width:
            line = candidate
            continue

        layout.pages[-1].append(TextLine(line, geometry.margin, y))
        y -= line_height
        line = word

        if y < geometry.margin:
            LOGGER.debug("Starting text page %d", len(layout.pages) + 1)
            layout.pages.append([])
            y = top

    if line:
        layout.pages[-1].append(TextLine(line, geometry.margin, y))

    return layout


def unsupported_characters(text: str) -> str:
    """Return the distinct characters of *text* that :data:`FONT_NAME` cannot draw."""

    missing: dict[str, None] = {}
    for char in text:
        if char.isspace() or char in missing:
            continue
        try:
            char.encode(FONT_ENCODING)
        except UnicodeEncodeError:
            missing[char] = None
    return "".join(missing)


def render_text(data: bytes, *, geometry: PageGeometry = TEXT_PAGE) -> bytes:
    """Render UTF-8 encoded *data* into a PDF and return its bytes.

    Undecodable bytes become ``?``. Characters outside the standard font's
    encoding raise :class:`UnsupportedCharacterError` instead of being drawn
    as placeholder glyphs.
    """

    text = data.decode("utf-8-sig", errors="replace").replace("\ufffd", "?")
    missing = unsupported_characters(text)
    if missing:
        LOGGER.error(
            "Error converting text to PDF: %d unsupported character(s) %r",
            len(missing),
            missing[:20],
        )
        raise UnsupportedCharacterError(missing)

    layout = layout_text(text, geometry=geometry)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=layout.geometry.size, invariant=1)
    for page in layout.pages:
        pdf.setFont(FONT_NAME, FONT_SIZE)
        pdf.setFillColorRGB(0, 0, 0)
        for line in page:
            pdf.drawString(line.x, line.y, line.text)
        pdf.showPage()
    pdf.save()

    LOGGER.info(
        "Rendered %d characters of text onto %d page(s)",
        len(text),
        layout.page_count,
    )
    return buffer.getvalue()


__all__ = [
    "FONT_NAME",
    "FONT_SIZE",
    "LINE_HEIGHT",
    "FONT_ENCODING",
    "TextLine",
    "TextLayout",
    "layout_text",
    "unsupported_characters",
    "render_text",
]
