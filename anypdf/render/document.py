"""Word document to PDF rendering via an intermediate HTML representation.

The DOCX body is walked with python-docx and turned into plain semantic HTML
(headings, paragraphs, inline emphasis, hyperlinks, lists and tables). The
conversion is best effort: page layout, floating shapes, images and section
properties are dropped. The HTML is then printed by the rendering engine.
"""

from __future__ import annotations

import asyncio
import html
import io
import logging
import re

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.table import Table
from docx.text.hyperlink import Hyperlink
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from ..exceptions import DocumentConversionError
from .browser import RenderEngine

LOGGER = logging.getLogger("anypdf.render.document")

_HEADING_STYLE = re.compile(r"^Heading ([1-6])$")

_ALIGNMENTS = {
    WD_ALIGN_PARAGRAPH.CENTER: "center",
    WD_ALIGN_PARAGRAPH.RIGHT: "right",
    WD_ALIGN_PARAGRAPH.JUSTIFY: "justify",
}

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
body {{ font-family: "Times New Roman", serif; font-size: 12pt; line-height: 1.3; }}
table {{ border-collapse: collapse; margin: 0.5em 0; }}
td {{ border: 1px solid #999; padding: 2px 6px; vertical-align: top; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def _style_name(paragraph: Paragraph) -> str:
    style = paragraph.style
    return (style.name or "") if style is not None else ""


def _list_tag(paragraph: Paragraph) -> str | None:
    name = _style_name(paragraph)
    if name.startswith("List Bullet"):
        return "ul"
    if name.startswith("List Number"):
        return "ol"
    return None


def _block_tag(paragraph: Paragraph) -> str:
    name = _style_name(paragraph)
    if name == "Title":
        return "h1"
    match = _HEADING_STYLE.match(name)
    if match:
        return f"h{match.group(1)}"
    return "p"


def _run_html(run: Run) -> str:
    text = html.escape(run.text).replace("\n", "<br>").replace("\t", "&emsp;")
    if not text:
        return ""
    if run.font.strike:
        text = f"<s>{text}</s>"
    if run.underline:
        text = f"<u>{text}</u>"
    if run.italic:
        text = f"<em>{text}</em>"
    if run.bold:
        text = f"<strong>{text}</strong>"
    return text


def _inline_html(paragraph: Paragraph) -> str:
    parts: list[str] = []
    for item in paragraph.iter_inner_content():
        if isinstance(item, Hyperlink):
            inner = "".join(_run_html(run) for run in item.runs)
            target = item.address
            if item.fragment:
                target = f"{target}#{item.fragment}"
            if target:
                parts.append(f'<a href="{html.escape(target, quote=True)}">{inner}</a>')
            else:
                parts.append(inner)
        else:
            parts.append(_run_html(item))
    return "".join(parts)


def _paragraph_html(paragraph: Paragraph, tag: str) -> str:
    content = _inline_html(paragraph)
    align = _ALIGNMENTS.get(paragraph.alignment)
    if align:
        return f'<{tag} style="text-align: {align};">{content}</{tag}>'
    return f"<{tag}>{content}</{tag}>"


def _table_html(table: Table) -> str:
    rows: list[str] = []
    for row in table.rows:
        cells = []
        for cell in row.cells:
            body = "".join(
                _paragraph_html(paragraph, "p")
                for paragraph in cell.paragraphs
                if paragraph.text.strip()
            )
            cells.append(f"<td>{body}</td>")
        rows.append(f"<tr>{''.join(cells)}</tr>")
    return f"<table>{''.join(rows)}</table>"


def docx_to_html(data: bytes) -> str:
    """Convert the DOCX document in *data* into an HTML fragment."""

    try:
        document = Document(io.BytesIO(data))
    except Exception as exc:
        LOGGER.error("Unable to open Word document (%d bytes): %s", len(data), exc)
        raise DocumentConversionError("Unable to read Word document") from exc

    parts: list[str] = []
    open_list: str | None = None

    try:
        for block in document.iter_inner_content():
            list_tag = _list_tag(block) if isinstance(block, Paragraph) else None
            if list_tag != open_list:
                if open_list:
                    parts.append(f"</{open_list}>")
                if list_tag:
                    parts.append(f"<{list_tag}>")
                open_list = list_tag

            if isinstance(block, Table):
                parts.append(_table_html(block))
            elif list_tag:
                parts.append(_paragraph_html(block, "li"))
            elif block.text.strip():
                parts.append(_paragraph_html(block, _block_tag(block)))
    except Exception as exc:
        LOGGER.error("Failed to convert Word document body to HTML: %s", exc)
        raise DocumentConversionError("Unable to convert Word document to HTML") from exc

    if open_list:
        parts.append(f"</{open_list}>")

    fragment = "\n".join(parts)
    LOGGER.debug("Converted Word document to %d characters of HTML", len(fragment))
    return fragment


def build_html_page(fragment: str) -> str:
    """Wrap an HTML *fragment* into a standalone UTF-8 document."""

    return _HTML_TEMPLATE.format(body=fragment)


async def render_document(data: bytes, engine: RenderEngine) -> bytes:
    """Render the DOCX document in *data* to PDF bytes using *engine*."""

    fragment = await asyncio.to_thread(docx_to_html, data)
    try:
        pdf_bytes = await engine.html_to_pdf(build_html_page(fragment))
    except Exception as exc:
        LOGGER.error("Failed to render Word document HTML to PDF: %s", exc)
        raise DocumentConversionError("Unable to render Word document to PDF") from exc

    LOGGER.info("Rendered Word document (%d bytes of PDF)", len(pdf_bytes))
    return pdf_bytes


__all__ = ["docx_to_html", "build_html_page", "render_document"]
