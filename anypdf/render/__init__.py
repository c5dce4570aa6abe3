"""Per-format renderers producing single-source PDF documents."""

from __future__ import annotations

from .browser import PlaywrightEngine, RenderEngine
from .document import build_html_page, docx_to_html, render_document
from .image import Placement, fit_contain, render_image
from .text import TextLayout, TextLine, layout_text, render_text
from .url import render_url

__all__ = [
    "RenderEngine",
    "PlaywrightEngine",
    "docx_to_html",
    "build_html_page",
    "render_document",
    "Placement",
    "fit_contain",
    "render_image",
    "TextLayout",
    "TextLine",
    "layout_text",
    "render_text",
    "render_url",
]
