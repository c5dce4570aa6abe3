"""Webpage to PDF rendering."""

from __future__ import annotations

import logging

from ..exceptions import UrlRenderError
from .browser import RenderEngine

LOGGER = logging.getLogger("anypdf.render.url")


async def render_url(url: str, engine: RenderEngine) -> bytes:
    """Navigate *engine* to *url* and return the printed page as PDF bytes."""

    LOGGER.debug("Rendering URL %s", url)
    try:
        pdf_bytes = await engine.url_to_pdf(url)
    except Exception as exc:
        LOGGER.error("Error converting URL %s to PDF: %s", url, exc)
        raise UrlRenderError(url) from exc

    LOGGER.info("Rendered URL %s (%d bytes)", url, len(pdf_bytes))
    return pdf_bytes


__all__ = ["render_url"]
