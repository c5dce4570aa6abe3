"""Routing of conversion inputs to the renderer for their format."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from .exceptions import UnsupportedFormatError
from .render.browser import RenderEngine
from .render.document import render_document
from .render.image import render_image
from .render.text import render_text
from .render.url import render_url
from .types import ConversionInput, FileInput, MediaType, UrlInput

LOGGER = logging.getLogger("anypdf.dispatch")


class RendererKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    URL = "url"


_ROUTES: dict[MediaType, RendererKind] = {
    MediaType.TEXT_PLAIN: RendererKind.TEXT,
    MediaType.TEXT_RTF: RendererKind.TEXT,
    MediaType.JPEG: RendererKind.IMAGE,
    MediaType.PNG: RendererKind.IMAGE,
    MediaType.GIF: RendererKind.IMAGE,
    MediaType.WEBP: RendererKind.IMAGE,
    MediaType.BMP: RendererKind.IMAGE,
    MediaType.DOCX: RendererKind.DOCUMENT,
}


def supported_media_types() -> tuple[str, ...]:
    """Return every media type accepted for file inputs."""

    return tuple(media_type.value for media_type in _ROUTES)


def resolve_media_type(value: str) -> MediaType:
    """Return the :class:`MediaType` whose value is exactly *value*."""

    try:
        return MediaType(value)
    except ValueError:
        raise UnsupportedFormatError(value) from None


def select_renderer(item: ConversionInput) -> RendererKind:
    """Pick the renderer responsible for *item*."""

    if isinstance(item, UrlInput):
        return RendererKind.URL
    if isinstance(item, FileInput):
        return _ROUTES[resolve_media_type(item.media_type)]
    raise TypeError(f"Unknown conversion input: {item!r}")


async def render_input(item: ConversionInput, engine: RenderEngine) -> bytes:
    """Convert a single input to PDF bytes.

    Text and image rendering are CPU bound and run in a worker thread so that
    several inputs can be converted while the event loop drives the browser.
    """

    try:
        kind = select_renderer(item)
    except UnsupportedFormatError as exc:
        LOGGER.error(
            "Error converting file %s to PDF: %s",
            getattr(item, "filename", None) or "<unnamed>",
            exc,
        )
        raise

    LOGGER.debug("Dispatching %s input to %s renderer", item.kind.value, kind.value)

    if kind is RendererKind.URL:
        return await render_url(item.value, engine)
    if kind is RendererKind.TEXT:
        return await asyncio.to_thread(render_text, item.data)
    if kind is RendererKind.IMAGE:
        return await asyncio.to_thread(render_image, item.data, item.media_type)
    return await render_document(item.data, engine)


__all__ = [
    "RendererKind",
    "supported_media_types",
    "resolve_media_type",
    "select_renderer",
    "render_input",
]
