"""Convert text files, images, Word documents and webpages into one PDF."""

from __future__ import annotations

from . import merge, render
from .config import Settings, load_settings
from .dispatch import (
    RendererKind,
    render_input,
    resolve_media_type,
    select_renderer,
    supported_media_types,
)
from .exceptions import (
    AnyPdfError,
    DocumentConversionError,
    ImageDecodeError,
    MergeError,
    NoInputError,
    UnsupportedCharacterError,
    UnsupportedFormatError,
    UrlRenderError,
)
from .merge import PDFInfo, get_pdf_info, merge_pdfs, validate_pdf
from .orchestrator import build_inputs, convert, convert_sync, render_all
from .render import PlaywrightEngine, RenderEngine
from .types import (
    IMAGE_PAGE,
    TEXT_PAGE,
    ConversionInput,
    FileInput,
    InputKind,
    MediaType,
    PageGeometry,
    UrlInput,
)

__version__ = "0.1.0"

__all__ = [
    "merge",
    "render",
    "Settings",
    "load_settings",
    "RendererKind",
    "render_input",
    "resolve_media_type",
    "select_renderer",
    "supported_media_types",
    "AnyPdfError",
    "DocumentConversionError",
    "ImageDecodeError",
    "MergeError",
    "NoInputError",
    "UnsupportedCharacterError",
    "UnsupportedFormatError",
    "UrlRenderError",
    "PDFInfo",
    "get_pdf_info",
    "merge_pdfs",
    "validate_pdf",
    "build_inputs",
    "convert",
    "convert_sync",
    "render_all",
    "PlaywrightEngine",
    "RenderEngine",
    "IMAGE_PAGE",
    "TEXT_PAGE",
    "ConversionInput",
    "FileInput",
    "InputKind",
    "MediaType",
    "PageGeometry",
    "UrlInput",
]
