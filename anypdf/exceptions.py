"""Custom exception types for :mod:`anypdf`."""

from __future__ import annotations


class AnyPdfError(Exception):
    """Base exception for all anypdf related errors."""


class NoInputError(AnyPdfError):
    """Raised when a conversion request carries neither files nor a URL."""

    def __init__(self, message: str = "No files or URL provided") -> None:
        super().__init__(message)


class UnsupportedFormatError(AnyPdfError):
    """Raised when a file's declared media type has no renderer."""

    def __init__(self, media_type: str) -> None:
        super().__init__(f"Unsupported file type: {media_type}")
        self.media_type = media_type


class UnsupportedCharacterError(AnyPdfError):
    """Raised when text contains characters the standard PDF font cannot draw."""

    def __init__(self, characters: str) -> None:
        super().__init__(f"Text contains characters that cannot be rendered: {characters[:20]}")
        self.characters = characters


class ImageDecodeError(AnyPdfError):
    """Raised when an image cannot be decoded or has no usable dimensions."""


class DocumentConversionError(AnyPdfError):
    """Raised when a rich document cannot be turned into HTML or rendered."""


class UrlRenderError(AnyPdfError):
    """Raised when a webpage cannot be navigated to or printed."""

    def __init__(self, url: str, message: str | None = None) -> None:
        super().__init__(message or f"Unable to render URL: {url}")
        self.url = url


class MergeError(AnyPdfError):
    """Raised when the merge operation fails."""


__all__ = [
    "AnyPdfError",
    "NoInputError",
    "UnsupportedFormatError",
    "UnsupportedCharacterError",
    "ImageDecodeError",
    "DocumentConversionError",
    "UrlRenderError",
    "MergeError",
]
