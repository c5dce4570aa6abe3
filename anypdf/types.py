"""Value types shared across the conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page size and uniform margin used by the page renderers."""

    width: float
    height: float
    margin: float

    def __post_init__(self) -> None:
        if self.content_width <= 0 or self.content_height <= 0:
            raise ValueError(
                f"Margin {self.margin} leaves no content area on a "
                f"{self.width}x{self.height} page"
            )

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)


# A4 in points.
TEXT_PAGE = PageGeometry(width=595.276, height=841.890, margin=50)
# A4 at 96 dpi; drawn one unit per PDF point.
IMAGE_PAGE = PageGeometry(width=794, height=1123, margin=40)


class MediaType(str, Enum):
    """Media types accepted for file inputs."""

    TEXT_PLAIN = "text/plain"
    TEXT_RTF = "text/rtf"
    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    WEBP = "image/webp"
    BMP = "image/bmp"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class InputKind(str, Enum):
    FILE = "file"
    URL = "url"


@dataclass(frozen=True)
class FileInput:
    """An uploaded file together with the media type its sender declared."""

    kind: ClassVar[InputKind] = InputKind.FILE

    media_type: str
    data: bytes = field(repr=False)
    filename: str | None = None


@dataclass(frozen=True)
class UrlInput:
    """A webpage to be printed to PDF."""

    kind: ClassVar[InputKind] = InputKind.URL

    value: str


ConversionInput = Union[FileInput, UrlInput]


__all__ = [
    "PageGeometry",
    "TEXT_PAGE",
    "IMAGE_PAGE",
    "MediaType",
    "InputKind",
    "FileInput",
    "UrlInput",
    "ConversionInput",
]
