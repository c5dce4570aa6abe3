"""Raster image to single-page PDF rendering."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image, ImageOps, UnidentifiedImageError
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..exceptions import ImageDecodeError
from ..types import IMAGE_PAGE, PageGeometry

LOGGER = logging.getLogger("anypdf.render.image")

BACKGROUND = (255, 255, 255)


@dataclass(frozen=True)
class Placement:
    """Where and how large an image is drawn on its page."""

    x: float
    y: float
    width: float
    height: float

    @property
    def pixel_size(self) -> tuple[int, int]:
        return (max(1, round(self.width)), max(1, round(self.height)))


def fit_contain(width: int, height: int, geometry: PageGeometry = IMAGE_PAGE) -> Placement:
    """Scale ``width`` x ``height`` to fit the content area and centre it.

    The aspect ratio is preserved: the image takes the full content width
    unless that would make it taller than the content area, in which case it
    takes the full content height instead.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    aspect_ratio = width / height
    target_width = geometry.content_width
    target_height = target_width / aspect_ratio

    if target_height > geometry.content_height:
        target_height = geometry.content_height
        target_width = target_height * aspect_ratio

    return Placement(
        x=(geometry.width - target_width) / 2,
        y=(geometry.height - target_height) / 2,
        width=target_width,
        height=target_height,
    )


def _open_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as exc:
        LOGGER.error("Failed to decode image (%d bytes): %s", len(data), exc)
        raise ImageDecodeError("Could not get image dimensions") from exc

    if not image.width or not image.height:
        LOGGER.error("Decoded image has no dimensions")
        raise ImageDecodeError("Could not get image dimensions")
    return image


def _flatten(image: Image.Image) -> Image.Image:
    """Return an RGB copy of *image* with any transparency composited on white."""

    has_alpha = image.mode in {"RGBA", "LA", "PA"} or (
        image.mode == "P" and "transparency" in image.info
    )
    if not has_alpha:
        return image.convert("RGB")

    rgba = image.convert("RGBA")
    background = Image.new("RGB", rgba.size, BACKGROUND)
    background.paste(rgba, mask=rgba.getchannel("A"))
    return background


def render_image(
    data: bytes,
    media_type: str,
    *,
    geometry: PageGeometry = IMAGE_PAGE,
) -> bytes:
    """Place the image in *data* on a single page and return the PDF bytes.

    The image is resized to its target size before embedding and always
    re-encoded as PNG, whatever format it was uploaded in.
    """

    with _open_image(data) as image:
        LOGGER.debug(
            "Decoded %s image %dx%d (mode %s)",
            media_type,
            image.width,
            image.height,
            image.mode,
        )
        placement = fit_contain(image.width, image.height, geometry)
        resized = ImageOps.pad(
            _flatten(image),
            placement.pixel_size,
            method=Image.Resampling.LANCZOS,
            color=BACKGROUND,
        )

    encoded = io.BytesIO()
    resized.save(encoded, format="PNG")
    encoded.seek(0)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=geometry.size, invariant=1)
    pdf.drawImage(
        ImageReader(encoded),
        placement.x,
        placement.y,
        width=placement.width,
        height=placement.height,
    )
    pdf.showPage()
    pdf.save()

    LOGGER.info(
        "Rendered %s image at %dx%d on a %gx%g page",
        media_type,
        *placement.pixel_size,
        geometry.width,
        geometry.height,
    )
    return buffer.getvalue()


__all__ = ["Placement", "fit_contain", "render_image"]
