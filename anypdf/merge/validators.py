"""Validation utilities for the :mod:`anypdf.merge` package."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Dict

from pypdf import PdfReader

from ..exceptions import MergeError

LOGGER = logging.getLogger("anypdf.merge")


@dataclass(frozen=True)
class PDFInfo:
    """Summary information describing a PDF document."""

    num_pages: int
    is_encrypted: bool
    metadata: Dict[str, Any]

    @property
    def title(self) -> str | None:
        value = self.metadata.get("/Title")
        return str(value) if value else None


def load_reader(data: bytes) -> PdfReader:
    """Open *data* with :class:`~pypdf.PdfReader`, decrypting it if needed.

    ``MergeError`` is raised if the bytes are not a readable PDF or if an
    encrypted document cannot be opened with an empty password.
    """

    try:
        reader = PdfReader(io.BytesIO(data))
    except Exception as exc:  # pragma: no cover - dependency exceptions vary
        LOGGER.error("Failed to read PDF (%d bytes): %s", len(data), exc)
        raise MergeError("Unable to read PDF") from exc

    if reader.is_encrypted:
        LOGGER.debug("Attempting to decrypt encrypted PDF")
        try:
            reader.decrypt("")
        except Exception as exc:  # pragma: no cover - decrypt errors vary
            LOGGER.error("Encrypted PDF cannot be decrypted: %s", exc)
            raise MergeError("Unable to decrypt encrypted PDF") from exc

    return reader


def validate_pdf(data: bytes) -> bool:
    """Return ``True`` if *data* is a PDF whose page tree can be read."""

    reader = load_reader(data)
    try:
        len(reader.pages)
    except Exception as exc:
        LOGGER.error("PDF page tree is unreadable: %s", exc)
        raise MergeError("PDF page tree is unreadable") from exc
    return True


def get_pdf_info(data: bytes) -> PDFInfo:
    """Return :class:`PDFInfo` describing the PDF held in *data*."""

    reader = load_reader(data)

    metadata: Dict[str, Any] = {}
    if reader.metadata:
        metadata = {
            key: value
            for key, value in reader.metadata.items()
            if value is not None
        }

    info = PDFInfo(
        num_pages=len(reader.pages),
        is_encrypted=reader.is_encrypted,
        metadata=metadata,
    )
    LOGGER.debug("PDF info: pages=%s, encrypted=%s", info.num_pages, info.is_encrypted)
    return info


__all__ = ["PDFInfo", "load_reader", "validate_pdf", "get_pdf_info"]
