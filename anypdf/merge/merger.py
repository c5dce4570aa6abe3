"""Merge functionality for the :mod:`anypdf.merge` package."""

from __future__ import annotations

import io
import logging
from typing import Iterable, Optional

from pypdf import PdfWriter

from ..exceptions import MergeError
from .validators import load_reader

LOGGER = logging.getLogger("anypdf.merge")


def merge_pdfs(documents: Iterable[bytes], *, metadata: bool = True) -> bytes:
    """Concatenate the pages of *documents* and return the merged PDF bytes.

    Pages are appended document by document, each in its original order, so
    the result has as many pages as all inputs together.

    Args:
        documents: PDF byte streams in the order they should appear.
        metadata: When ``True`` the document information of the first input
            that has any is copied into the merged document.

    Raises:
        MergeError: If there is nothing to merge or any input is not a
            readable PDF. No partial result is produced.
    """

    sources = list(documents)
    if not sources:
        raise MergeError("No input PDFs provided")

    writer = PdfWriter()
    first_metadata: Optional[dict[str, str]] = None

    for index, data in enumerate(sources):
        LOGGER.debug("Processing input PDF %d (%d bytes)", index, len(data))
        try:
            reader = load_reader(data)
            for page_index, page in enumerate(reader.pages):
                LOGGER.debug("Adding page %s from input %s", page_index, index)
                writer.add_page(page)
            if metadata and first_metadata is None and reader.metadata:
                first_metadata = {
                    key: str(value)
                    for key, value in reader.metadata.items()
                    if isinstance(key, str) and value is not None
                } or None
        except MergeError:
            raise
        except Exception as exc:
            LOGGER.error("Error merging PDF input %d: %s", index, exc)
            raise MergeError(f"Invalid PDF at position {index}") from exc

    if metadata and first_metadata:
        LOGGER.debug("Setting metadata on merged PDF: %s", first_metadata)
        writer.add_metadata(first_metadata)

    output = io.BytesIO()
    try:
        writer.write(output)
    except Exception as exc:  # pragma: no cover - serialisation errors vary
        LOGGER.error("Failed to serialise merged PDF: %s", exc)
        raise MergeError("Failed to write merged PDF") from exc

    LOGGER.info("Merged %d PDFs into %d page(s)", len(sources), len(writer.pages))
    return output.getvalue()


__all__ = ["merge_pdfs"]
