"""Merge utilities for the :mod:`anypdf` toolkit."""

from __future__ import annotations

from ..exceptions import MergeError
from .merger import merge_pdfs
from .validators import PDFInfo, get_pdf_info, load_reader, validate_pdf

__all__ = [
    "merge_pdfs",
    "validate_pdf",
    "get_pdf_info",
    "load_reader",
    "MergeError",
    "PDFInfo",
]
