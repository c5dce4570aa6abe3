from __future__ import annotations

import asyncio
import io
from pathlib import Path
from typing import Callable
import sys

import pytest
from docx import Document
from PIL import Image
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def make_pdf(pages: int = 1, *, width: float = 72, height: float = 72, title: str | None = None) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=width, height=height)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class FakeEngine:
    """Render engine stand-in that prints blank pages instead of launching Chromium."""

    def __init__(
        self,
        *,
        pages: int = 1,
        width: float = 300,
        fail: Exception | None = None,
        delay: float = 0,
    ) -> None:
        self.pages = pages
        self.width = width
        self.fail = fail
        self.delay = delay
        self.html: list[str] = []
        self.urls: list[str] = []
        self.cancelled = False

    async def _produce(self) -> bytes:
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.fail is not None:
            raise self.fail
        return make_pdf(self.pages, width=self.width, height=400)

    async def html_to_pdf(self, html: str) -> bytes:
        self.html.append(html)
        return await self._produce()

    async def url_to_pdf(self, url: str) -> bytes:
        self.urls.append(url)
        return await self._produce()


@pytest.fixture()
def pdf_factory() -> Callable[..., bytes]:
    return make_pdf


@pytest.fixture()
def image_factory() -> Callable[..., bytes]:
    def _create(
        width: int = 200,
        height: int = 100,
        *,
        fmt: str = "PNG",
        mode: str = "RGB",
        color: object = (200, 30, 30),
    ) -> bytes:
        buffer = io.BytesIO()
        Image.new(mode, (width, height), color).save(buffer, format=fmt)
        return buffer.getvalue()

    return _create


@pytest.fixture()
def docx_bytes() -> bytes:
    document = Document()
    document.add_heading("Quarterly Report", level=1)
    paragraph = document.add_paragraph("Revenue grew ")
    paragraph.add_run("strongly").bold = True
    paragraph.add_run(" this quarter & beyond.")
    document.add_paragraph("First point", style="List Bullet")
    document.add_paragraph("Second point", style="List Bullet")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Region"
    table.cell(0, 1).text = "EMEA"
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture()
def fake_engine() -> FakeEngine:
    return FakeEngine()
