"""Request-level orchestration: fan out conversions, then merge in order."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from .config import Settings
from .dispatch import render_input
from .exceptions import AnyPdfError, NoInputError
from .merge import merge_pdfs
from .render.browser import PlaywrightEngine, RenderEngine
from .types import ConversionInput, FileInput, UrlInput

LOGGER = logging.getLogger("anypdf.orchestrator")


def build_inputs(files: Iterable[FileInput], url: str | None = None) -> list[ConversionInput]:
    """Return the inputs in merge order: the URL first, then files as submitted."""

    inputs: list[ConversionInput] = []
    if url is not None and url.strip():
        inputs.append(UrlInput(url.strip()))
    inputs.extend(files)
    return inputs


async def _render_checked(position: int, item: ConversionInput, engine: RenderEngine) -> bytes:
    pdf_bytes = await render_input(item, engine)
    if not pdf_bytes:
        LOGGER.error("Input %d (%s) produced an empty document", position, item.kind.value)
        raise AnyPdfError(f"Conversion of input {position} produced no output")
    return pdf_bytes


async def render_all(inputs: Sequence[ConversionInput], engine: RenderEngine) -> list[bytes]:
    """Render every input concurrently and return the PDFs in input order.

    The first failure cancels the conversions that are still running and is
    re-raised; no partial list is returned.
    """

    tasks = [
        asyncio.create_task(_render_checked(position, item, engine))
        for position, item in enumerate(inputs)
    ]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        raise


async def convert(
    files: Iterable[FileInput] = (),
    url: str | None = None,
    *,
    engine: RenderEngine | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Convert *files* and *url* to PDF and return one merged document.

    Raises:
        NoInputError: If there is neither a file nor a URL. Nothing is
            rendered in that case.
        AnyPdfError: If any single conversion or the merge fails.
    """

    inputs = build_inputs(files, url)
    if not inputs:
        raise NoInputError()

    if engine is None:
        engine = PlaywrightEngine(settings)

    LOGGER.info("Converting %d input(s)", len(inputs))
    documents = await render_all(inputs, engine)
    merged = merge_pdfs(documents)
    LOGGER.info("Conversion finished: %d input(s), %d bytes", len(inputs), len(merged))
    return merged


def convert_sync(
    files: Iterable[FileInput] = (),
    url: str | None = None,
    *,
    engine: RenderEngine | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Blocking wrapper around :func:`convert` for synchronous callers."""

    return asyncio.run(convert(files, url, engine=engine, settings=settings))


__all__ = ["build_inputs", "render_all", "convert", "convert_sync"]
