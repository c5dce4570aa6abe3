"""Headless Chromium rendering used for HTML documents and webpages."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Protocol

from playwright.async_api import Page, async_playwright

from ..config import Settings, load_settings

LOGGER = logging.getLogger("anypdf.render.browser")


class RenderEngine(Protocol):
    """Anything able to print HTML markup or a live webpage to PDF bytes."""

    async def html_to_pdf(self, html: str) -> bytes:
        ...

    async def url_to_pdf(self, url: str) -> bytes:
        ...


class PlaywrightEngine:
    """:class:`RenderEngine` backed by a short-lived Playwright Chromium browser.

    A fresh browser is launched for every render, so concurrent renders do not
    share any state. Navigation and printing are bounded by
    ``settings.render_timeout_ms``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or load_settings()

    @asynccontextmanager
    async def _open_page(self) -> AsyncIterator[Page]:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=self.settings.headless)
            try:
                page = await browser.new_page()
                page.set_default_timeout(self.settings.render_timeout_ms)
                page.set_default_navigation_timeout(self.settings.render_timeout_ms)
                yield page
            finally:
                await browser.close()

    async def _print(self, page: Page) -> bytes:
        return await page.pdf(
            format=self.settings.page_format,
            print_background=self.settings.print_background,
        )

    async def html_to_pdf(self, html: str) -> bytes:
        async with self._open_page() as page:
            await page.set_content(html, wait_until="networkidle")
            pdf_bytes = await self._print(page)
        LOGGER.debug("Printed %d characters of HTML to %d PDF bytes", len(html), len(pdf_bytes))
        return pdf_bytes

    async def url_to_pdf(self, url: str) -> bytes:
        async with self._open_page() as page:
            response = await page.goto(url, wait_until="networkidle")
            if response is not None and not response.ok:
                LOGGER.warning("Page %s answered with HTTP %s", url, response.status)
            pdf_bytes = await self._print(page)
        LOGGER.debug("Printed %s to %d PDF bytes", url, len(pdf_bytes))
        return pdf_bytes


__all__ = ["RenderEngine", "PlaywrightEngine"]
