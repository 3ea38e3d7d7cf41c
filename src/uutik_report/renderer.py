"""Render assembled markdown into a paginated PDF.

Markdown is converted to HTML by pandoc, then printed to PDF by headless
Chromium (Playwright), which resolves the page number placeholders of the
header and footer templates.
"""

from __future__ import annotations

import asyncio
import subprocess
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from uutik_report.exceptions import ConversionError, RenderError
from uutik_report.schemas import RenderConfig
from uutik_report.utils.logging_config import get_logger

logger = get_logger(__name__)

_PANDOC_ARGS = ["pandoc", "-f", "gfm", "-t", "html", "--wrap=none"]


def convert_markdown_to_html(markdown: str) -> str:
    """Convert markdown to an HTML fragment using pandoc (sync version).

    Raw inline HTML such as the ``<a id>`` anchor markers is kept.

    Args:
        markdown: Markdown text.

    Returns:
        HTML fragment without ``<html>``/``<body>`` wrappers.

    Raises:
        ConversionError: If pandoc is not available or conversion fails.
    """
    try:
        result = subprocess.run(
            _PANDOC_ARGS,
            input=markdown,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as exc:
        raise ConversionError("pandoc executable not found") from exc

    if result.returncode != 0:
        raise ConversionError(f"Pandoc conversion failed: {result.stderr}")

    return result.stdout


def build_html_page(body: str, css: str) -> str:
    """Wrap an HTML fragment in a standalone page with the given stylesheet."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<style>{css}</style>\n"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


async def print_pdf(html: str, config: RenderConfig) -> Path:
    """Print an HTML page to ``config.dest`` with headless Chromium.

    Raises:
        RenderError: If the browser cannot be launched or printing fails.
    """
    try:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(args=config.launch_args)
            try:
                page = await browser.new_page()
                await page.set_content(html, wait_until="networkidle")
                await page.pdf(
                    path=str(config.dest),
                    **config.pdf_options.as_print_kwargs(),
                )
            finally:
                await browser.close()
    except PlaywrightError as exc:
        raise RenderError(exc.message) from exc

    return config.dest


async def render_pdf(markdown: str, config: RenderConfig) -> Path:
    """Render assembled markdown to the PDF described by ``config``.

    Args:
        markdown: Assembled markdown document.
        config: Destination, stylesheet and print options.

    Returns:
        Path of the written PDF.

    Raises:
        ConversionError: If markdown cannot be converted to HTML.
        RenderError: If the PDF cannot be printed.
    """
    # Blocking subprocess call wrapped in a thread
    body = await asyncio.to_thread(convert_markdown_to_html, markdown)
    html = build_html_page(body, config.css)
    logger.debug("Printing %d bytes of HTML to %s", len(html), config.dest)
    return await print_pdf(html, config)
