"""Render configuration and result models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class PageMargin(BaseModel):
    """Page margins as CSS lengths."""

    top: str
    right: str
    bottom: str
    left: str


class PdfOptions(BaseModel):
    """Options forwarded to the browser's PDF printer."""

    format: str = "A4"
    margin: PageMargin
    print_background: bool = True
    display_header_footer: bool = True
    header_template: str = ""
    footer_template: str = ""

    def as_print_kwargs(self) -> dict[str, Any]:
        """Return the options as keyword arguments for ``Page.pdf``."""
        return self.model_dump()


class RenderConfig(BaseModel):
    """Everything the renderer needs besides the markdown itself."""

    dest: Path
    css: str = ""
    launch_args: list[str] = Field(default_factory=list)
    pdf_options: PdfOptions


class ReportResult(BaseModel):
    """Outcome of a successful report run."""

    output_path: Path
    size_bytes: int
    situations: int
    profiles: int
