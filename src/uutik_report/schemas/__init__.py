"""Shared schemas for uutik_report."""

from uutik_report.schemas.document import AssembledDocument, DocumentSource, SectionGroup
from uutik_report.schemas.render import PageMargin, PdfOptions, RenderConfig, ReportResult

__all__ = [
    "AssembledDocument",
    "DocumentSource",
    "PageMargin",
    "PdfOptions",
    "RenderConfig",
    "ReportResult",
    "SectionGroup",
]
