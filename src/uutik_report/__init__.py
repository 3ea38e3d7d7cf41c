"""uutik_report: assemble markdown notes into a single PDF report."""

from uutik_report.assembler import assemble, assemble_report
from uutik_report.collector import collect_groups, get_markdown_files
from uutik_report.exceptions import ConversionError, RenderError, ReportError
from uutik_report.links import anchor_id, rewrite_overview_links
from uutik_report.renderer import render_pdf
from uutik_report.report import generate_report
from uutik_report.schemas import AssembledDocument, DocumentSource, ReportResult, SectionGroup

__all__ = [
    "AssembledDocument",
    "ConversionError",
    "DocumentSource",
    "RenderError",
    "ReportError",
    "ReportResult",
    "SectionGroup",
    "anchor_id",
    "assemble",
    "assemble_report",
    "collect_groups",
    "generate_report",
    "get_markdown_files",
    "render_pdf",
    "rewrite_overview_links",
]
