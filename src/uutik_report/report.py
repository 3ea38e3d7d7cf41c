"""Report pipeline: collect, assemble, render."""

from __future__ import annotations

from pathlib import Path

from uutik_report.assembler import assemble_report
from uutik_report.config import default_render_config
from uutik_report.file_utils import format_size_kb
from uutik_report.renderer import render_pdf
from uutik_report.schemas import RenderConfig, ReportResult
from uutik_report.utils.logging_config import get_logger

logger = get_logger(__name__)


async def generate_report(
    root: Path,
    *,
    config: RenderConfig | None = None,
) -> ReportResult:
    """Build the PDF report for the sources under ``root``.

    Args:
        root: Run root holding ``README.md``, ``situations/`` and ``profiles/``.
        config: Render configuration. Uses the fixed configuration if None.

    Returns:
        Output location and statistics of the written report.

    Raises:
        ConversionError: If the markdown cannot be converted to HTML.
        RenderError: If the PDF cannot be printed.
    """
    render_config = config or default_render_config(root)
    logger.info("📄 Генерация PDF отчёта...")

    document = await assemble_report(root)

    logger.info("🔄 Конвертация в PDF...")
    output_path = await render_pdf(document.content, render_config)

    result = ReportResult(
        output_path=output_path,
        size_bytes=output_path.stat().st_size,
        situations=document.situations,
        profiles=document.profiles,
    )
    logger.info("✅ PDF отчёт создан: %s", result.output_path)
    logger.info("📊 Размер файла: %s", format_size_kb(result.size_bytes))
    logger.info("📝 Включено ситуаций: %d", result.situations)
    logger.info("👥 Включено профилей: %d", result.profiles)
    return result
