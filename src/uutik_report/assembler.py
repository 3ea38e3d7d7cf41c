"""Assemble the overview and section groups into one markdown document."""

from __future__ import annotations

from pathlib import Path

from uutik_report.collector import collect_groups
from uutik_report.config import OVERVIEW_FILE
from uutik_report.file_utils import read_text_async
from uutik_report.links import anchor_id, rewrite_overview_links
from uutik_report.schemas import AssembledDocument, DocumentSource, SectionGroup
from uutik_report.utils.logging_config import get_logger

logger = get_logger(__name__)


def section_separator(title: str) -> str:
    """Return the block that opens a section group."""
    return f"\n\n---\n\n# {title}\n\n"


def render_member(source: DocumentSource, group: SectionGroup, content: str) -> str:
    """Return one group member: anchor marker, level-2 heading, raw content."""
    anchor = f"{group.anchor_prefix}{anchor_id(source.name)}"
    heading = f"{group.heading_label}{source.name}"
    return f'\n\n<a id="{anchor}"></a>\n## {heading}\n\n{content}'


def assemble(
    overview: str | None,
    groups: list[SectionGroup],
    contents: dict[Path, str],
) -> str:
    """Concatenate the overview and the non-empty groups in order.

    Args:
        overview: Overview markdown, or None when there is no overview.
            Links are rewritten here; member contents are used verbatim.
        groups: Section groups in output order.
        contents: Raw file contents keyed by source path.

    Returns:
        The assembled markdown.
    """
    parts: list[str] = []
    if overview is not None:
        parts.append(rewrite_overview_links(overview))

    for group in groups:
        if not group.sources:
            continue
        parts.append(section_separator(group.title))
        for source in group.sources:
            parts.append(render_member(source, group, contents[source.path]))

    return "".join(parts)


async def assemble_report(root: Path) -> AssembledDocument:
    """Read the report sources under ``root`` and assemble them.

    A missing overview or an empty group is logged and skipped.
    """
    logger.info("📖 Добавляем %s...", OVERVIEW_FILE)
    overview_path = root / OVERVIEW_FILE
    overview: str | None = None
    if overview_path.is_file():
        overview = await read_text_async(overview_path)
    else:
        logger.warning("⚠️ %s не найден", OVERVIEW_FILE)

    groups = collect_groups(root)
    contents: dict[Path, str] = {}
    for group in groups:
        logger.info(group.progress_message, extra={"group": group.key})
        if not group.sources:
            logger.log(group.empty_log_level, group.empty_message, extra={"group": group.key})
            continue
        for source in group.sources:
            logger.info("  ✓ %s", source.file_name)
            contents[source.path] = await read_text_async(source.path)

    counts = {group.key: len(group.sources) for group in groups}
    return AssembledDocument(
        content=assemble(overview, groups, contents),
        has_overview=overview is not None,
        situations=counts.get("situations", 0),
        profiles=counts.get("profiles", 0),
    )
