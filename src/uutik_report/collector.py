"""Discover and order the markdown sources of a report."""

from __future__ import annotations

import logging
from pathlib import Path

from uutik_report.config import (
    MARKDOWN_SUFFIX,
    PROFILE_ANCHOR_PREFIX,
    PROFILE_HEADING_LABEL,
    PROFILES_DIR,
    PROFILES_EMPTY,
    PROFILES_PROGRESS,
    PROFILES_TITLE,
    SITUATIONS_DIR,
    SITUATIONS_EMPTY,
    SITUATIONS_PROGRESS,
    SITUATIONS_TITLE,
)
from uutik_report.schemas import DocumentSource, SectionGroup


def get_markdown_files(directory: Path) -> list[DocumentSource]:
    """List markdown files in ``directory`` sorted by file name.

    A missing directory yields an empty list. Sorting is a plain ascending
    sort on the file name, so date-prefixed names come out chronologically.

    Args:
        directory: Directory to scan (not recursive).

    Returns:
        Document sources in inclusion order.
    """
    if not directory.is_dir():
        return []

    names = sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file()
    )
    return [DocumentSource.from_path(directory / name) for name in names]


def collect_groups(root: Path) -> list[SectionGroup]:
    """Build the section groups of a report in their fixed order."""
    situations = SectionGroup(
        key="situations",
        title=SITUATIONS_TITLE,
        progress_message=SITUATIONS_PROGRESS,
        empty_message=SITUATIONS_EMPTY,
        empty_log_level=logging.INFO,
        sources=get_markdown_files(root / SITUATIONS_DIR),
    )
    profiles = SectionGroup(
        key="profiles",
        title=PROFILES_TITLE,
        progress_message=PROFILES_PROGRESS,
        empty_message=PROFILES_EMPTY,
        anchor_prefix=PROFILE_ANCHOR_PREFIX,
        heading_label=PROFILE_HEADING_LABEL,
        empty_log_level=logging.WARNING,
        sources=get_markdown_files(root / PROFILES_DIR),
    )
    return [situations, profiles]
