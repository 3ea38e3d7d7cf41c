"""Source document and assembly models."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field


class DocumentSource(BaseModel):
    """A markdown file discovered on disk.

    Attributes:
        path: Absolute path to the file.
        name: File name without the ``.md`` extension; used for the section
            heading and the anchor identifier.
    """

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> "DocumentSource":
        # Names come from the listing entry, not from a symlink target.
        return cls(path=path.absolute(), name=path.stem)

    @property
    def file_name(self) -> str:
        return self.path.name


class SectionGroup(BaseModel):
    """Documents from one directory, rendered as one labeled block.

    Attributes:
        key: Short group name ("situations", "profiles").
        title: Heading inserted before the first member.
        anchor_prefix: Literal prepended to each member's anchor identifier.
        heading_label: Literal prepended to each member's heading text.
        progress_message: Logged before the group is read.
        empty_message: Logged when the group has no members.
        empty_log_level: Level of the notice logged when the group is empty.
        sources: Members in inclusion order.
    """

    key: str
    title: str
    anchor_prefix: str = ""
    heading_label: str = ""
    progress_message: str = ""
    empty_message: str = ""
    empty_log_level: int = logging.INFO
    sources: list[DocumentSource] = Field(default_factory=list)


class AssembledDocument(BaseModel):
    """Single markdown buffer handed to the renderer."""

    content: str
    has_overview: bool = False
    situations: int = 0
    profiles: int = 0
