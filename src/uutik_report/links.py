"""Anchor identifiers and overview link rewriting."""

from __future__ import annotations

import re

from uutik_report.config import (
    ANCHOR_DISALLOWED_RE,
    ANCHOR_SEPARATOR,
    FIXED_PROFILE_ANCHORS,
    PROFILES_DIR,
    SITUATIONS_DIR,
)

_SITUATION_LINK_RE = re.compile(
    r"\[([^\]]+)\]\(" + re.escape(SITUATIONS_DIR) + r"/([^)]+)\.md\)"
)


def anchor_id(name: str) -> str:
    """Derive an in-document anchor identifier from a file base name.

    The name is lower-cased and every run of characters outside
    ``a-z``, ``0-9`` and ``а-я`` becomes a single ``-``.

    >>> anchor_id("2024-01-05 Incident")
    '2024-01-05-incident'
    """
    return ANCHOR_DISALLOWED_RE.sub(ANCHOR_SEPARATOR, name.lower())


def _profile_link_re(profile: str) -> re.Pattern[str]:
    return re.compile(
        r"\[([^\]]+)\]\("
        + re.escape(f"{PROFILES_DIR}/{profile}.md")
        + r"\)"
    )


_PROFILE_LINK_RES: list[tuple[re.Pattern[str], str]] = [
    (_profile_link_re(profile), anchor)
    for profile, anchor in FIXED_PROFILE_ANCHORS.items()
]


def rewrite_overview_links(text: str) -> str:
    """Point overview links at anchors inside the assembled document.

    Links to the registered profile documents and to any file under
    ``situations/`` are rewritten; link text is kept. Everything else,
    including links to unregistered profiles, is left as is.
    """
    for pattern, anchor in _PROFILE_LINK_RES:
        text = pattern.sub(lambda m, anchor=anchor: f"[{m.group(1)}](#{anchor})", text)

    return _SITUATION_LINK_RE.sub(
        lambda m: f"[{m.group(1)}](#{anchor_id(m.group(2))})", text
    )
