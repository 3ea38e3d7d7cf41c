"""Fixed layout and presentation settings for the report."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from uutik_report.schemas import PageMargin, PdfOptions, RenderConfig

# Input layout, relative to the run root.
OVERVIEW_FILE: Final[str] = "README.md"
SITUATIONS_DIR: Final[str] = "situations"
PROFILES_DIR: Final[str] = "profiles"
MARKDOWN_SUFFIX: Final[str] = ".md"

OUTPUT_FILE: Final[str] = "uutik-report.pdf"

SITUATIONS_TITLE: Final[str] = "📁 Записанные ситуации"
PROFILES_TITLE: Final[str] = "👥 Профили участников"
PROFILE_ANCHOR_PREFIX: Final[str] = "profile-"
PROFILE_HEADING_LABEL: Final[str] = "Профиль: "

SITUATIONS_PROGRESS: Final[str] = "📋 Добавляем ситуации..."
SITUATIONS_EMPTY: Final[str] = "  ℹ️ Ситуации не найдены"
PROFILES_PROGRESS: Final[str] = "👥 Добавляем профили..."
PROFILES_EMPTY: Final[str] = "  ⚠️ Профили не найдены"

# Only these profile documents are rewritten to anchors in the overview.
FIXED_PROFILE_ANCHORS: Final[dict[str, str]] = {
    "nadya": "profile-nadya",
    "sasha": "profile-sasha",
}

# Anything outside this alphabet collapses into a single separator.
ANCHOR_DISALLOWED_RE: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9а-я]+")
ANCHOR_SEPARATOR: Final[str] = "-"

PAGE_FORMAT: Final[str] = "A4"
PAGE_MARGIN: Final[PageMargin] = PageMargin(
    top="20mm", right="15mm", bottom="20mm", left="15mm"
)

HEADER_TEMPLATE: Final[str] = (
    '<div style="font-size: 10px; text-align: center; width: 100%;">'
    "UUTIK - Контекст и профили"
    "</div>"
)
FOOTER_TEMPLATE: Final[str] = (
    '<div style="font-size: 10px; text-align: center; width: 100%;">'
    '<span class="pageNumber"></span> / <span class="totalPages"></span>'
    "</div>"
)

BROWSER_LAUNCH_ARGS: Final[tuple[str, ...]] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
)

_FONT_STACK = (
    "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, "
    "'Noto Color Emoji', sans-serif"
)

STYLESHEET: Final[str] = f"""
@import url('https://fonts.googleapis.com/css2?family=Noto+Color+Emoji&display=swap');
body {{ font-family: {_FONT_STACK}; line-height: 1.6; color: #333; }}
h1 {{ color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; margin-top: 30px; font-family: {_FONT_STACK}; }}
h2 {{ color: #34495e; border-bottom: 2px solid #95a5a6; padding-bottom: 8px; margin-top: 25px; font-family: {_FONT_STACK}; }}
h3 {{ color: #7f8c8d; margin-top: 20px; font-family: {_FONT_STACK}; }}
code {{ background-color: #f4f4f4; padding: 2px 6px; border-radius: 3px; font-family: 'Courier New', monospace; }}
pre {{ background-color: #f8f8f8; padding: 15px; border-left: 4px solid #3498db; overflow-x: auto; }}
blockquote {{ border-left: 4px solid #e74c3c; padding-left: 15px; color: #555; font-style: italic; margin: 15px 0; }}
ul, ol {{ padding-left: 25px; }}
li {{ margin: 5px 0; }}
hr {{ border: none; border-top: 2px solid #ecf0f1; margin: 30px 0; }}
strong {{ color: #2c3e50; }}
em {{ color: #7f8c8d; }}
"""


def default_render_config(root: Path) -> RenderConfig:
    """Build the fixed render configuration for a run rooted at ``root``."""
    return RenderConfig(
        dest=root / OUTPUT_FILE,
        css=STYLESHEET,
        launch_args=list(BROWSER_LAUNCH_ARGS),
        pdf_options=PdfOptions(
            format=PAGE_FORMAT,
            margin=PAGE_MARGIN,
            print_background=True,
            display_header_footer=True,
            header_template=HEADER_TEMPLATE,
            footer_template=FOOTER_TEMPLATE,
        ),
    )
