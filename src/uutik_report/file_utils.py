"""File helpers for reading sources and reporting output size."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a whole text file in a worker thread.

    Undecodable bytes are replaced with U+FFFD instead of failing the read.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding, errors="replace")


def format_size_kb(size_bytes: int) -> str:
    """Format a byte count as kilobytes with two decimals (e.g. "12.50 KB")."""
    return f"{size_bytes / 1024:.2f} KB"
