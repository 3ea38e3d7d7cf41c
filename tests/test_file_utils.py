"""Tests for file helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from uutik_report.file_utils import format_size_kb, read_text_async


@pytest.mark.asyncio
async def test_read_text_async_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "note.md"
    path.write_text("Профиль\n", encoding="utf-8")

    assert await read_text_async(path) == "Профиль\n"


@pytest.mark.asyncio
async def test_read_text_async_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await read_text_async(tmp_path / "missing.md")


@pytest.mark.parametrize(
    ("size", "expected"),
    [(0, "0.00 KB"), (1024, "1.00 KB"), (1536, "1.50 KB"), (123456, "120.56 KB")],
)
def test_format_size_kb(size: int, expected: str) -> None:
    assert format_size_kb(size) == expected


@pytest.mark.asyncio
async def test_read_text_async_replaces_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "note.md"
    path.write_bytes(b"ok " + "Ссора".encode("cp1251"))

    result = await read_text_async(path)

    assert result.startswith("ok �")
