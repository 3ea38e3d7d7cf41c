"""Test setup for uutik_report."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the real renderer tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run the real pandoc and Chromium renderer",
    )


@pytest.fixture
def report_root(tmp_path: Path) -> Path:
    """A run root with an overview, two situations and two profiles."""
    (tmp_path / "README.md").write_text(
        "# UUTIK\n\n"
        "- [Надя](profiles/nadya.md)\n"
        "- [Саша](profiles/sasha.md)\n"
        "- [Инцидент](situations/2024-01-05-incident.md)\n",
        encoding="utf-8",
    )
    situations = tmp_path / "situations"
    situations.mkdir()
    (situations / "2024-01-05-incident.md").write_text("Incident notes", encoding="utf-8")
    (situations / "2023-12-31-party.md").write_text("Party notes", encoding="utf-8")
    profiles = tmp_path / "profiles"
    profiles.mkdir()
    (profiles / "sasha.md").write_text("Sasha profile", encoding="utf-8")
    (profiles / "nadya.md").write_text("Nadya profile", encoding="utf-8")
    return tmp_path

