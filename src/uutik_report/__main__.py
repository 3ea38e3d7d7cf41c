"""Command-line entry point: ``python -m uutik_report``."""

from __future__ import annotations

import asyncio
from pathlib import Path

from uutik_report.exceptions import ConversionError, RenderError
from uutik_report.report import generate_report
from uutik_report.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    """Generate the report for the current directory and return an exit status."""
    configure_logging()
    try:
        asyncio.run(generate_report(Path.cwd()))
    except (ConversionError, RenderError) as exc:
        logger.error("❌ Ошибка при генерации PDF: %s", exc)
        return 1
    except Exception:
        logger.exception("❌ Критическая ошибка")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
