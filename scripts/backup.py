"""Backup the tracker document.

Writes the exported document into ``backups/`` named with today's date,
the same name the web download uses.
"""

from __future__ import annotations

import importlib
from pathlib import Path

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.logging_config import setup_logger
from src.attendance_tracker.attendance_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logger = setup_logger("attendance_tracker.scripts", getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(storage_config=settings.STORAGE_CONFIG)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    out_file = out_dir / container.backup_service.backup_filename()
    out_file.write_bytes(container.backup_service.export_bytes())
    logger.info("Backup created: %s", out_file)


if __name__ == "__main__":
    main()
