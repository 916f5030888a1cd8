"""Restore the tracker document from a backup file.

Usage: python -m scripts.restore backups/attendance_backup_2024-03-31.json
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.logging_config import setup_logger
from src.attendance_tracker.attendance_tracker.container import build_container


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        raise SystemExit("usage: restore.py <backup.json>")

    settings = importlib.import_module(get_settings_module())
    logger = setup_logger("attendance_tracker.scripts", getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(storage_config=settings.STORAGE_CONFIG)

    backup_file = Path(argv[0])
    if not container.backup_service.restore(backup_file.read_bytes()):
        logger.error("Not a valid backup, nothing changed: %s", backup_file)
        return 1

    logger.info("Restored from %s", backup_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
