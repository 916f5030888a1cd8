from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import format_iso_date
from ..core.constants import BACKUP_FILENAME_PREFIX
from ..document.store import DocumentStore

logger = logging.getLogger(__name__)


class BackupService:
    """Use case: download and restore the whole document."""

    def __init__(self, store: DocumentStore):
        self._store = store

    @staticmethod
    def backup_filename(today: Optional[date] = None) -> str:
        return f"{BACKUP_FILENAME_PREFIX}{format_iso_date(today or date.today())}.json"

    def export_data(self) -> str:
        return self._store.export_data()

    def export_bytes(self) -> bytes:
        return self.export_data().encode("utf-8")

    def restore(self, payload: Union[str, bytes]) -> bool:
        """Replace the document with a backup. False (and no change) on bad input."""
        if isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8-sig")
            except UnicodeDecodeError:
                logger.warning("Restore rejected: backup is not UTF-8 text")
                return False
        return self._store.import_data(payload)
