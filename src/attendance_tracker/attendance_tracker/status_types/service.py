from __future__ import annotations

import logging
import re
from typing import Optional

from ..common.validators import require_non_empty
from ..document.store import DocumentStore
from .model import PROTECTED_STATUS_IDS, StatusType, default_status_type_dicts

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def make_status_id(label: str) -> str:
    """Derive the catalog id of a label: ``"Late  Arrival"`` -> ``"late_arrival"``."""
    return _WHITESPACE.sub("_", label.strip().lower())


def is_protected(status_id: str) -> bool:
    return status_id in PROTECTED_STATUS_IDS


class StatusTypeService:
    """Use case: maintain the shared status-type catalog."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def _catalog(self) -> list:
        doc = self._store.document
        if not isinstance(doc.get("statusTypes"), list):
            logger.info("Status type catalog missing, seeding defaults")
            doc["statusTypes"] = default_status_type_dicts()
            self._store.save()
        return doc["statusTypes"]

    def get_status_types(self) -> list[StatusType]:
        return [StatusType.from_dict(s) for s in self._catalog()]

    def get_status_type(self, status_id: str) -> Optional[StatusType]:
        for s in self._catalog():
            if s.get("id") == status_id:
                return StatusType.from_dict(s)
        return None

    def add_status_type(self, label: str, color: str) -> str:
        """Add a custom type. Labels normalizing to an existing id are ignored.

        Returns the derived id either way.
        """
        label = require_non_empty(label, "Label")
        status_id = make_status_id(label)

        catalog = self._catalog()
        if any(s.get("id") == status_id for s in catalog):
            return status_id

        catalog.append(StatusType(status_id=status_id, label=label, color=color or "").to_dict())
        self._store.save()
        logger.info("Added status type %s", status_id)
        return status_id

    def delete_status_type(self, status_id: str) -> None:
        """Remove a custom type. Built-in ids are ignored; attendance is not touched."""
        if is_protected(status_id):
            return

        doc = self._store.document
        catalog = self._catalog()
        remaining = [s for s in catalog if s.get("id") != status_id]
        if len(remaining) == len(catalog):
            return

        doc["statusTypes"] = remaining
        self._store.save()
        logger.info("Deleted status type %s", status_id)
