"""Shape upgrades for documents written by older versions of the tracker.

Two kinds of migration exist:

- structural, applied to the whole document whenever it is loaded or
  restored (missing ``statusTypes`` is seeded, built-in status types that
  went missing are put back, duplicate catalog ids are dropped, missing
  ``employees`` / ``attendance`` containers are created);
- per-cell, applied lazily when an employee's attendance block is read or
  written: the deprecated ``{"status": "late"}`` cell becomes
  ``{"statuses": ["late"]}``.

``cylinders`` and ``rules`` are deliberately left absent; they appear on the
first write to that section.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..status_types.model import default_status_type_dicts

logger = logging.getLogger(__name__)


def default_document() -> dict:
    return {
        "employees": [],
        "attendance": {},
        "statusTypes": default_status_type_dicts(),
    }


def migrate_document(doc: dict) -> bool:
    """Apply structural migrations in place. Returns True when ``doc`` changed."""
    changed = False

    if not isinstance(doc.get("employees"), list):
        doc["employees"] = []
        changed = True

    if not isinstance(doc.get("attendance"), dict):
        doc["attendance"] = {}
        changed = True

    catalog = doc.get("statusTypes")
    if not isinstance(catalog, list):
        logger.info("Seeding default status types into document")
        doc["statusTypes"] = default_status_type_dicts()
        return True

    seen = set()
    deduped = []
    for entry in catalog:
        if isinstance(entry, dict) and entry.get("id") and entry["id"] not in seen:
            seen.add(entry["id"])
            deduped.append(entry)
    missing = [d for d in default_status_type_dicts() if d["id"] not in seen]
    if missing:
        logger.info("Restoring built-in status types: %s", ", ".join(d["id"] for d in missing))
    if missing or len(deduped) != len(catalog):
        doc["statusTypes"] = missing + deduped
        changed = True

    return changed


def _is_record(entry: Any) -> bool:
    return isinstance(entry, dict) and isinstance(entry.get("id"), str) and bool(entry["id"])


def document_shape_error(doc: dict) -> Optional[str]:
    """Describe why ``doc`` cannot be used as a document, or None when it can.

    Sections may be absent (older documents); present ones must have the
    shape every reader relies on. Cell contents are not checked here, any
    legacy cell shape is upgraded on read.
    """
    for name in ("employees", "statusTypes", "cylinders", "rules"):
        if name not in doc:
            continue
        section = doc[name]
        if not isinstance(section, list):
            return f"{name} is not a list"
        if not all(_is_record(entry) for entry in section):
            return f"{name} holds an entry without a string id"

    attendance = doc.get("attendance", {})
    if not isinstance(attendance, dict):
        return "attendance is not an object"
    if not all(isinstance(block, dict) for block in attendance.values()):
        return "attendance holds a block that is not an object"

    return None


def canonical_statuses(cell: Any) -> List[str]:
    """Return the status ids of a raw cell, whatever shape it was stored in.

    Order is kept, duplicates and blank ids are dropped.
    """
    if isinstance(cell, str):
        raw = [cell]
    elif isinstance(cell, dict):
        legacy = cell.get("status")
        raw = [legacy] if legacy else cell.get("statuses") or []
    else:
        raw = []

    statuses: List[str] = []
    for status_id in raw:
        if isinstance(status_id, str) and status_id and status_id not in statuses:
            statuses.append(status_id)
    return statuses


def upgrade_cell(block: dict, date_key: str) -> bool:
    """Rewrite one cell of ``block`` to the canonical shape.

    A cell with no statuses left is removed. Returns True when ``block`` changed.
    """
    cell = block[date_key]
    statuses = canonical_statuses(cell)

    if not statuses:
        del block[date_key]
        return True

    if isinstance(cell, dict):
        if "status" not in cell and cell.get("statuses") == statuses:
            return False
        cell.pop("status", None)
        cell["statuses"] = statuses
        return True

    block[date_key] = {"statuses": statuses}
    return True


def upgrade_attendance_block(block: dict) -> bool:
    changed = False
    for date_key in list(block):
        if upgrade_cell(block, date_key):
            changed = True
    return changed
