from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..common.validators import require_date_key, require_non_empty
from ..core.exceptions import ValidationError
from ..document.migrations import upgrade_attendance_block, upgrade_cell
from ..document.store import DocumentStore
from ..employees.service import EmployeeService
from .model import AttendanceCell

logger = logging.getLogger(__name__)

DateLike = Union[str, date]


class AttendanceService:
    """Use case: per-cell attendance state machine.

    A cell is either absent from the document or holds a non-empty status set.
    An emptied cell is deleted, never stored as ``{"statuses": []}``.
    """

    def __init__(self, store: DocumentStore, employees: EmployeeService):
        self._store = store
        self._employees = employees

    def _block(self, employee_id: str, *, create: bool = False) -> Optional[dict]:
        attendance = self._store.document["attendance"]
        block = attendance.get(employee_id)
        if block is None and create:
            block = {}
            attendance[employee_id] = block
        return block

    def _require_employee(self, employee_id: str) -> None:
        if not self._employees.exists(employee_id):
            raise ValidationError(f"Unknown employee: {employee_id!r}")

    def get_attendance(self, employee_id: str) -> dict[str, AttendanceCell]:
        """Return every recorded cell of one employee, keyed by date.

        Legacy cells are upgraded in the live document on the way; when that
        changes anything the document is persisted straight away.
        """
        block = self._block(employee_id)
        if not block:
            return {}

        if upgrade_attendance_block(block):
            logger.info("Upgraded legacy attendance cells for employee %s", employee_id)
            self._store.save()

        return {d: AttendanceCell.from_dict(cell) for d, cell in block.items()}

    def get_cell(self, employee_id: str, day: DateLike) -> AttendanceCell:
        return self.get_attendance(employee_id).get(require_date_key(day), AttendanceCell())

    def toggle_attendance_status(self, employee_id: str, day: DateLike, status_id: str) -> AttendanceCell:
        """Add ``status_id`` to the cell, or remove it if already present."""
        date_key = require_date_key(day)
        status_id = require_non_empty(status_id, "Status")
        self._require_employee(employee_id)

        block = self._block(employee_id, create=True)
        if date_key in block:
            upgrade_cell(block, date_key)
        cell = block.setdefault(date_key, {"statuses": []})

        if status_id in cell["statuses"]:
            cell["statuses"] = [s for s in cell["statuses"] if s != status_id]
        else:
            cell["statuses"].append(status_id)

        if not cell["statuses"]:
            del block[date_key]

        self._store.save()
        return AttendanceCell.from_dict(block.get(date_key, {}))

    def clear_attendance(self, employee_id: str, day: DateLike) -> None:
        date_key = require_date_key(day)
        block = self._block(employee_id)
        if not block or date_key not in block:
            return

        del block[date_key]
        self._store.save()

    def mark_attendance(self, employee_id: str, day: DateLike, status_id: Optional[str]) -> None:
        """Set the cell to exactly ``[status_id]``; ``None`` clears it."""
        if not status_id:
            self.clear_attendance(employee_id, day)
            return

        date_key = require_date_key(day)
        status_id = require_non_empty(status_id, "Status")
        self._require_employee(employee_id)

        block = self._block(employee_id, create=True)
        block[date_key] = {"statuses": [status_id]}
        self._store.save()
