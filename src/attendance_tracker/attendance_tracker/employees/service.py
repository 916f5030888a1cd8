from __future__ import annotations

import logging
from typing import Callable, Optional

from ..common.identifiers import new_id
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT
from ..document.store import DocumentStore
from .model import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee list."""

    def __init__(self, store: DocumentStore, *, id_factory: Optional[Callable[[], str]] = None):
        self._store = store
        self._new_id = id_factory or new_id

    def get_employees(self) -> list[Employee]:
        return [Employee.from_dict(e) for e in self._store.document["employees"]]

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        for e in self._store.document["employees"]:
            if e.get("id") == employee_id:
                return Employee.from_dict(e)
        return None

    def exists(self, employee_id: str) -> bool:
        return any(e.get("id") == employee_id for e in self._store.document["employees"])

    def add_employee(self, name: str, role: str) -> str:
        name = require_non_empty(name, "Name")
        role = (role or "").strip()

        doc = self._store.document
        taken = {e.get("id") for e in doc["employees"]} | set(doc["attendance"])
        employee_id = self._new_id()
        while employee_id in taken:
            employee_id = self._new_id()

        employee = Employee(employee_id=employee_id, name=name, role=role, department=DEFAULT_DEPARTMENT)
        doc["employees"].append(employee.to_dict())
        self._store.save()
        logger.info("Added employee %s (%s)", employee_id, name)
        return employee_id

    def remove_employee(self, employee_id: str) -> None:
        """Delete the employee and every attendance cell recorded for them."""
        doc = self._store.document
        remaining = [e for e in doc["employees"] if e.get("id") != employee_id]
        had_attendance = employee_id in doc["attendance"]
        if len(remaining) == len(doc["employees"]) and not had_attendance:
            return

        doc["employees"] = remaining
        doc["attendance"].pop(employee_id, None)
        self._store.save()
        logger.info("Removed employee %s", employee_id)
