from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_DEPARTMENT


@dataclass(frozen=True)
class Employee:
    """Domain entity: a tracked employee.

    Note: plain data object; persistence lives in DocumentStore.
    """

    employee_id: str
    name: str
    role: str
    department: str = DEFAULT_DEPARTMENT

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            employee_id=str(data["id"]),
            name=str(data.get("name", "")),
            role=str(data.get("role") or ""),
            department=str(data.get("department") or DEFAULT_DEPARTMENT),
        )

    def to_dict(self) -> dict:
        return {"id": self.employee_id, "name": self.name, "role": self.role, "department": self.department}
