from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AttendanceCell:
    """Domain entity: the statuses recorded for one (employee, date) pair.

    ``statuses`` is an ordered set: insertion order, no duplicates.
    """

    statuses: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceCell":
        return cls(statuses=tuple(data.get("statuses") or ()))

    def to_dict(self) -> dict:
        return {"statuses": list(self.statuses)}

    def has(self, status_id: str) -> bool:
        return status_id in self.statuses

    @property
    def is_empty(self) -> bool:
        return not self.statuses
