from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..attendance.service import AttendanceService
from ..common.validators import require_month
from ..core.enums import DefaultStatus
from ..employees.service import EmployeeService
from ..status_types.service import StatusTypeService

Month = Union[str, date]


@dataclass(frozen=True)
class CollectiveStats:
    late: int
    absent: int

    def to_dict(self) -> dict:
        return {"late": self.late, "absent": self.absent}


@dataclass(frozen=True)
class StatusCount:
    """Read-model: one line of an employee's monthly breakdown."""

    status_id: str
    label: str
    color: str
    count: int


class StatisticsService:
    """Monthly aggregates derived from attendance cells.

    A date key belongs to a month when it starts with ``YYYY-MM-``. A cell
    holding several statuses counts once for each of them.
    """

    def __init__(self, attendance: AttendanceService, employees: EmployeeService, status_types: StatusTypeService):
        self._attendance = attendance
        self._employees = employees
        self._status_types = status_types

    def employee_month_stats(self, employee_id: str, month: Month) -> dict[str, int]:
        prefix = require_month(month)
        stats: dict[str, int] = {}
        for date_key, cell in self._attendance.get_attendance(employee_id).items():
            if not date_key.startswith(prefix):
                continue
            for status_id in cell.statuses:
                stats[status_id] = stats.get(status_id, 0) + 1
        return stats

    def collective_month_stats(self, month: Month) -> CollectiveStats:
        """Late and absent totals across all employees; custom types are not included."""
        require_month(month)
        late = absent = 0
        for employee in self._employees.get_employees():
            stats = self.employee_month_stats(employee.employee_id, month)
            late += stats.get(DefaultStatus.LATE.value, 0)
            absent += stats.get(DefaultStatus.ABSENT.value, 0)
        return CollectiveStats(late=late, absent=absent)

    def employee_month_breakdown(self, employee_id: str, month: Month) -> list[StatusCount]:
        """Counts joined with the catalog, in catalog order. Orphan ids are skipped."""
        stats = self.employee_month_stats(employee_id, month)
        return [
            StatusCount(status_id=s.status_id, label=s.label, color=s.color, count=stats[s.status_id])
            for s in self._status_types.get_status_types()
            if s.status_id in stats
        ]
