from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DefaultStatus


@dataclass(frozen=True)
class StatusType:
    """Named, colored category that can be attached to an attendance cell."""

    status_id: str
    label: str
    color: str

    @classmethod
    def from_dict(cls, data: dict) -> "StatusType":
        return cls(status_id=str(data["id"]), label=str(data.get("label", "")), color=str(data.get("color", "")))

    def to_dict(self) -> dict:
        return {"id": self.status_id, "label": self.label, "color": self.color}


DEFAULT_STATUS_TYPES = (
    StatusType(DefaultStatus.LATE.value, "Late Arrival", "var(--status-late)"),
    StatusType(DefaultStatus.ABSENT.value, "Absent", "var(--status-absent)"),
    StatusType(DefaultStatus.SHORT_LEAVE.value, "Short Leave", "var(--status-short-leave)"),
    StatusType(DefaultStatus.NIGHT_SHIFT.value, "Night Shift", "var(--status-night-shift)"),
)

PROTECTED_STATUS_IDS = frozenset(s.value for s in DefaultStatus)


def default_status_type_dicts() -> list[dict]:
    return [s.to_dict() for s in DEFAULT_STATUS_TYPES]
