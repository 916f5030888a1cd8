from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


def _as_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _as_int(value: Any) -> int:
    return int(float(value))


@dataclass(frozen=True)
class Cylinder:
    """Reference record: one printing cylinder."""

    cylinder_id: str
    brand: str
    t_no: str
    gears: int
    count: int
    size_mm: float
    distortion: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Cylinder":
        # Older documents stored every field as the raw form text.
        return cls(
            cylinder_id=str(data["id"]),
            brand=str(data.get("brand", "")),
            t_no=str(data.get("tNo", "")),
            gears=_as_int(data.get("gears") or 0),
            count=_as_int(data.get("count") or 0),
            size_mm=_as_float(data.get("sizeMM")) or 0.0,
            distortion=_as_float(data.get("distortion")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.cylinder_id,
            "brand": self.brand,
            "tNo": self.t_no,
            "gears": self.gears,
            "count": self.count,
            "sizeMM": self.size_mm,
            "distortion": self.distortion,
        }


@dataclass(frozen=True)
class CylinderSheetRow:
    """Read-model for the printable cylinder sheet."""

    cylinder: Cylinder
    size_inches: float
    available_sizes: Tuple[float, ...]

    def to_dict(self) -> dict:
        return {
            **self.cylinder.to_dict(),
            "sizeInches": self.size_inches,
            "availableSizes": list(self.available_sizes),
        }
