from __future__ import annotations

import logging
import math
import re
from typing import Optional, Union

from ..common.identifiers import new_id
from ..common.validators import require_non_empty
from ..core.constants import CYLINDER_DIVISIONS, MM_PER_INCH
from ..core.enums import CylinderBrand
from ..core.exceptions import ValidationError
from ..document.store import DocumentStore
from .model import Cylinder, CylinderSheetRow

logger = logging.getLogger(__name__)

Number = Union[int, float, str]

_NON_DIGITS = re.compile(r"\D")


def t_no_sort_key(t_no: str) -> int:
    """Numeric part of a T.no (``"T120"`` -> 120); 0 when it has no digits."""
    digits = _NON_DIGITS.sub("", t_no or "")
    return int(digits) if digits else 0


class CylinderService:
    """Use case: cylinder reference table."""

    def __init__(self, store: DocumentStore):
        self._store = store

    @staticmethod
    def _number(value: Number, field_name: str, *, integer: bool = False) -> Union[int, float]:
        try:
            number = float(value)
            if not math.isfinite(number):
                raise ValueError(value)
            return int(number) if integer else number
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} must be a finite number")

    def get_cylinders(self) -> list[Cylinder]:
        return [Cylinder.from_dict(c) for c in self._store.document.get("cylinders") or []]

    def add_cylinder(
        self,
        brand: str,
        t_no: str,
        gears: Number,
        count: Number,
        size_mm: Number,
        distortion: Optional[Number] = None,
    ) -> None:
        cylinder = Cylinder(
            cylinder_id=new_id(),
            brand=require_non_empty(brand, "Brand"),
            t_no=require_non_empty(t_no, "T.no"),
            gears=self._number(gears, "Gears", integer=True),
            count=self._number(count, "Count", integer=True),
            size_mm=self._number(size_mm, "Size (mm)"),
            distortion=None if distortion in (None, "") else self._number(distortion, "Distortion"),
        )
        if cylinder.size_mm <= 0:
            raise ValidationError("Size (mm) must be positive")

        self._store.ensure_section("cylinders").append(cylinder.to_dict())
        self._store.save()
        logger.info("Added cylinder %s %s", cylinder.brand, cylinder.t_no)

    def remove_cylinder(self, cylinder_id: str) -> None:
        doc = self._store.document
        cylinders = doc.get("cylinders")
        if not cylinders:
            return

        remaining = [c for c in cylinders if c.get("id") != cylinder_id]
        if len(remaining) == len(cylinders):
            return

        doc["cylinders"] = remaining
        self._store.save()
        logger.info("Removed cylinder %s", cylinder_id)

    @staticmethod
    def brands() -> list[str]:
        return [b.value for b in CylinderBrand]

    def cylinder_sheet(self, brand: str) -> list[CylinderSheetRow]:
        """Cylinders of one brand ordered by T.no, with derived sizes."""
        items = [c for c in self.get_cylinders() if c.brand == brand]
        items.sort(key=lambda c: t_no_sort_key(c.t_no))
        return [
            CylinderSheetRow(
                cylinder=c,
                size_inches=round(c.size_mm / MM_PER_INCH, 6),
                available_sizes=tuple(round(c.size_mm / n, 5) for n in CYLINDER_DIVISIONS),
            )
            for c in items
        ]
