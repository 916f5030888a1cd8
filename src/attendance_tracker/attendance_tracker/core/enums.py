from __future__ import annotations

from enum import Enum


class DefaultStatus(str, Enum):
    """Built-in status types seeded into every catalog. They cannot be deleted."""

    LATE = "late"
    ABSENT = "absent"
    SHORT_LEAVE = "short_leave"
    NIGHT_SHIFT = "night_shift"


class CylinderBrand(str, Enum):
    """Brands the cylinder sheet groups by. Stored brand text stays free-form."""

    XIN_HU = "Xin Hu"
    JINGDA = "Jingda"
