from __future__ import annotations

from datetime import date
from typing import Union

from ..core.exceptions import ValidationError
from .datetime_utils import format_iso_date, month_prefix, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_date_key(value: Union[str, date]) -> str:
    """Return a canonical ``YYYY-MM-DD`` key or raise ValidationError."""
    if isinstance(value, date):
        return format_iso_date(value)
    try:
        parsed = parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")
    # strptime accepts "2024-3-5"; keys must stay zero padded for prefix matching.
    if format_iso_date(parsed) != value:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")
    return value


def require_month(value: Union[str, date]) -> str:
    """Return the ``YYYY-MM-`` prefix for a month or raise ValidationError."""
    try:
        prefix = month_prefix(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    if len(prefix) != 8:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    return prefix
