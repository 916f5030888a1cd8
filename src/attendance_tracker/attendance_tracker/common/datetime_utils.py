from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import DATE_FORMAT, MONTH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def month_prefix(month: Union[str, date]) -> str:
    """Return the ``YYYY-MM-`` prefix shared by every date key of a month.

    Accepts a ``date``/``datetime`` or a ``YYYY-MM`` string.
    """
    if isinstance(month, date):
        return month.strftime(MONTH_FORMAT) + "-"
    datetime.strptime(month, MONTH_FORMAT)
    return f"{month}-"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
