"""Utility functions for the amortization calculator.

This module provides helpers for parsing user input into Python data types and
for stepping due dates by calendar months. Month arithmetic uses Python's
``calendar`` module so that variable month lengths and year rollover are
handled without a fixed 30-day increment.
"""

from __future__ import annotations

import calendar
from datetime import date

from .errors import CalculationError


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` or ``YYYY-MM`` string into a ``date``.

    A year-month string is taken as the first day of that month.

    Raises
    ------
    ValueError
        If the string is not a valid date or year-month.
    """
    try:
        parts = value.strip().split("-")
        if len(parts) not in (2, 3):
            raise ValueError
        year = int(parts[0])
        month = int(parts[1])
        day = int(parts[2]) if len(parts) == 3 else 1
        return date(year, month, day)
    except ValueError as exc:
        raise ValueError(f"Invalid date string: {value}") from exc


def add_months(dt: date, months: int) -> date:
    """Return a new date a number of months after ``dt``.

    The day of the month is clamped to the last valid day if needed (e.g.,
    adding one month to Jan 31 yields Feb 28 or 29). Raises ``ValueError``
    when the result falls outside the years ``date`` can represent.
    """
    year = dt.year + (dt.month - 1 + months) // 12
    month = (dt.month - 1 + months) % 12 + 1
    if not date.min.year <= year <= date.max.year:
        raise ValueError(f"year {year} is out of range")
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def advance_one_month(dt: date) -> date:
    """Step a due date forward by one calendar month."""
    try:
        return add_months(dt, 1)
    except ValueError as exc:
        raise CalculationError("Invalid date calculation") from exc


def parse_amount(value: str) -> float:
    """Parse a numeric string with optional suffixes.

    Accepts plain floats ("200000"), thousands separators ("200,000") and
    shorthand with ``k``/``m`` suffixes (e.g., "200k" meaning 200_000).
    """
    cleaned = value.strip().lower().replace(",", "")
    factor = 1.0
    if cleaned.endswith("k"):
        factor = 1_000.0
        cleaned = cleaned[:-1]
    elif cleaned.endswith("m"):
        factor = 1_000_000.0
        cleaned = cleaned[:-1]
    try:
        return float(cleaned) * factor
    except ValueError as exc:
        raise ValueError(f"Invalid amount: {value}") from exc
