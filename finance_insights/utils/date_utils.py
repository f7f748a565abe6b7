"""Date manipulation utilities"""

import calendar
from datetime import date, datetime
from typing import Any, Optional, Tuple

# Locale-style US dates as written by the transaction feed export
LOCALE_DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%Y, %I:%M:%S %p")


def parse_date(value: Any) -> Optional[date]:
    """
    Coerce a date, datetime or string into a date (None if unparseable).

    Strings may be ISO-8601 ("2026-01-15", "2026-01-15T10:00:00Z") or
    M/D/YYYY with an optional 12-hour time ("1/15/2026, 3:04:05 PM").
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    # fromisoformat rejects a trailing "Z" before Python 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    for fmt in LOCALE_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move (year, month) by offset months, crossing year boundaries"""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_label(year: int, month: int) -> str:
    """Full month label, e.g. 'October 2026'"""
    return f"{calendar.month_name[month]} {year}"


def month_range_label(start: Tuple[int, int], end: Tuple[int, int]) -> str:
    """Abbreviated span label, e.g. 'Jul - Sep 2026' (year of the end month)"""
    return f"{calendar.month_abbr[start[1]]} - {calendar.month_abbr[end[1]]} {end[0]}"
