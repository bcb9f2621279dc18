"""Calendar dates: ``YYYY-M-D``, ``M-D`` or a bare day ``D``."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from journal_input.exceptions import DateRangeError

_ONE_DAY = timedelta(days=1)

# 0-based month index and day bounds checked before the date is built.
_MONTH_RANGE = (0, 12)
_DAY_RANGE = (0, 31)
_TWO_DIGIT_YEAR_MAX = 99
_TWO_DIGIT_YEAR_BASE = 1900


def resolve_calendar_date(value: str, today: date) -> int:
    """WHAT: turn a calendar token into a day offset from ``today``.

    WHY: users type absolute dates ("2024-01-15", "1-15", "15") next to the
    relative forms, and every form has to end up as the same signed offset.
    HOW: split on ``-``; missing year/month come from ``today``. Bounds are
    checked on the 0-based month and the day, then both dates are placed at
    UTC midnight and the difference is floored to whole days. Month index 12
    and out-of-month days roll over into the neighbouring month or year.
    """

    parts = value.split("-")
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise DateRangeError("Failed to parse the date")
    numbers = [int(part) for part in parts]

    year: Optional[int] = None
    month: Optional[int] = None
    if len(numbers) >= 3:
        year, month, day = numbers[0], numbers[1] - 1, numbers[2]
        if year <= _TWO_DIGIT_YEAR_MAX:
            # "0024-5-1" is 1924, as with a two-digit year
            year += _TWO_DIGIT_YEAR_BASE
    elif len(numbers) == 2:
        month, day = numbers[0] - 1, numbers[1]
    else:
        day = numbers[0]

    if month is not None and not _MONTH_RANGE[0] <= month <= _MONTH_RANGE[1]:
        raise DateRangeError("Invalid value for month")
    if not _DAY_RANGE[0] <= day <= _DAY_RANGE[1]:
        raise DateRangeError("Invalid value for day")

    if year is not None and month is not None:
        target = _utc_midnight(year, month, day)
    elif month is not None:
        target = _utc_midnight(today.year, month, day)
    elif day:
        target = _utc_midnight(today.year, today.month - 1, day)
    else:
        raise DateRangeError("Failed to parse the date")

    reference = _utc_midnight(today.year, today.month - 1, today.day)
    return math.floor((target - reference) / _ONE_DAY)


def _utc_midnight(year: int, month_index: int, day: int) -> datetime:
    """UTC midnight for a 0-based month, letting month and day overflow."""

    year += month_index // 12
    month_index %= 12
    try:
        first_of_month = datetime(year, month_index + 1, 1, tzinfo=timezone.utc)
        return first_of_month + timedelta(days=day - 1)
    except (ValueError, OverflowError) as exc:
        raise DateRangeError("Invalid value for year") from exc


__all__ = ["resolve_calendar_date"]
