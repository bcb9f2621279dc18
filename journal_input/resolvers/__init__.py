"""Day-offset resolvers, one per date-expression form."""

from .shortcut import resolve_shortcut
from .numeric import resolve_numeric_offset
from .calendar import resolve_calendar_date
from .weekday import resolve_weekday, weekday_offset

__all__ = [
    "resolve_shortcut",
    "resolve_numeric_offset",
    "resolve_calendar_date",
    "resolve_weekday",
    "weekday_offset",
]
