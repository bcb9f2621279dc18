"""Split a quick-entry line into the grammar's capture slots."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Pattern

from journal_input import grammar


@dataclass(frozen=True)
class Tokens:
    """Ordered capture slots of one grammar match. Absent slots are ``""``."""

    flag_leading: str = ""
    shortcut: str = ""
    offset: str = ""
    calendar_date: str = ""
    weekday_modifier: str = ""
    weekday_name: str = ""
    flag_trailing: str = ""
    text: str = ""

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def tokenize(value: str, pattern: Optional[Pattern[str]] = None) -> Optional[Tokens]:
    """Apply the line grammar to ``value``.

    Returns ``None`` when the grammar does not match at all, which callers
    treat as "nothing to do" rather than as a failure.
    """

    expression = pattern if pattern is not None else grammar.get_expression()
    match = expression.match(value)
    if match is None:
        return None
    groups = match.groupdict()
    return Tokens(**{slot: groups.get(slot) or "" for slot in grammar.SLOTS})


__all__ = ["Tokens", "tokenize"]
