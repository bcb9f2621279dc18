"""Relative weekdays such as ``next monday`` or ``l fri``."""

from __future__ import annotations

from datetime import date
from typing import Optional

from journal_input.vocabulary import DEFAULT_VOCABULARY, Vocabulary

_DAYS_PER_WEEK = 7


def weekday_offset(next_: bool, reference_index: int, target_index: int) -> int:
    """Offset from the reference weekday to the next/last target weekday.

    Both indexes use the same numbering. The result lies in ``[1, 7]`` for
    next and ``[-7, -1]`` for last, so the named day is never today.
    """

    diff = target_index - reference_index
    if not next_ and diff < 0:
        return diff
    if not next_:
        return diff - _DAYS_PER_WEEK
    if diff <= 0:
        return diff + _DAYS_PER_WEEK
    return diff


def resolve_weekday(
    modifier: str,
    weekday: str,
    today: date,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> Optional[int]:
    """Resolve a modifier/weekday pair against ``today``.

    Modifiers listed in the vocabulary decide the direction; any other
    modifier starting with ``n`` means "next", everything else "last".
    Unknown weekday names resolve to ``None``.
    """

    target_index = vocabulary.weekday_index(weekday)
    if target_index is None:
        return None
    if modifier in vocabulary.next_modifiers:
        next_ = True
    elif modifier in vocabulary.last_modifiers:
        next_ = False
    else:
        next_ = modifier[:1] == "n"
    return weekday_offset(next_, today.weekday(), target_index)


__all__ = ["weekday_offset", "resolve_weekday"]
