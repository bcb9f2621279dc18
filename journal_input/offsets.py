"""Dispatch tokenized date expressions to the matching offset resolver."""

from __future__ import annotations

from datetime import date
from typing import Callable, List, Optional, Tuple

from journal_input.resolvers import (
    resolve_calendar_date,
    resolve_numeric_offset,
    resolve_shortcut,
    resolve_weekday,
)
from journal_input.tokenizer import Tokens
from journal_input.vocabulary import DEFAULT_VOCABULARY, Vocabulary

_Matcher = Callable[[Tokens], bool]
_Resolver = Callable[[Tokens, date, Vocabulary], Optional[int]]

# Priority order; the first matcher that claims the tokens decides the offset.
_RESOLVERS: List[Tuple[str, _Matcher, _Resolver]] = [
    (
        "shortcut",
        lambda tokens: bool(tokens.shortcut),
        lambda tokens, today, vocabulary: resolve_shortcut(tokens.shortcut, vocabulary),
    ),
    (
        "offset",
        lambda tokens: bool(tokens.offset),
        lambda tokens, today, vocabulary: resolve_numeric_offset(tokens.offset),
    ),
    (
        "calendar_date",
        lambda tokens: bool(tokens.calendar_date),
        lambda tokens, today, vocabulary: resolve_calendar_date(tokens.calendar_date, today),
    ),
    (
        "weekday",
        lambda tokens: bool(tokens.weekday_modifier and tokens.weekday_name),
        lambda tokens, today, vocabulary: resolve_weekday(
            tokens.weekday_modifier, tokens.weekday_name, today, vocabulary
        ),
    ),
]


def resolve_offset(
    tokens: Tokens,
    today: date,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> Optional[int]:
    """Return the day offset for ``tokens`` or ``None`` when no date was given.

    ``DateRangeError`` from the calendar resolver propagates to the caller.
    """

    for _name, matches, resolve in _RESOLVERS:
        if matches(tokens):
            return resolve(tokens, today, vocabulary)
    return None


def matched_form(tokens: Tokens) -> Optional[str]:
    """Name of the date-expression form present in ``tokens``, if any."""

    for name, matches, _resolve in _RESOLVERS:
        if matches(tokens):
            return name
    return None


__all__ = ["resolve_offset", "matched_form"]
