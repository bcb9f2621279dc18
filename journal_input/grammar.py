"""Composite expression grammar for quick-entry lines.

The line shape is::

    [flag] [shortcut | offset | calendar date | modifier weekday] [flag] text

Each date alternative is also available as a standalone fragment so it can
be matched on its own.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Pattern

from journal_input.vocabulary import DEFAULT_VOCABULARY, Vocabulary

# Group names, in match order.
FLAG_LEADING = "flag_leading"
SHORTCUT = "shortcut"
OFFSET = "offset"
CALENDAR_DATE = "calendar_date"
WEEKDAY_MODIFIER = "weekday_modifier"
WEEKDAY_NAME = "weekday_name"
FLAG_TRAILING = "flag_trailing"
TEXT = "text"

SLOTS = (
    FLAG_LEADING,
    SHORTCUT,
    OFFSET,
    CALENDAR_DATE,
    WEEKDAY_MODIFIER,
    WEEKDAY_NAME,
    FLAG_TRAILING,
    TEXT,
)

_TOKEN_END = r"(?:\s|$)"


def _alternation(words: Iterable[str]) -> str:
    # longest first so "tomorrow" is tried before "tom"
    ordered = sorted(set(words), key=lambda word: (-len(word), word))
    return "|".join(re.escape(word) for word in ordered)


def flag_fragment(vocabulary: Vocabulary, group: str, *, allow_end: bool = True) -> str:
    # a trailing flag needs text after it, so "5 task" keeps "task" as memo text
    end = _TOKEN_END if allow_end else r"\s"
    return rf"(?:(?P<{group}>{_alternation(vocabulary.flag_words())}){end})"


def shortcut_fragment(vocabulary: Vocabulary) -> str:
    return rf"(?:(?P<{SHORTCUT}>{_alternation(vocabulary.shortcut_words())}){_TOKEN_END})"


def offset_fragment() -> str:
    return rf"(?:(?P<{OFFSET}>[+\-]\d+){_TOKEN_END})"


def calendar_date_fragment() -> str:
    return rf"(?:(?P<{CALENDAR_DATE}>\d{{4}}-\d{{1,2}}-\d{{1,2}}|\d{{1,2}}-\d{{1,2}}|\d{{1,2}}){_TOKEN_END})"


def weekday_fragment(vocabulary: Vocabulary) -> str:
    return (
        rf"(?:(?P<{WEEKDAY_MODIFIER}>{_alternation(vocabulary.modifier_words())})\s"
        rf"(?P<{WEEKDAY_NAME}>{_alternation(vocabulary.weekday_words())})\s?)"
    )


def build_expression(vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Pattern[str]:
    """Compile the full line grammar for ``vocabulary``.

    At most one date alternative consumes input; when none applies the date
    group is simply skipped and the remainder falls through to the text slot.
    """

    date_group = "|".join(
        (
            shortcut_fragment(vocabulary),
            offset_fragment(),
            calendar_date_fragment(),
            weekday_fragment(vocabulary),
        )
    )
    expression = (
        "^"
        + flag_fragment(vocabulary, FLAG_LEADING)
        + "?(?:"
        + date_group
        + ")?"
        + flag_fragment(vocabulary, FLAG_TRAILING, allow_end=False)
        + rf"?(?P<{TEXT}>.*)$"
    )
    # digits are ASCII 0-9 only; other scripts fall through to the text slot
    return re.compile(expression, re.ASCII)


@lru_cache(maxsize=8)
def get_expression(vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Pattern[str]:
    """Return the compiled grammar, building it once per vocabulary."""

    return build_expression(vocabulary)


__all__ = [
    "SLOTS",
    "FLAG_LEADING",
    "SHORTCUT",
    "OFFSET",
    "CALENDAR_DATE",
    "WEEKDAY_MODIFIER",
    "WEEKDAY_NAME",
    "FLAG_TRAILING",
    "TEXT",
    "build_expression",
    "get_expression",
    "flag_fragment",
    "shortcut_fragment",
    "offset_fragment",
    "calendar_date_fragment",
    "weekday_fragment",
]
