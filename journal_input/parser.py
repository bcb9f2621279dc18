"""Turn one quick-entry line into a structured ``Input``.

Examples of accepted lines::

    today
    +3 trip to the lake
    task 2024-01-15 renew passport
    next friday todo call the plumber
    morgen Einkaufen gehen
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from journal_input.exceptions import (
    InputParseError,
    InputValidationError,
    ParseCancelled,
    ParseFailure,
)
from journal_input.extractors import extract_flags, extract_scope, extract_text
from journal_input.grammar import get_expression
from journal_input.models import (
    DEFAULT_SCOPE,
    STATUS_CANCELLED,
    STATUS_ERROR,
    STATUS_INVALID,
    STATUS_OK,
    Input,
    ParseResult,
)
from journal_input.offsets import resolve_offset
from journal_input.parse_logger import ParseLogger, ParseRecord
from journal_input.tokenizer import tokenize
from journal_input.vocabulary import DEFAULT_VOCABULARY, MEMO_FLAG, Vocabulary

logger = logging.getLogger(__name__)

DEFAULT_MEMO_MIN_LENGTH = 6


def assemble_input(
    flags: str,
    offset: Optional[int],
    text: str,
    scope: str = DEFAULT_SCOPE,
    *,
    memo_min_length: int = DEFAULT_MEMO_MIN_LENGTH,
) -> Input:
    """Apply the defaulting rules once and freeze the result.

    1. a flag without text is rejected;
    2. unflagged text longer than ``memo_min_length`` becomes a memo;
    3. flagged text without a date lands on today (offset 0).
    """

    if flags and not text:
        raise InputValidationError("No text found for memo or task")

    if not flags and text and len(text) > memo_min_length:
        flags = MEMO_FLAG

    if offset is None and flags and text:
        offset = 0

    return Input(flags=flags, offset=offset, text=text, scope=scope)


class InputParser:
    """WHAT: parse boundary for quick-entry lines.

    WHY: editor commands, the CLI and the HTTP API all need the same reading
    of "task next monday call Bob", with cancellations and bad dates reported
    as values rather than as stray exceptions.
    HOW: compile the grammar once at construction, then for each call take a
    fresh reference date, tokenize, extract, resolve the offset and assemble.
    Every outcome is returned as a ``ParseResult`` and, when configured,
    written to the parse log.
    """

    def __init__(
        self,
        *,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
        memo_min_length: int = DEFAULT_MEMO_MIN_LENGTH,
        parse_logger: Optional[ParseLogger] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._vocabulary = vocabulary
        self._memo_min_length = memo_min_length
        self._parse_logger = parse_logger
        self._clock = clock
        self._expression = get_expression(vocabulary)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def memo_min_length(self) -> int:
        return self._memo_min_length

    def parse(self, value: Optional[str], today: Optional[date] = None) -> ParseResult:
        """Parse ``value`` against ``today`` (defaults to the clock's current date)."""

        reference = today if today is not None else self._clock()
        result = self._parse(value, reference)
        if self._parse_logger is not None:
            self._parse_logger.log_parse(ParseRecord.from_result(value, result))
        return result

    def parse_input(self, value: Optional[str], today: Optional[date] = None) -> Input:
        """Like ``parse`` but returns the ``Input`` or raises the outcome's error."""

        return self.parse(value, today).unwrap()

    def _parse(self, value: Optional[str], reference: date) -> ParseResult:
        if value is None or not value.strip():
            return ParseResult(status=STATUS_CANCELLED, reference_date=reference, error=ParseCancelled())

        tokens = tokenize(value.strip(), self._expression)
        if tokens is None:
            return ParseResult(status=STATUS_CANCELLED, reference_date=reference, error=ParseCancelled())

        try:
            offset = resolve_offset(tokens, reference, self._vocabulary)
        except InputParseError as exc:
            logger.error("Failed to parse input from string: %r", value)
            failure = ParseFailure(f"Failed to parse input: {exc}")
            failure.__cause__ = exc
            return ParseResult(status=STATUS_ERROR, reference_date=reference, error=failure)

        try:
            parsed = assemble_input(
                extract_flags(tokens, self._vocabulary),
                offset,
                extract_text(tokens),
                extract_scope(tokens),
                memo_min_length=self._memo_min_length,
            )
        except InputValidationError as exc:
            return ParseResult(status=STATUS_INVALID, reference_date=reference, error=exc)

        logger.debug("Tokenized input: %s", parsed.to_dict())
        return ParseResult(status=STATUS_OK, reference_date=reference, input=parsed)


__all__ = ["InputParser", "assemble_input", "DEFAULT_MEMO_MIN_LENGTH"]
