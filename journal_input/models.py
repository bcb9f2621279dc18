"""Data structures produced by the quick-entry parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from journal_input.exceptions import InputParseError, ParseFailure

DEFAULT_SCOPE = "default"

STATUS_OK = "ok"
STATUS_CANCELLED = "cancelled"
STATUS_INVALID = "invalid"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class Input:
    """WHAT: the structured form of one quick-entry line.

    WHY: downstream collaborators (path resolution, note creation) only need
    the flag, a day offset and the memo text, never the raw string.
    HOW: immutable dataclass; ``offset`` is ``None`` when no date expression
    was given or recognised, otherwise a signed day count relative to the
    reference date used for parsing.
    """

    flags: str = ""
    offset: Optional[int] = None
    text: str = ""
    scope: str = DEFAULT_SCOPE

    def has_flags(self) -> bool:
        return len(self.flags) > 0

    def has_memo(self) -> bool:
        return len(self.text) > 0

    def has_offset(self) -> bool:
        return self.offset is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flags": self.flags,
            "offset": self.offset,
            "text": self.text,
            "scope": self.scope,
        }


@dataclass(frozen=True)
class ParseResult:
    """Tagged outcome of a single parse call.

    ``status`` is one of ``ok``, ``cancelled``, ``invalid`` or ``error``.
    Exactly one of ``input`` and ``error`` is set.
    """

    status: str
    reference_date: date
    input: Optional[Input] = None
    error: Optional[InputParseError] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def cancelled(self) -> bool:
        return self.status == STATUS_CANCELLED

    def unwrap(self) -> Input:
        """Return the parsed ``Input`` or raise the carried error."""

        if self.error is not None:
            raise self.error
        if self.input is None:
            raise ParseFailure(f"Parse result with status '{self.status}' carries no input")
        return self.input

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": self.status,
            "reference_date": self.reference_date.isoformat(),
            "input": self.input.to_dict() if self.input else None,
        }
        if self.error is not None:
            payload["error"] = self.error.to_metadata()
        return payload


__all__ = [
    "Input",
    "ParseResult",
    "DEFAULT_SCOPE",
    "STATUS_OK",
    "STATUS_CANCELLED",
    "STATUS_INVALID",
    "STATUS_ERROR",
]
