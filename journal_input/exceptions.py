"""Error taxonomy for quick-entry parsing."""

from __future__ import annotations

from typing import Any, Dict


class InputParseError(ValueError):
    """Base class for every outcome other than a successful parse."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.user_message = message

    def to_metadata(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"type": self.kind, "reason": self.user_message}
        cause = self.__cause__
        if cause is not None:
            payload["cause"] = f"{type(cause).__name__}: {cause}"
        return payload


class ParseCancelled(InputParseError):
    """Raised when there is nothing to parse (empty input or no grammar match)."""

    kind = "cancelled"

    def __init__(self, message: str = "cancel") -> None:
        super().__init__(message)


class InputValidationError(InputParseError):
    """Raised when a task/memo flag is given without any memo text."""

    kind = "invalid"


class DateRangeError(InputParseError):
    """Raised when a calendar date token lies outside the accepted bounds."""

    kind = "range"


class ParseFailure(InputParseError):
    """Generic failure surfaced by the parse boundary; the original error is chained."""

    kind = "error"


__all__ = [
    "InputParseError",
    "ParseCancelled",
    "InputValidationError",
    "DateRangeError",
    "ParseFailure",
]
