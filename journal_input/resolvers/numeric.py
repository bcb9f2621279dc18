"""Signed day offsets such as ``+3`` or ``-12``."""

from __future__ import annotations

from typing import Optional


def resolve_numeric_offset(value: str) -> Optional[int]:
    """Return the signed integer for ``value``.

    One leading ``+`` or ``-`` is stripped; a value without a sign counts as
    positive. Anything that is not a run of ASCII digits after the sign yields
    ``None``.
    """

    if not value:
        return None
    sign = 1
    digits = value
    if value[0] in "+-":
        sign = -1 if value[0] == "-" else 1
        digits = value[1:]
    if not (digits.isascii() and digits.isdigit()):
        return None
    return sign * int(digits)


__all__ = ["resolve_numeric_offset"]
