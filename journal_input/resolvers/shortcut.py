"""Symbolic shortcuts such as ``today`` or ``morgen``."""

from __future__ import annotations

from typing import Optional

from journal_input.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def resolve_shortcut(value: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[int]:
    """Map a shortcut word to its fixed offset, or ``None`` when unknown."""

    return vocabulary.shortcut_offset(value)


__all__ = ["resolve_shortcut"]
