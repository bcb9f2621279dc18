"""Pull flag, text and scope values out of tokenized input."""

from __future__ import annotations

from journal_input.models import DEFAULT_SCOPE
from journal_input.tokenizer import Tokens
from journal_input.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def extract_flags(tokens: Tokens, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Return the leading flag, else the trailing one, classified (``todo`` -> ``task``)."""

    word = tokens.flag_leading or tokens.flag_trailing
    if not word:
        return ""
    return vocabulary.classify_flag(word)


def extract_text(tokens: Tokens) -> str:
    return tokens.text or ""


def extract_scope(tokens: Tokens) -> str:
    # scope tags are not part of the grammar yet; every entry lands in the default scope
    return DEFAULT_SCOPE


__all__ = ["extract_flags", "extract_text", "extract_scope"]
