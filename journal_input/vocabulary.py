"""Word lists recognised by the quick-entry grammar.

The built-in vocabulary covers English and German. A YAML document can
replace any of the sections; sections it leaves out keep their defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Mapping, Tuple

import yaml

TASK_FLAG = "task"
MEMO_FLAG = "memo"

_DEFAULT_FLAGS: Dict[str, str] = {
    "task": TASK_FLAG,
    "todo": TASK_FLAG,
}

_DEFAULT_SHORTCUTS: Dict[str, int] = {
    "today": 0,
    "tod": 0,
    "heute": 0,
    "0": 0,
    "tomorrow": 1,
    "tom": 1,
    "morgen": 1,
    "yesterday": -1,
    "yes": -1,
    "gestern": -1,
}

_DEFAULT_NEXT_MODIFIERS: Tuple[str, ...] = ("next", "n")
_DEFAULT_LAST_MODIFIERS: Tuple[str, ...] = ("last", "l")

# Monday = 0, matching ``date.weekday()``.
_DEFAULT_WEEKDAYS: Dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
    "mon": 0,
    "tue": 1,
    "wed": 2,
    "thu": 3,
    "fri": 4,
    "sat": 5,
    "sun": 6,
    "montag": 0,
    "dienstag": 1,
    "mittwoch": 2,
    "donnerstag": 3,
    "freitag": 4,
    "samstag": 5,
    "sonntag": 6,
}


@dataclass(frozen=True)
class Vocabulary:
    """Immutable lookup tables for flags, shortcuts, modifiers and weekdays.

    Tables are stored as sorted tuples so instances are hashable and can key
    the compiled-grammar cache.
    """

    flags: Tuple[Tuple[str, str], ...] = field(default_factory=lambda: tuple(sorted(_DEFAULT_FLAGS.items())))
    shortcuts: Tuple[Tuple[str, int], ...] = field(default_factory=lambda: tuple(sorted(_DEFAULT_SHORTCUTS.items())))
    next_modifiers: Tuple[str, ...] = _DEFAULT_NEXT_MODIFIERS
    last_modifiers: Tuple[str, ...] = _DEFAULT_LAST_MODIFIERS
    weekdays: Tuple[Tuple[str, int], ...] = field(default_factory=lambda: tuple(sorted(_DEFAULT_WEEKDAYS.items())))

    @classmethod
    def from_mappings(
        cls,
        *,
        flags: Mapping[str, str] | None = None,
        shortcuts: Mapping[str, int] | None = None,
        next_modifiers: Iterable[str] | None = None,
        last_modifiers: Iterable[str] | None = None,
        weekdays: Mapping[str, int] | None = None,
    ) -> "Vocabulary":
        default = cls()
        return cls(
            flags=tuple(sorted(flags.items())) if flags else default.flags,
            shortcuts=tuple(sorted(shortcuts.items())) if shortcuts else default.shortcuts,
            next_modifiers=tuple(next_modifiers) if next_modifiers else default.next_modifiers,
            last_modifiers=tuple(last_modifiers) if last_modifiers else default.last_modifiers,
            weekdays=tuple(sorted(weekdays.items())) if weekdays else default.weekdays,
        )

    def flag_words(self) -> Tuple[str, ...]:
        return tuple(word for word, _ in self.flags)

    def classify_flag(self, word: str) -> str:
        return dict(self.flags).get(word, "")

    def shortcut_words(self) -> Tuple[str, ...]:
        return tuple(word for word, _ in self.shortcuts)

    def shortcut_offset(self, word: str) -> int | None:
        return dict(self.shortcuts).get(word)

    def modifier_words(self) -> Tuple[str, ...]:
        return self.next_modifiers + self.last_modifiers

    def weekday_words(self) -> Tuple[str, ...]:
        return tuple(word for word, _ in self.weekdays)

    def weekday_index(self, word: str) -> int | None:
        return dict(self.weekdays).get(word)


DEFAULT_VOCABULARY = Vocabulary()


def load_vocabulary(path: Path | str | None = None) -> Vocabulary:
    """Load a YAML vocabulary file, falling back to the built-in tables.

    Expected shape (every key optional)::

        flags: {task: task, aufgabe: task}
        shortcuts: {today: 0, tomorrow: 1}
        modifiers: {next: [next, n], last: [last, l]}
        weekdays: {monday: 0, tuesday: 1}
    """

    if path is None:
        return DEFAULT_VOCABULARY
    target = Path(path)
    if not target.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {target}")

    data = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Vocabulary file {target} must be a mapping at the top level.")

    modifiers = data.get("modifiers") or {}
    if not isinstance(modifiers, dict):
        raise ValueError("Vocabulary 'modifiers' must map 'next'/'last' to word lists.")

    return Vocabulary.from_mappings(
        flags=_flag_mapping(data.get("flags")),
        shortcuts=_int_mapping(data.get("shortcuts"), "shortcuts"),
        next_modifiers=_word_list(modifiers.get("next"), "modifiers.next"),
        last_modifiers=_word_list(modifiers.get("last"), "modifiers.last"),
        weekdays=_weekday_mapping(data.get("weekdays")),
    )


def _string_mapping(raw: object, section: str) -> Dict[str, str] | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Vocabulary '{section}' must be a mapping.")
    return {str(key): str(value) for key, value in raw.items() if str(key).strip()}


def _flag_mapping(raw: object) -> Dict[str, str] | None:
    mapping = _string_mapping(raw, "flags")
    if mapping is None:
        return None
    for key, value in mapping.items():
        if value != TASK_FLAG:
            raise ValueError(f"Vocabulary 'flags.{key}' must classify as '{TASK_FLAG}'.")
    return mapping


def _int_mapping(raw: object, section: str) -> Dict[str, int] | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Vocabulary '{section}' must be a mapping.")
    result: Dict[str, int] = {}
    for key, value in raw.items():
        if isinstance(key, bool):
            # YAML 1.1 reads bare yes/no/on/off as booleans
            raise ValueError(f"Vocabulary '{section}' key {key!r} must be quoted.")
        try:
            result[str(key)] = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Vocabulary '{section}.{key}' must be an integer.") from exc
    return result


def _weekday_mapping(raw: object) -> Dict[str, int] | None:
    mapping = _int_mapping(raw, "weekdays")
    if mapping is None:
        return None
    for key, value in mapping.items():
        if not 0 <= value <= 6:
            raise ValueError(f"Vocabulary 'weekdays.{key}' must lie between 0 (Monday) and 6 (Sunday).")
    return mapping


def _word_list(raw: object, section: str) -> Tuple[str, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ValueError(f"Vocabulary '{section}' must be a list of words.")
    return tuple(str(item) for item in raw if str(item).strip())


__all__ = ["Vocabulary", "DEFAULT_VOCABULARY", "TASK_FLAG", "MEMO_FLAG", "load_vocabulary"]
