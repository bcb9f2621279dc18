"""Structured JSONL log of parse outcomes.

Every call to the parser can be recorded as one ``ParseRecord`` line so a
misread entry ("why did 'yes call mum' land on yesterday?") can be replayed
later. Memo text may contain contact details, so configured patterns are
scrubbed before anything touches disk, and files rotate at a size limit.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, IO, Iterable, Optional, Pattern

from journal_input.models import ParseResult


_KNOWN_PATTERNS: Dict[str, Pattern[str]] = {
    "email": re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE),
    "phone": re.compile(r"(?:\+\d{1,3}[\s-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b"),
    "url": re.compile(r"https?://[^\s]+", re.IGNORECASE),
}
_PATTERN_PRIORITY: Dict[str, int] = {
    "email": 0,
    "url": 1,
    "phone": 2,
}
_REDACT_FIELDS = {"user_text", "text"}


def _utc_now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


@dataclass
class ParseRecord:
    """WHAT: schema for one logged parse call.

    WHY: replaying a misparsed entry needs the raw line, the reference date it
    was resolved against, and what came out (or why nothing did).
    HOW: flat dataclass serialised with ``asdict``; ``from_result`` copies the
    fields out of a ``ParseResult`` and stamps the time.
    """

    timestamp: str
    user_text: str
    status: str
    reference_date: str
    flags: str = ""
    offset: Optional[int] = None
    text: str = ""
    scope: str = ""
    error: Dict[str, Any] | None = None

    @classmethod
    def from_result(cls, user_text: Optional[str], result: ParseResult) -> "ParseRecord":
        parsed = result.input
        return cls(
            timestamp=_utc_now(),
            user_text=user_text or "",
            status=result.status,
            reference_date=result.reference_date.isoformat(),
            flags=parsed.flags if parsed else "",
            offset=parsed.offset if parsed else None,
            text=parsed.text if parsed else "",
            scope=parsed.scope if parsed else "",
            error=result.error.to_metadata() if result.error is not None else None,
        )


class ParseLogger:
    """Append-only JSONL writer with redaction and size-based rotation."""

    def __init__(
        self,
        *,
        log_path: Path,
        enabled: bool = True,
        redact: bool = True,
        patterns: Iterable[str] | None = None,
        max_bytes: int = 0,
        backup_count: int = 0,
    ) -> None:
        self._log_path = log_path
        self._enabled = enabled
        self._redact = redact
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        selected = tuple(patterns) if patterns else _KNOWN_PATTERNS.keys()
        self._redaction_patterns = [
            (key, _KNOWN_PATTERNS[key])
            for key in selected
            if key in _KNOWN_PATTERNS
        ]
        self._redaction_patterns.sort(key=lambda item: _PATTERN_PRIORITY.get(item[0], 10))

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def log_path(self) -> Path:
        return self._log_path

    def log_parse(self, record: ParseRecord) -> None:
        """Persist ``record``; a disabled logger does nothing."""

        if not self._enabled:
            return
        self._append_json_line(self._log_path, asdict(record))

    def _append_json_line(self, path: Path, payload: Dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        prepared = self._prepare_payload(payload)
        line = json.dumps(prepared, ensure_ascii=False)
        encoded = line.encode("utf-8")
        self._rotate_if_needed(path, len(encoded) + 1)
        with self._open_file(path) as handle:
            handle.write(line)
            handle.write("\n")

    @staticmethod
    def _open_file(path: Path) -> IO[str]:
        return path.open("a", encoding="utf-8")

    def _prepare_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self._redact or not self._redaction_patterns:
            return payload
        return {
            key: self._scrub_string(value) if key in _REDACT_FIELDS and isinstance(value, str) else value
            for key, value in payload.items()
        }

    def _scrub_string(self, value: str) -> str:
        """Replace sensitive substrings with ``[REDACTED_<KIND>]`` tokens."""
        sanitized = value
        for key, pattern in self._redaction_patterns:
            token = f"[REDACTED_{key.upper()}]"
            sanitized = pattern.sub(token, sanitized)
        return sanitized

    def _rotate_if_needed(self, path: Path, incoming_bytes: int) -> None:
        """WHAT: keep the log under ``max_bytes``.

        WHY: the parser may run for months inside an editor session; an
        unbounded JSONL file would only grow.
        HOW: once the next line would cross the limit, drop the file (no
        backups) or shift ``log.1`` .. ``log.N`` up by one and start fresh.
        """
        if self._max_bytes <= 0:
            return
        if not path.exists():
            return

        current_size = path.stat().st_size
        if current_size + incoming_bytes <= self._max_bytes:
            return

        if self._backup_count <= 0:
            path.unlink()
            return

        for index in range(self._backup_count - 1, 0, -1):
            src = Path(f"{path}.{index}")
            dst = Path(f"{path}.{index + 1}")
            if src.exists():
                src.replace(dst)

        rotated = Path(f"{path}.1")
        if rotated.exists():
            rotated.unlink()
        path.replace(rotated)


__all__ = ["ParseRecord", "ParseLogger"]
