"""Centralize defaults and environment lookups for the quick-entry parser."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Default configuration values
# ---------------------------------------------------------------------------
_DEFAULT_MEMO_MIN_LENGTH = 6
_DEFAULT_LOGGING_ENABLED: bool = True
_DEFAULT_LOG_REDACTION_ENABLED: bool = True
_DEFAULT_LOG_DIR = "logs"
_PARSE_LOG_FILENAME = "parses.jsonl"
_DEFAULT_LOG_REDACTION_PATTERNS = "email,phone,url"
_DEFAULT_LOG_MAX_BYTES = 1_000_000
_DEFAULT_LOG_BACKUP_COUNT = 5
_DEFAULT_WEB_HOST = "127.0.0.1"
_DEFAULT_WEB_PORT = 9000

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _FALSE_VALUES:
        return False
    if normalized in _TRUE_VALUES:
        return True
    return default


def _read_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Parser settings
# ---------------------------------------------------------------------------
def get_memo_min_length(env: Dict[str, str] | None = None) -> int:
    """Return how long unflagged text must be before it is treated as a memo.

    Args:
        env: Optional mapping used instead of ``os.environ`` to simplify testing.
    """

    source = env if env is not None else os.environ
    return max(_read_int(source.get("MEMO_MIN_LENGTH"), _DEFAULT_MEMO_MIN_LENGTH), 0)


def get_vocabulary_path(env: Dict[str, str] | None = None) -> Path | None:
    """Return the optional YAML file overriding the built-in vocabulary."""

    source = env if env is not None else os.environ
    override = source.get("VOCABULARY_PATH")
    return Path(override) if override else None


# ---------------------------------------------------------------------------
# Parse log settings
# ---------------------------------------------------------------------------
def is_logging_enabled(env: Dict[str, str] | None = None) -> bool:
    """Determine whether parse outcomes are written to the JSONL log."""

    source = env if env is not None else os.environ
    return _read_bool(source.get("LOGGING_ENABLED"), _DEFAULT_LOGGING_ENABLED)


def get_log_dir(env: Dict[str, str] | None = None) -> Path:
    source = env if env is not None else os.environ
    override = source.get("LOG_DIR")
    return Path(override) if override else Path(_DEFAULT_LOG_DIR)


def get_parse_log_path(env: Dict[str, str] | None = None) -> Path:
    """Return the full path for the parse log JSONL file."""

    return get_log_dir(env) / _PARSE_LOG_FILENAME


def is_log_redaction_enabled(env: Dict[str, str] | None = None) -> bool:
    """Determine whether contact details are scrubbed before logging."""

    source = env if env is not None else os.environ
    return _read_bool(source.get("LOG_REDACTION_ENABLED"), _DEFAULT_LOG_REDACTION_ENABLED)


def get_log_redaction_patterns(env: Dict[str, str] | None = None) -> List[str]:
    source = env if env is not None else os.environ
    raw = source.get("LOG_REDACTION_PATTERNS")
    values = raw if raw is not None else _DEFAULT_LOG_REDACTION_PATTERNS
    return [segment.strip().lower() for segment in values.split(",") if segment.strip()]


def get_log_max_bytes(env: Dict[str, str] | None = None) -> int:
    """Return the maximum size in bytes before rotating the parse log."""

    source = env if env is not None else os.environ
    return max(_read_int(source.get("LOG_MAX_BYTES"), _DEFAULT_LOG_MAX_BYTES), 0)


def get_log_backup_count(env: Dict[str, str] | None = None) -> int:
    source = env if env is not None else os.environ
    return max(_read_int(source.get("LOG_BACKUP_COUNT"), _DEFAULT_LOG_BACKUP_COUNT), 0)


# ---------------------------------------------------------------------------
# HTTP surface
# ---------------------------------------------------------------------------
def get_web_host(env: Dict[str, str] | None = None) -> str:
    source = env if env is not None else os.environ
    return source.get("WEB_HOST", _DEFAULT_WEB_HOST)


def get_web_port(env: Dict[str, str] | None = None) -> int:
    source = env if env is not None else os.environ
    value = _read_int(source.get("WEB_PORT"), _DEFAULT_WEB_PORT)
    return value if 0 < value <= 65535 else _DEFAULT_WEB_PORT
