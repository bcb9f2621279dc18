"""Assemble the quick-entry parser and run the command-line driver."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from journal_app.config import (
    get_log_backup_count,
    get_log_max_bytes,
    get_log_redaction_patterns,
    get_memo_min_length,
    get_parse_log_path,
    get_vocabulary_path,
    is_log_redaction_enabled,
    is_logging_enabled,
)
from journal_input.models import ParseResult
from journal_input.parse_logger import ParseLogger
from journal_input.parser import InputParser
from journal_input.vocabulary import load_vocabulary


# -- Parser construction -------------------------------------------------------
def build_parser() -> InputParser:
    """Wire the parser for the CLI and the web API.

    WHAT: load the vocabulary, memo threshold and parse-log settings.
    WHY: every entry point must read a line the same way, so both share this
    wiring.
    HOW: pull runtime configuration from ``journal_app.config`` helpers and
    hand the resulting instances to ``InputParser``.
    """
    parse_logger = ParseLogger(
        log_path=get_parse_log_path(),
        enabled=is_logging_enabled(),
        redact=is_log_redaction_enabled(),
        patterns=get_log_redaction_patterns(),
        max_bytes=get_log_max_bytes(),
        backup_count=get_log_backup_count(),
    )
    return InputParser(
        vocabulary=load_vocabulary(get_vocabulary_path()),
        memo_min_length=get_memo_min_length(),
        parse_logger=parse_logger,
    )


def describe_result(result: ParseResult) -> Dict[str, Any]:
    """Serialise ``result`` and add the calendar date its offset points at."""

    payload = result.to_dict()
    payload["date"] = None
    parsed = result.input
    if parsed is not None and parsed.offset is not None:
        try:
            payload["date"] = (result.reference_date + timedelta(days=parsed.offset)).isoformat()
        except OverflowError:
            # offsets like +99999999 point past date.max
            pass
    return payload


# -- Command-line driver -------------------------------------------------------
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse a quick-entry line into flag, day offset and memo text")
    parser.add_argument("text", nargs="*", help="Line to parse; omit to start an interactive prompt")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date (YYYY-MM-DD) instead of the current date",
    )
    parser.add_argument("--verbose", action="store_true", help="Emit debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the given line once, or read lines until EOF or "quit"."""
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    input_parser = build_parser()

    if args.text:
        result = input_parser.parse(" ".join(args.text), today=args.today)
        print(json.dumps(describe_result(result), ensure_ascii=False))
        return 0 if result.ok else 1

    print("Quick entry ready. Type 'quit' or 'exit' to stop.")
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if line.strip().lower() in {"quit", "exit"}:
            print("Goodbye!")
            break

        result = input_parser.parse(line, today=args.today)
        print(json.dumps(describe_result(result), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
