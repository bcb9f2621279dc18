from datetime import date

import pytest

from journal_input.exceptions import (
    DateRangeError,
    InputValidationError,
    ParseCancelled,
    ParseFailure,
)
from journal_input.models import Input, ParseResult
from journal_input.parser import InputParser, assemble_input

# 2024-01-10 is a Wednesday
WEDNESDAY = date(2024, 1, 10)
MONDAY = date(2024, 1, 8)


@pytest.fixture
def parser() -> InputParser:
    return InputParser()


def test_today_shortcut_resolves_to_zero(parser):
    result = parser.parse("today", today=WEDNESDAY)

    assert result.ok
    assert result.input == Input(flags="", offset=0, text="", scope="default")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("tomorrow", 1),
        ("tom", 1),
        ("morgen", 1),
        ("yesterday", -1),
        ("yes", -1),
        ("gestern", -1),
        ("heute", 0),
        ("tod", 0),
        ("0", 0),
    ],
)
def test_shortcut_vocabulary(parser, line, expected):
    assert parser.parse_input(line, today=WEDNESDAY).offset == expected


def test_numeric_offset_with_short_text_keeps_empty_flags(parser):
    parsed = parser.parse_input("+3 trip", today=WEDNESDAY)

    assert parsed.offset == 3
    assert parsed.text == "trip"
    assert parsed.flags == ""


def test_negative_numeric_offset(parser):
    assert parser.parse_input("-12", today=WEDNESDAY).offset == -12


def test_task_flag_without_date_defaults_to_today(parser):
    parsed = parser.parse_input("task buy milk", today=WEDNESDAY)

    assert parsed.flags == "task"
    assert parsed.text == "buy milk"
    assert parsed.offset == 0


def test_todo_flag_is_classified_as_task(parser):
    parsed = parser.parse_input("todo water plants", today=WEDNESDAY)

    assert parsed.flags == "task"
    assert parsed.text == "water plants"


def test_trailing_flag_after_date_expression(parser):
    parsed = parser.parse_input("tomorrow task call mom", today=WEDNESDAY)

    assert parsed.flags == "task"
    assert parsed.offset == 1
    assert parsed.text == "call mom"


def test_leading_flag_before_weekday(parser):
    parsed = parser.parse_input("task next friday submit report", today=WEDNESDAY)

    assert parsed.flags == "task"
    assert parsed.offset == 2
    assert parsed.text == "submit report"


def test_long_unflagged_text_becomes_memo_on_today(parser):
    parsed = parser.parse_input("call the plumber", today=WEDNESDAY)

    assert parsed.flags == "memo"
    assert parsed.offset == 0
    assert parsed.text == "call the plumber"


def test_short_unflagged_text_has_no_offset(parser):
    parsed = parser.parse_input("hello", today=WEDNESDAY)

    assert parsed.flags == ""
    assert parsed.offset is None
    assert parsed.text == "hello"


def test_memo_threshold_is_configurable():
    parser = InputParser(memo_min_length=2)

    parsed = parser.parse_input("+1 gym", today=WEDNESDAY)

    assert parsed.flags == "memo"
    assert parsed.offset == 1


def test_full_calendar_date(parser):
    assert parser.parse_input("2024-01-15", today=WEDNESDAY).offset == 5
    assert parser.parse_input("2023-12-31", today=WEDNESDAY).offset == -10


def test_partial_calendar_dates_use_reference_year_and_month(parser):
    assert parser.parse_input("1-15", today=WEDNESDAY).offset == 5
    assert parser.parse_input("15", today=WEDNESDAY).offset == 5
    assert parser.parse_input("3", today=WEDNESDAY).offset == -7


def test_calendar_date_with_memo_text(parser):
    parsed = parser.parse_input("2024-01-15 renew passport", today=WEDNESDAY)

    assert parsed.offset == 5
    assert parsed.flags == "memo"
    assert parsed.text == "renew passport"


def test_day_31_is_accepted_in_a_thirty_day_month(parser):
    # April has 30 days; the 31st rolls over to May 1st
    result = parser.parse("31", today=date(2024, 4, 10))

    assert result.ok
    assert result.input.offset == 21


def test_next_and_last_weekday(parser):
    assert parser.parse_input("next monday", today=WEDNESDAY).offset == 5
    assert parser.parse_input("last monday", today=WEDNESDAY).offset == -2
    assert parser.parse_input("n fri", today=WEDNESDAY).offset == 2
    assert parser.parse_input("l freitag", today=WEDNESDAY).offset == -5


def test_named_weekday_equal_to_today_never_resolves_to_zero(parser):
    assert parser.parse_input("next monday", today=MONDAY).offset == 7
    assert parser.parse_input("last monday", today=MONDAY).offset == -7


@pytest.mark.parametrize("value", ["", None, "   "])
def test_empty_input_is_cancelled(parser, value):
    result = parser.parse(value, today=WEDNESDAY)

    assert result.cancelled
    assert isinstance(result.error, ParseCancelled)
    assert result.input is None


def test_multiline_input_does_not_match_and_is_cancelled(parser):
    result = parser.parse("first line\nsecond line", today=WEDNESDAY)

    assert result.cancelled


def test_flag_without_text_is_a_validation_failure(parser):
    result = parser.parse("task", today=WEDNESDAY)

    assert result.status == "invalid"
    assert not result.cancelled
    assert isinstance(result.error, InputValidationError)
    with pytest.raises(InputValidationError):
        result.unwrap()


def test_out_of_range_day_is_surfaced_as_parse_failure(parser):
    result = parser.parse("32", today=WEDNESDAY)

    assert result.status == "error"
    assert isinstance(result.error, ParseFailure)
    assert isinstance(result.error.__cause__, DateRangeError)
    metadata = result.error.to_metadata()
    assert metadata["type"] == "error"
    assert "Invalid value for day" in metadata["cause"]


def test_out_of_range_month_is_surfaced_as_parse_failure(parser):
    result = parser.parse("2024-14-01", today=WEDNESDAY)

    assert result.status == "error"
    assert "Invalid value for month" in str(result.error.__cause__)


def test_non_ascii_digits_are_not_date_expressions(parser):
    short = parser.parse_input("３ kiwi", today=WEDNESDAY)
    assert short.offset is None
    assert short.text == "３ kiwi"

    # long enough to become a memo, so it lands on today rather than the 3rd
    fullwidth = parser.parse_input("３ bananas", today=WEDNESDAY)
    assert fullwidth.offset == 0
    assert fullwidth.text == "３ bananas"

    arabic_indic = parser.parse_input("+٣ trip", today=WEDNESDAY)
    assert arabic_indic.text == "+٣ trip"
    assert arabic_indic.offset == 0


def test_trailing_flag_word_at_end_of_line_is_memo_text(parser):
    result = parser.parse("5 task", today=WEDNESDAY)

    assert result.ok
    assert result.input == Input(flags="", offset=-5, text="task", scope="default")


def test_unwrap_without_input_or_error_raises_parse_failure():
    result = ParseResult(status="ok", reference_date=WEDNESDAY)

    with pytest.raises(ParseFailure):
        result.unwrap()


def test_vocabulary_is_case_sensitive(parser):
    parsed = parser.parse_input("Today", today=WEDNESDAY)

    assert parsed.offset is None
    assert parsed.text == "Today"


def test_date_only_input_keeps_empty_flags_and_text(parser):
    parsed = parser.parse_input("next sunday", today=WEDNESDAY)

    assert parsed.flags == ""
    assert parsed.text == ""
    assert parsed.offset == 4


def test_parsing_is_repeatable_for_same_reference_date(parser):
    first = parser.parse("task next thursday dentist", today=WEDNESDAY)
    second = parser.parse("task next thursday dentist", today=WEDNESDAY)

    assert first == second


def test_clock_supplies_reference_date_when_none_given():
    parser = InputParser(clock=lambda: MONDAY)

    result = parser.parse("next monday")

    assert result.reference_date == MONDAY
    assert result.input.offset == 7


def test_assemble_input_applies_rules_in_order():
    assert assemble_input("", None, "").offset is None
    assert assemble_input("", None, "seven c").flags == "memo"
    assert assemble_input("", None, "seven c").offset == 0
    assert assemble_input("task", 3, "x").offset == 3
    with pytest.raises(InputValidationError):
        assemble_input("task", 0, "")
