from __future__ import annotations

from datetime import date

import pytest

from monthday.domain import (
    PARSER,
    DateTimeError,
    DateTimeFormatter,
    DateTimeFormatterBuilder,
    MonthDay,
    ParseError,
    TemporalField,
)


def test_default_parser_pattern() -> None:
    assert str(PARSER) == "--MM-dd"
    assert PARSER.format(MonthDay.of(1, 5)) == "--01-05"


def test_parse_fields_collects_values() -> None:
    parsed = PARSER.parse_fields("--12-03")

    assert parsed.get(TemporalField.MONTH_OF_YEAR) == 12
    assert parsed.get(TemporalField.DAY_OF_MONTH) == 3
    assert not parsed.is_supported(TemporalField.YEAR)
    with pytest.raises(DateTimeError):
        parsed.get(TemporalField.YEAR)


def test_parse_error_reports_index() -> None:
    with pytest.raises(ParseError) as exc:
        PARSER.parse_fields("--12/03")

    assert exc.value.error_index == 4
    assert exc.value.text == "--12/03"


def test_parse_wraps_query_failures() -> None:
    with pytest.raises(ParseError, match="could not be parsed") as exc:
        PARSER.parse("--06-31", MonthDay.from_temporal)

    assert isinstance(exc.value.__cause__, DateTimeError)


def test_builder_single_width_accepts_one_or_two_digits() -> None:
    formatter = (
        DateTimeFormatterBuilder()
        .append_value(TemporalField.DAY_OF_MONTH)
        .append_literal(".")
        .append_value(TemporalField.MONTH_OF_YEAR)
        .to_formatter()
    )

    assert MonthDay.parse_with("3.12", formatter) == MonthDay.of(12, 3)
    assert MonthDay.parse_with("03.2", formatter) == MonthDay.of(2, 3)
    assert formatter.format(MonthDay.of(2, 3)) == "3.2"


def test_builder_rejects_bad_width() -> None:
    with pytest.raises(ValueError, match="width"):
        DateTimeFormatterBuilder().append_value(TemporalField.DAY_OF_MONTH, 0)


def test_of_pattern_with_year_and_quoted_literals() -> None:
    formatter = DateTimeFormatter.of_pattern("'day' dd 'of' MM, yyyy")

    assert formatter.format(date(2024, 7, 4)) == "day 04 of 07, 2024"
    assert MonthDay.parse_with("day 04 of 07, 2024", formatter) == MonthDay.of(7, 4)


def test_of_pattern_escaped_quote() -> None:
    formatter = DateTimeFormatter.of_pattern("MM''dd")

    assert formatter.format(MonthDay.of(5, 6)) == "05'06"


@pytest.mark.parametrize("pattern", ["MMM-dd", "yy-MM-dd", "HH:mm", "'open"])
def test_of_pattern_rejects_unsupported_patterns(pattern: str) -> None:
    with pytest.raises(ValueError):
        DateTimeFormatter.of_pattern(pattern)


def test_format_requires_fields() -> None:
    formatter = DateTimeFormatter.of_pattern("yyyy-MM-dd")

    with pytest.raises(DateTimeError, match="Year"):
        formatter.format(MonthDay.of(1, 1))
    with pytest.raises(DateTimeError):
        formatter.format("2024-01-01")
