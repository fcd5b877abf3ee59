from __future__ import annotations

from datetime import date

import pytest

from monthday.domain import (
    FROM,
    DateAccessor,
    Extracted,
    ExtractionFailure,
    MonthDay,
    TemporalAccessor,
    TemporalField,
    as_accessor,
    extract_fields,
    get_query,
    register_query,
    registered_queries,
)


def test_as_accessor_wraps_dates() -> None:
    accessor = as_accessor(date(2024, 3, 9))

    assert isinstance(accessor, DateAccessor)
    assert accessor.get(TemporalField.YEAR) == 2024
    assert accessor.get(TemporalField.MONTH_OF_YEAR) == 3


def test_as_accessor_passes_accessors_through() -> None:
    value = MonthDay.of(3, 9)

    assert isinstance(value, TemporalAccessor)
    assert as_accessor(value) is value
    assert as_accessor(object()) is None


def test_extract_fields_success() -> None:
    result = extract_fields(
        date(2024, 3, 9),
        TemporalField.MONTH_OF_YEAR,
        TemporalField.DAY_OF_MONTH,
    )

    assert result == Extracted((3, 9))


def test_extract_fields_checks_support_before_reading() -> None:
    result = extract_fields(MonthDay.of(3, 9), TemporalField.YEAR, TemporalField.DAY_OF_MONTH)

    assert isinstance(result, ExtractionFailure)
    assert "Year" in result.reason


def test_extract_fields_reports_non_accessors() -> None:
    result = extract_fields("--03-09", TemporalField.MONTH_OF_YEAR)

    assert result == ExtractionFailure("str does not expose temporal fields")


class _Broken:
    def is_supported(self, field: TemporalField) -> bool:
        return True

    def get(self, field: TemporalField) -> int:
        raise KeyError(field)


def test_extract_fields_captures_accessor_errors() -> None:
    result = extract_fields(_Broken(), TemporalField.MONTH_OF_YEAR)

    assert isinstance(result, ExtractionFailure)
    assert "MonthOfYear" in result.reason
    assert isinstance(result.cause, KeyError)


def test_extract_fields_rejects_non_integer_values() -> None:
    class _Textual(_Broken):
        def get(self, field: TemporalField) -> int:
            return "3"  # type: ignore[return-value]

    result = extract_fields(_Textual(), TemporalField.MONTH_OF_YEAR)

    assert isinstance(result, ExtractionFailure)
    assert result.cause is None
    assert "not an integer" in result.reason


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "monthday.domain.temporal._QUERIES",
        {name: get_query(name) for name in registered_queries()},
    )


@pytest.mark.usefixtures("isolated_registry")
def test_register_query_rejects_duplicates_unless_replacing() -> None:
    name = "test.day_of_month"
    query = register_query(name, lambda temporal: temporal.get(TemporalField.DAY_OF_MONTH))

    assert name in registered_queries()
    assert get_query(name) is query
    assert query(MonthDay.of(1, 5)) == 5
    assert str(query) == name

    with pytest.raises(ValueError, match="already registered"):
        register_query(name, lambda temporal: 0)

    replacement = register_query(name, lambda temporal: 0, replace=True)
    assert get_query(name) is replacement


@pytest.mark.usefixtures("isolated_registry")
def test_pinned_query_cannot_be_replaced() -> None:
    original = get_query("MonthDay.FROM")

    with pytest.raises(ValueError, match="pinned"):
        register_query("MonthDay.FROM", lambda temporal: None, replace=True)

    assert get_query("MonthDay.FROM") is original
    assert original is FROM


def test_registry_state_does_not_leak_between_tests() -> None:
    assert "test.day_of_month" not in registered_queries()


def test_get_query_unknown_name() -> None:
    with pytest.raises(LookupError):
        get_query("missing.query")
