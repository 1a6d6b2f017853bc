"""Date assertion tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest
from simple_assertions.date_assertions import (
    DateField,
    InvalidFieldSelectorError,
    assert_date,
    assert_date_by_format,
)
from simple_assertions.failure_reporting import ComparisonFailure, MismatchKind

_MESSAGE = "test message"
_NOW = datetime(2016, 12, 29, 14, 30, 15)
_TWO_HOURS_EARLIER = _NOW - timedelta(hours=2)


def test_equal_dates_pass_without_fields() -> None:
    assert_date(_NOW, datetime(2016, 12, 29, 14, 30, 15))


def test_different_dates_fail_without_fields() -> None:
    with pytest.raises(ComparisonFailure) as exc_info:
        assert_date(_NOW, _NOW + timedelta(milliseconds=10))

    assert exc_info.value.description == "Date mismatch"


def test_custom_message_replaces_description() -> None:
    with pytest.raises(ComparisonFailure) as exc_info:
        assert_date(_NOW, _NOW + timedelta(milliseconds=10), message=_MESSAGE)

    assert exc_info.value.description == _MESSAGE


def test_selected_fields_matching() -> None:
    assert_date(_NOW, _TWO_HOURS_EARLIER, DateField.DAY, DateField.MONTH, "year")


def test_selected_field_mismatch_reports_values() -> None:
    with pytest.raises(ComparisonFailure) as exc_info:
        assert_date(_NOW, _TWO_HOURS_EARLIER, "day", "month", "year", DateField.HOUR)

    failure = exc_info.value
    assert failure.kind is MismatchKind.DATE_FIELD
    assert failure.description.startswith("Field HOUR mismatch")
    assert (failure.expected, failure.actual) == ("14", "12")


def test_selected_field_mismatch_with_message() -> None:
    with pytest.raises(ComparisonFailure) as exc_info:
        assert_date(_NOW, _TWO_HOURS_EARLIER, DateField.HOUR, message=_MESSAGE)

    assert exc_info.value.description.startswith(_MESSAGE)


def test_weekday_is_comparable_on_plain_dates() -> None:
    assert_date(date(2024, 1, 1), date(2024, 1, 8), DateField.WEEKDAY)


def test_unknown_selector_is_rejected() -> None:
    with pytest.raises(InvalidFieldSelectorError):
        assert_date(_NOW, _NOW, "fortnight")


def test_time_field_on_plain_date_is_rejected() -> None:
    with pytest.raises(InvalidFieldSelectorError):
        assert_date(date(2024, 1, 1), date(2024, 1, 1), DateField.MINUTE)


def test_by_format_matching() -> None:
    assert_date_by_format(_NOW, _TWO_HOURS_EARLIER, "%Y-%m-%d")


def test_by_format_mismatch_reports_rendered_dates() -> None:
    fmt = "%Y-%m-%d %H:%M:%S"
    actual = _NOW - timedelta(minutes=2)

    with pytest.raises(ComparisonFailure) as exc_info:
        assert_date_by_format(_NOW, actual, fmt)

    failure = exc_info.value
    assert failure.kind is MismatchKind.DATE_FORMAT
    assert failure.description.startswith("Date mismatch")
    assert (failure.expected, failure.actual) == (_NOW.strftime(fmt), actual.strftime(fmt))


def test_by_format_mismatch_with_message() -> None:
    with pytest.raises(ComparisonFailure) as exc_info:
        assert_date_by_format(_NOW, _NOW - timedelta(minutes=2), "%H:%M", message=_MESSAGE)

    assert exc_info.value.description.startswith(_MESSAGE)
