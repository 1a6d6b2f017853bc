"""Field-level and format-level date assertions."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from simple_assertions.failure_reporting import ComparisonMismatch, MismatchKind, raise_for_mismatch


class InvalidFieldSelectorError(Exception):
    """Raised when a date field selector is unknown or unavailable."""


class DateField(str, Enum):
    """Calendar fields that can be compared individually."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEKDAY = "weekday"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MICROSECOND = "microsecond"


_TIME_FIELDS = frozenset(
    {DateField.HOUR, DateField.MINUTE, DateField.SECOND, DateField.MICROSECOND}
)


def resolve_date_field(selector: DateField | str) -> DateField:
    """Return the `DateField` for a member or its (case-insensitive) name."""
    if isinstance(selector, DateField):
        return selector
    if isinstance(selector, str):
        normalized = selector.strip().upper()
        if normalized in DateField.__members__:
            return DateField[normalized]
    raise InvalidFieldSelectorError(f"Unknown date field selector: {selector!r}")


def assert_date(
    expected: date,
    actual: date,
    *fields: DateField | str,
    message: str | None = None,
) -> None:
    """Assert two dates agree on `fields`, or are equal when no field is given."""
    selected = [resolve_date_field(field) for field in fields]
    if not selected:
        if expected != actual:
            raise_for_mismatch(
                ComparisonMismatch(
                    kind=MismatchKind.DATE_FIELD,
                    description=message or "Date mismatch",
                    expected=expected.isoformat(),
                    actual=actual.isoformat(),
                )
            )
        return

    for field in selected:
        expected_value = _read_field(expected, field)
        actual_value = _read_field(actual, field)
        if expected_value != actual_value:
            description = f"Field {field.name} mismatch"
            raise_for_mismatch(
                ComparisonMismatch(
                    kind=MismatchKind.DATE_FIELD,
                    description=f"{message}: {description}" if message else description,
                    expected=str(expected_value),
                    actual=str(actual_value),
                )
            )


def assert_date_by_format(
    expected: date,
    actual: date,
    date_format: str,
    *,
    message: str | None = None,
) -> None:
    """Assert both dates render identically with `date_format`."""
    expected_text = expected.strftime(date_format)
    actual_text = actual.strftime(date_format)
    if expected_text != actual_text:
        raise_for_mismatch(
            ComparisonMismatch(
                kind=MismatchKind.DATE_FORMAT,
                description=f"{message}: Date mismatch" if message else "Date mismatch",
                expected=expected_text,
                actual=actual_text,
            )
        )


def _read_field(value: date, field: DateField) -> int:
    if field == DateField.WEEKDAY:
        return value.weekday()
    if field in _TIME_FIELDS and not isinstance(value, datetime):
        raise InvalidFieldSelectorError(
            f"Date field {field.name} is not available on {type(value).__name__} values."
        )
    return int(getattr(value, field.value))
