"""Date assertion exports."""

from .date_field_assert import (
    DateField,
    InvalidFieldSelectorError,
    assert_date,
    assert_date_by_format,
    resolve_date_field,
)

__all__ = [
    "DateField",
    "InvalidFieldSelectorError",
    "assert_date",
    "assert_date_by_format",
    "resolve_date_field",
]
