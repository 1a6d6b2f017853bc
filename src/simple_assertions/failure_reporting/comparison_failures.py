"""Structured comparison failures shared by every assertion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MismatchKind(str, Enum):
    """Sub-kind of a detected mismatch."""

    SIZE = "size"
    MESSAGE = "message"
    LEVEL = "level"
    PARAM_COUNT = "param_count"
    PARAM_VALUE = "param_value"
    MISSING_ITEMS = "missing_items"
    RESIDUAL = "residual"
    DATE_FIELD = "date_field"
    DATE_FORMAT = "date_format"


@dataclass(frozen=True)
class ComparisonMismatch:
    """Difference between an expected and an actual value, as plain data."""

    kind: MismatchKind
    description: str
    expected: str
    actual: str

    def to_failure(self) -> ComparisonFailure:
        """Build the raisable failure carrying this mismatch."""
        return ComparisonFailure(
            self.description,
            expected=self.expected,
            actual=self.actual,
            kind=self.kind,
        )


class ComparisonFailure(AssertionError):
    """Assertion failure with separate expected and actual strings."""

    def __init__(
        self,
        description: str,
        *,
        expected: str,
        actual: str,
        kind: MismatchKind,
    ) -> None:
        super().__init__(f"{description} expected:<{expected}> but was:<{actual}>")
        self.description = description
        self.expected = expected
        self.actual = actual
        self.kind = kind

    @property
    def mismatch(self) -> ComparisonMismatch:
        """Return the failure as a plain mismatch value."""
        return ComparisonMismatch(
            kind=self.kind,
            description=self.description,
            expected=self.expected,
            actual=self.actual,
        )


def raise_for_mismatch(mismatch: ComparisonMismatch | None) -> None:
    """Raise `ComparisonFailure` when a mismatch is present."""
    if mismatch is not None:
        raise mismatch.to_failure()
