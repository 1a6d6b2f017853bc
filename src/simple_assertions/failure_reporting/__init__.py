"""Failure reporting domain exports."""

from .comparison_failures import (
    ComparisonFailure,
    ComparisonMismatch,
    MismatchKind,
    raise_for_mismatch,
)

__all__ = [
    "ComparisonFailure",
    "ComparisonMismatch",
    "MismatchKind",
    "raise_for_mismatch",
]
