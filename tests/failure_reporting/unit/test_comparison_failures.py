"""Comparison failure model tests."""

from __future__ import annotations

import pytest
from simple_assertions.failure_reporting import (
    ComparisonFailure,
    ComparisonMismatch,
    MismatchKind,
    raise_for_mismatch,
)


def test_failure_carries_description_expected_and_actual() -> None:
    mismatch = ComparisonMismatch(
        kind=MismatchKind.SIZE,
        description="Invalid number of messages",
        expected="3",
        actual="2",
    )

    failure = mismatch.to_failure()

    assert isinstance(failure, AssertionError)
    assert failure.description == "Invalid number of messages"
    assert failure.expected == "3"
    assert failure.actual == "2"
    assert failure.kind is MismatchKind.SIZE
    assert str(failure) == "Invalid number of messages expected:<3> but was:<2>"
    assert failure.mismatch == mismatch


def test_raise_for_mismatch_is_silent_without_mismatch() -> None:
    raise_for_mismatch(None)


def test_raise_for_mismatch_raises_comparison_failure() -> None:
    mismatch = ComparisonMismatch(
        kind=MismatchKind.LEVEL,
        description="LogLevel mismatch",
        expected="DEBUG",
        actual="INFO",
    )

    with pytest.raises(ComparisonFailure) as exc_info:
        raise_for_mismatch(mismatch)

    assert exc_info.value.mismatch == mismatch
