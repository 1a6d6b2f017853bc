"""Ordered replay of declared log expectations against captured events."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from simple_assertions.failure_reporting import (
    ComparisonMismatch,
    MismatchKind,
    raise_for_mismatch,
)
from simple_assertions.log_levels import level_name

from .capture_sink import CapturedEvent, CaptureSource
from .expectation_entries import (
    AnyValue,
    Exact,
    ExactNull,
    ExpectationEntry,
    ParamExpectation,
)


@dataclass(frozen=True)
class ReplayOutcome:
    """Result of one replay; `mismatch` is the first divergence found."""

    consumed: int
    mismatch: ComparisonMismatch | None = None

    @property
    def is_ok(self) -> bool:
        """Return True when every expectation matched its event."""
        return self.mismatch is None


def replay_expectations(
    expectations: deque[ExpectationEntry],
    events: Sequence[CapturedEvent],
) -> ReplayOutcome:
    """Consume `expectations` against `events`, both in their given order.

    Counts are compared first and a difference fails without any per-entry
    check. Matched entries are popped from the head of `expectations`; the
    first failing entry and everything after it stay queued.
    """
    if len(events) != len(expectations):
        return ReplayOutcome(
            consumed=0,
            mismatch=ComparisonMismatch(
                kind=MismatchKind.SIZE,
                description="Invalid number of messages",
                expected=str(len(expectations)),
                actual=str(len(events)),
            ),
        )

    consumed = 0
    for event in events:
        mismatch = compare_entry(expectations[0], event)
        if mismatch is not None:
            return ReplayOutcome(consumed=consumed, mismatch=mismatch)
        expectations.popleft()
        consumed += 1
    return ReplayOutcome(consumed=consumed)


def compare_entry(entry: ExpectationEntry, event: CapturedEvent) -> ComparisonMismatch | None:
    """Compare one expectation with one event, reporting the first difference."""
    if entry.message_template != event.message_template:
        return ComparisonMismatch(
            kind=MismatchKind.MESSAGE,
            description="Message mismatch",
            expected=entry.message_template,
            actual=event.message_template,
        )
    if entry.level != event.level:
        return ComparisonMismatch(
            kind=MismatchKind.LEVEL,
            description="LogLevel mismatch",
            expected=level_name(entry.level),
            actual=level_name(event.level),
        )
    if len(entry.params) != len(event.args):
        return ComparisonMismatch(
            kind=MismatchKind.PARAM_COUNT,
            description="Incorrect number of params",
            expected=str(len(entry.params)),
            actual=str(len(event.args)),
        )
    for index, (expected, actual) in enumerate(zip(entry.params, event.args, strict=True)):
        mismatch = _compare_param(index, expected, actual)
        if mismatch is not None:
            return mismatch
    return None


def _compare_param(
    index: int, expected: ParamExpectation, actual: object
) -> ComparisonMismatch | None:
    if isinstance(expected, AnyValue):
        return None
    if isinstance(expected, ExactNull):
        if actual is None:
            return None
        return _param_mismatch(index, "null", _display(actual))
    if isinstance(expected, Exact) and expected.value == actual:
        return None
    return _param_mismatch(index, _display(getattr(expected, "value", None)), _display(actual))


def _param_mismatch(index: int, expected: str, actual: str) -> ComparisonMismatch:
    return ComparisonMismatch(
        kind=MismatchKind.PARAM_VALUE,
        description=f"Param [{index}] mismatch",
        expected=expected,
        actual=actual,
    )


def _display(value: object) -> str:
    return "null" if value is None else str(value)


class LogExpectations:
    """FIFO queue of expected log entries checked against one capture.

    Typical use::

        with capture_logs("orders.service") as capture:
            expectations = LogExpectations(capture)
            expectations.add_expectation("INFO", "Created order %s", 42)
            create_order(42)
            expectations.assert_expectations()
    """

    def __init__(self, capture: CaptureSource) -> None:
        self._capture = capture
        self._expectations: deque[ExpectationEntry] = deque()

    @property
    def pending(self) -> tuple[ExpectationEntry, ...]:
        """Return expectations not yet matched, in declaration order."""
        return tuple(self._expectations)

    def add_expectation(
        self, level: int | str, message_template: str, *params: object
    ) -> ExpectationEntry:
        """Queue one expected entry; use `ANY` for a parameter that may vary."""
        entry = ExpectationEntry.create(level, message_template, params)
        self._expectations.append(entry)
        return entry

    def replay(self) -> ReplayOutcome:
        """Replay queued expectations, draining every event that matched."""
        outcome = replay_expectations(self._expectations, self._capture.events)
        self._capture.discard(outcome.consumed)
        return outcome

    def assert_expectations(self) -> None:
        """Replay and raise `ComparisonFailure` at the first divergence."""
        raise_for_mismatch(self.replay().mismatch)
