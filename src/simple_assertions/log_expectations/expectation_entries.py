"""Expected log entries and per-parameter expectations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from simple_assertions.log_levels import resolve_level


@dataclass(frozen=True)
class Exact:
    """Parameter must equal `value`."""

    value: object


@dataclass(frozen=True)
class AnyValue:
    """Parameter may hold any value, including None."""

    def __repr__(self) -> str:
        return "ANY"


@dataclass(frozen=True)
class ExactNull:
    """Parameter must be None."""


ParamExpectation = Exact | AnyValue | ExactNull

ANY = AnyValue()


def to_param_expectation(value: object) -> ParamExpectation:
    """Normalize a raw expected parameter into a `ParamExpectation`."""
    if isinstance(value, Exact | AnyValue | ExactNull):
        return value
    if value is None:
        return ExactNull()
    return Exact(value)


@dataclass(frozen=True)
class ExpectationEntry:
    """One declared log event the code under test is expected to emit."""

    level: int
    message_template: str
    params: tuple[ParamExpectation, ...] = ()

    @classmethod
    def create(
        cls,
        level: int | str,
        message_template: str,
        params: Iterable[object] | None = None,
    ) -> ExpectationEntry:
        """Build an entry from raw values; absent params mean no parameters."""
        return cls(
            level=resolve_level(level),
            message_template=message_template,
            params=tuple(to_param_expectation(param) for param in params or ()),
        )
