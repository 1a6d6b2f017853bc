"""Log expectation domain exports."""

from .capture_sink import (
    CapturedEvent,
    CaptureSource,
    LogCaptureHandler,
    capture_logs,
    logger_name_for,
)
from .expectation_entries import (
    ANY,
    AnyValue,
    Exact,
    ExactNull,
    ExpectationEntry,
    ParamExpectation,
    to_param_expectation,
)
from .replay_engine import LogExpectations, ReplayOutcome, compare_entry, replay_expectations

__all__ = [
    "ANY",
    "AnyValue",
    "CaptureSource",
    "CapturedEvent",
    "Exact",
    "ExactNull",
    "ExpectationEntry",
    "LogCaptureHandler",
    "LogExpectations",
    "ParamExpectation",
    "ReplayOutcome",
    "capture_logs",
    "compare_entry",
    "logger_name_for",
    "replay_expectations",
    "to_param_expectation",
]
