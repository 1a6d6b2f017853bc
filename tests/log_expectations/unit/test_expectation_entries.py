"""Expectation entry and parameter expectation tests."""

from __future__ import annotations

import logging

import pytest
from simple_assertions.log_expectations import (
    ANY,
    AnyValue,
    Exact,
    ExactNull,
    ExpectationEntry,
    to_param_expectation,
)
from simple_assertions.log_levels import level_name, resolve_level


def test_raw_params_are_normalized() -> None:
    assert to_param_expectation(None) == ExactNull()
    assert to_param_expectation(ANY) is ANY
    assert to_param_expectation(3) == Exact(3)
    assert to_param_expectation(Exact(None)) == Exact(None)


def test_any_is_an_any_value_and_renders_as_any() -> None:
    assert isinstance(ANY, AnyValue)
    assert repr(ANY) == "ANY"


def test_entry_without_params_has_empty_params() -> None:
    entry = ExpectationEntry.create("info", "started", None)

    assert entry.level == logging.INFO
    assert entry.params == ()


def test_entry_is_immutable() -> None:
    entry = ExpectationEntry.create(logging.WARNING, "careful %s", ["x"])

    with pytest.raises(AttributeError):
        entry.message_template = "changed"  # type: ignore[misc]


def test_level_names_and_numbers_resolve() -> None:
    assert resolve_level("DEBUG") == logging.DEBUG
    assert resolve_level(" warning ") == logging.WARNING
    assert resolve_level(25) == 25
    assert level_name(logging.ERROR) == "ERROR"


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_level("LOUD")


def test_bool_level_is_rejected() -> None:
    with pytest.raises(TypeError):
        resolve_level(True)
