"""End-to-end log expectation tests against real loggers."""

from __future__ import annotations

import logging

import pytest
from simple_assertions import ANY, ComparisonFailure, LogExpectations, MismatchKind, capture_logs


class OrderService:
    """Code under test that logs through a class-derived logger name."""

    _logger = logging.getLogger(f"{__name__}.OrderService")

    def create(self, order_id: int, note: str | None = None) -> None:
        self._logger.info("new message %s, %s", order_id, note)

    def announce(self, *messages: str) -> None:
        for message in messages:
            self._logger.info(message)


_MESSAGE = "teste message"


def test_logs_by_class() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation(logging.INFO, _MESSAGE)

        OrderService().announce(_MESSAGE)

        expectations.assert_expectations()


def test_level_mismatch_fails() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation(logging.DEBUG, _MESSAGE)

        OrderService().announce(_MESSAGE)

        with pytest.raises(ComparisonFailure) as exc_info:
            expectations.assert_expectations()

    assert exc_info.value.kind is MismatchKind.LEVEL


def test_missing_and_extra_messages_fail_on_count() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation("INFO", _MESSAGE)

        with pytest.raises(ComparisonFailure, match="Invalid number of messages"):
            expectations.assert_expectations()

        OrderService().announce(_MESSAGE, "other message")

        with pytest.raises(ComparisonFailure) as exc_info:
            expectations.assert_expectations()

    assert (exc_info.value.expected, exc_info.value.actual) == ("1", "2")


def test_messages_must_arrive_in_declared_order() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation("INFO", "other message")
        expectations.add_expectation("INFO", _MESSAGE)

        OrderService().announce(_MESSAGE, "other message")

        with pytest.raises(ComparisonFailure) as exc_info:
            expectations.assert_expectations()

    assert exc_info.value.kind is MismatchKind.MESSAGE


def test_logs_by_name_in_order() -> None:
    logger = logging.getLogger("log-mock")

    with capture_logs("log-mock") as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation("INFO", _MESSAGE)
        expectations.add_expectation("INFO", "other message")

        logger.info(_MESSAGE)
        logger.info("other message")

        expectations.assert_expectations()


def test_parameters_with_wildcard_and_null() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation("INFO", "new message %s, %s", 1, ANY)
        expectations.add_expectation("INFO", "new message %s, %s", 2, None)

        service = OrderService()
        service.create(1, "New Param")
        service.create(2)

        expectations.assert_expectations()


def test_null_parameter_does_not_match_value() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation("INFO", "new message %s, %s", 1, "New Param")

        OrderService().create(1)

        with pytest.raises(ComparisonFailure) as exc_info:
            expectations.assert_expectations()

    assert exc_info.value.description == "Param [1] mismatch"
    assert (exc_info.value.expected, exc_info.value.actual) == ("New Param", "null")


def test_successful_replay_leaves_no_state_behind() -> None:
    with capture_logs(OrderService) as capture:
        expectations = LogExpectations(capture)
        expectations.add_expectation("INFO", _MESSAGE)
        OrderService().announce(_MESSAGE)
        expectations.assert_expectations()

        expectations.add_expectation("INFO", "second round")
        OrderService().announce("second round")
        expectations.assert_expectations()

    assert capture.events == ()
    assert expectations.pending == ()
