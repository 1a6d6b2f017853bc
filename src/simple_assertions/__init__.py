"""Assertion primitives for comparing record collections and captured log events."""

import logging

from .collection_matching import (
    assert_collections_match,
    assert_collections_match_by_fields,
    by_fields,
    match_collections,
)
from .failure_reporting import ComparisonFailure, ComparisonMismatch, MismatchKind
from .log_expectations import ANY, LogExpectations, capture_logs

logging.getLogger("simple_assertions").addHandler(logging.NullHandler())

__all__ = [
    "ANY",
    "ComparisonFailure",
    "ComparisonMismatch",
    "LogExpectations",
    "MismatchKind",
    "assert_collections_match",
    "assert_collections_match_by_fields",
    "by_fields",
    "capture_logs",
    "match_collections",
]
