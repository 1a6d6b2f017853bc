"""Record comparators, including the field-by-field comparator."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from .field_descriptors import FieldDescriptor, describe_fields
from .record_rendering import render_record

A = TypeVar("A")

RecordComparator = Callable[[A, A], Any]
"""Equality test between two records.

An `int` result means equal when it is zero. A `bool` result means equal when
it is True. Anything else is judged by truthiness of `result == 0`.
"""

_LOGGER = logging.getLogger("simple_assertions.collection_matching")


def judges_equal(result: object) -> bool:
    """Interpret a comparator result as equal / not equal."""
    if isinstance(result, bool):
        return result
    return result == 0


def by_equality(first: object, second: object) -> bool:
    """Compare two records with `==`."""
    return first == second


def by_fields(
    excluded: Iterable[str] = (),
    descriptors: Sequence[FieldDescriptor] | None = None,
    *,
    log_mismatches: bool = True,
) -> RecordComparator[Any]:
    """Build a comparator that checks every non-excluded field by rendered value.

    Args:
      excluded: Field names skipped during comparison.
      descriptors: Explicit field list. When omitted, the full field set of
        the first record (inherited fields included) is used. Mapping records
        must also share the same non-excluded keys. Records without fields,
        such as plain scalars, are compared whole.
      log_mismatches: Emit a DEBUG line naming the first differing field.

    Returns:
      A comparator returning 0 for equal records and 1 otherwise.

    Raises:
      IntrospectionError: From the returned comparator, when a field cannot
        be read from either record.
    """
    excluded_names = frozenset((excluded,) if isinstance(excluded, str) else excluded)

    def compare(first: Any, second: Any) -> int:
        fields = descriptors if descriptors is not None else describe_fields(first)
        if descriptors is None and isinstance(first, Mapping) and isinstance(second, Mapping):
            unshared_keys = _unshared_keys(first, second, excluded_names)
            if unshared_keys:
                missing_key = unshared_keys[0]
                if log_mismatches:
                    _LOGGER.debug(
                        "Field=[%s]. val1=%s, val2=%s",
                        missing_key,
                        _render_entry(first, missing_key),
                        _render_entry(second, missing_key),
                    )
                return 1
        if not fields:
            return 0 if render_record(first) == render_record(second) else 1
        for descriptor in fields:
            if descriptor.name in excluded_names:
                continue
            first_text = render_record(descriptor.read(first))
            second_text = render_record(descriptor.read(second))
            if first_text != second_text:
                if log_mismatches:
                    _LOGGER.debug(
                        "Field=[%s]. val1=%s, val2=%s", descriptor.name, first_text, second_text
                    )
                return 1
        return 0

    return compare


def _unshared_keys(
    first: Mapping[Any, Any], second: Mapping[Any, Any], excluded_names: frozenset[str]
) -> list[Any]:
    unshared = (first.keys() - second.keys()) | (second.keys() - first.keys())
    return sorted((key for key in unshared if str(key) not in excluded_names), key=str)


def _render_entry(record: Mapping[Any, Any], key: Any) -> str:
    return render_record(record[key]) if key in record else "<absent>"
