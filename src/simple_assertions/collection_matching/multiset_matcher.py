"""Unordered multiset matching between two record collections."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from typing import Any

from simple_assertions.configuration.runtime_settings import CollectionMatchingSettings
from simple_assertions.failure_reporting import raise_for_mismatch

from .field_descriptors import FieldDescriptor
from .matching_outcomes import CollectionMatchResult
from .record_comparators import RecordComparator, by_fields, judges_equal

_LOGGER = logging.getLogger("simple_assertions.collection_matching")


def match_collections(
    list_one: Collection[Any],
    list_two: Collection[Any],
    comparator: RecordComparator[Any],
) -> CollectionMatchResult:
    """Pair items of both collections one-to-one under `comparator`.

    Each item of `list_one` consumes the first still-unpaired item of
    `list_two` the comparator judges equal (first fit, not an optimal
    assignment). Duplicates are matched by count. Neither input is mutated.
    The comparator is assumed to be symmetric and transitive; otherwise the
    reported leftovers depend on input order.
    """
    remaining_one = list(list_one)
    remaining_two = list(list_two)
    matched_pairs: list[tuple[object, object]] = []

    index = 0
    while index < len(remaining_one):
        if not remaining_two:
            _LOGGER.debug("List two exhausted with %d unmatched item(s)", len(remaining_one))
            return CollectionMatchResult(
                matched_pairs=tuple(matched_pairs),
                remaining_in_list_one=tuple(remaining_one),
                remaining_in_list_two=(),
                list_two_exhausted=True,
            )
        item_one = remaining_one[index]
        partner_index = _first_match_index(item_one, remaining_two, comparator)
        if partner_index is None:
            index += 1
            continue
        matched_pairs.append((item_one, remaining_two.pop(partner_index)))
        del remaining_one[index]

    return CollectionMatchResult(
        matched_pairs=tuple(matched_pairs),
        remaining_in_list_one=tuple(remaining_one),
        remaining_in_list_two=tuple(remaining_two),
    )


def assert_collections_match(
    list_one: Collection[Any],
    list_two: Collection[Any],
    comparator: RecordComparator[Any],
    *,
    max_rendered_length: int = 0,
) -> CollectionMatchResult:
    """Match both collections and raise `ComparisonFailure` on leftovers."""
    result = match_collections(list_one, list_two, comparator)
    raise_for_mismatch(result.mismatch(max_rendered_length=max_rendered_length))
    return result


def assert_collections_match_by_fields(
    list_one: Collection[Any],
    list_two: Collection[Any],
    *excluded_fields: str,
    descriptors: Sequence[FieldDescriptor] | None = None,
    settings: CollectionMatchingSettings | None = None,
) -> CollectionMatchResult:
    """Match both collections comparing records field by field.

    `settings` contributes default exclusions, which are merged with
    `excluded_fields`, plus the logging and rendering options.
    """
    resolved = settings or CollectionMatchingSettings()
    comparator = by_fields(
        resolved.excluded_fields | frozenset(excluded_fields),
        descriptors,
        log_mismatches=resolved.log_field_mismatches,
    )
    return assert_collections_match(
        list_one,
        list_two,
        comparator,
        max_rendered_length=resolved.max_rendered_length,
    )


def _first_match_index(
    item: object, candidates: Iterable[object], comparator: RecordComparator[Any]
) -> int | None:
    for candidate_index, candidate in enumerate(candidates):
        if judges_equal(comparator(item, candidate)):
            return candidate_index
    return None
