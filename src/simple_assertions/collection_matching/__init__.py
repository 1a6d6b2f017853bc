"""Collection matching domain exports."""

from .field_descriptors import (
    FieldDescriptor,
    IntrospectionError,
    attribute_fields,
    describe_fields,
    key_fields,
)
from .matching_outcomes import CollectionMatchResult
from .multiset_matcher import (
    assert_collections_match,
    assert_collections_match_by_fields,
    match_collections,
)
from .record_comparators import RecordComparator, by_equality, by_fields, judges_equal
from .record_rendering import render_record

__all__ = [
    "CollectionMatchResult",
    "FieldDescriptor",
    "IntrospectionError",
    "RecordComparator",
    "assert_collections_match",
    "assert_collections_match_by_fields",
    "attribute_fields",
    "by_equality",
    "by_fields",
    "describe_fields",
    "judges_equal",
    "key_fields",
    "match_collections",
    "render_record",
]
