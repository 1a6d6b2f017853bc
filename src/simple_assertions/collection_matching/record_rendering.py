"""Structural short-form rendering of records and field values."""

from __future__ import annotations

from collections.abc import Mapping, Set
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType

from .field_descriptors import IntrospectionError, describe_fields

_SCALAR_TYPES = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    Decimal,
    date,
    datetime,
    time,
    timedelta,
    Enum,
    type(None),
)

_OPAQUE_TYPES = (type, FunctionType, BuiltinFunctionType, MethodType, ModuleType)


def render_record(value: object, *, max_length: int = 0) -> str:
    """Render `value` field by field as `TypeName[field=value,...]`.

    Nested records, mappings and collections are rendered the same way, so two
    values render identically when their field values do. Mapping items are
    sorted by their rendering, so key order does not matter. `max_length` > 0
    truncates the result.
    """
    rendered = _render(value, seen=frozenset())
    if max_length > 0 and len(rendered) > max_length:
        return rendered[: max(max_length - 3, 0)] + "..."
    return rendered


def _render(value: object, *, seen: frozenset[int]) -> str:
    if isinstance(value, _SCALAR_TYPES):
        return repr(value)
    if id(value) in seen:
        return f"<cycle {type(value).__name__}>"
    nested_seen = seen | {id(value)}
    if isinstance(value, Mapping):
        items = sorted(
            f"{_render(key, seen=nested_seen)}={_render(item, seen=nested_seen)}"
            for key, item in value.items()
        )
        return "{" + ",".join(items) + "}"
    if isinstance(value, Set):
        return "{" + ",".join(sorted(_render(item, seen=nested_seen) for item in value)) + "}"
    if isinstance(value, list | tuple):
        return "[" + ",".join(_render(item, seen=nested_seen) for item in value) + "]"
    descriptors = describe_fields(value)
    if not descriptors:
        return f"{type(value).__name__}[]" if _holds_instance_state(value) else repr(value)
    parts = []
    for descriptor in descriptors:
        try:
            field_value = descriptor.read(value)
        except IntrospectionError:
            continue
        parts.append(f"{descriptor.name}={_render(field_value, seen=nested_seen)}")
    return f"{type(value).__name__}[{','.join(parts)}]"


def _holds_instance_state(value: object) -> bool:
    if isinstance(value, _OPAQUE_TYPES):
        return False
    if isinstance(getattr(value, "__dict__", None), Mapping):
        return True
    return any("__slots__" in klass.__dict__ for klass in type(value).__mro__[:-1])
