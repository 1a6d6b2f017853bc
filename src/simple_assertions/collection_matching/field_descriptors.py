"""Field descriptors used to read comparable values out of records."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from operator import attrgetter, itemgetter

FieldAccessor = Callable[[object], object]

_IGNORED_SLOTS = frozenset({"__dict__", "__weakref__"})


class IntrospectionError(Exception):
    """Raised when a record field cannot be read during field comparison.

    This signals an unsupported record shape or a broken test setup. It is
    intentionally not an `AssertionError`.
    """


@dataclass(frozen=True)
class FieldDescriptor:
    """Named accessor for one comparable record field."""

    name: str
    accessor: FieldAccessor

    def read(self, record: object) -> object:
        """Read this field from `record`, wrapping access errors."""
        try:
            return self.accessor(record)
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            raise IntrospectionError(
                f"Cannot read field '{self.name}' from {type(record).__name__}: {exc}"
            ) from exc


def attribute_fields(*names: str) -> tuple[FieldDescriptor, ...]:
    """Build attribute-based descriptors for an explicit list of field names."""
    return tuple(FieldDescriptor(name=name, accessor=attrgetter(name)) for name in names)


def key_fields(*keys: str) -> tuple[FieldDescriptor, ...]:
    """Build mapping-key descriptors for an explicit list of keys."""
    return tuple(FieldDescriptor(name=key, accessor=itemgetter(key)) for key in keys)


def describe_fields(record: object) -> tuple[FieldDescriptor, ...]:
    """Derive the full field set of `record`, including inherited fields."""
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return attribute_fields(*(field.name for field in dataclasses.fields(record)))
    if isinstance(record, Mapping):
        return tuple(FieldDescriptor(name=str(key), accessor=itemgetter(key)) for key in record)
    return attribute_fields(*_instance_attribute_names(record))


def _instance_attribute_names(record: object) -> tuple[str, ...]:
    names: list[str] = []
    instance_dict = getattr(record, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        names.extend(str(name) for name in instance_dict)
    for slot_name in _slot_names(type(record)):
        if slot_name not in names:
            names.append(slot_name)
    return tuple(names)


def _slot_names(record_type: type) -> Iterator[str]:
    for klass in reversed(record_type.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in tuple(slots):
            if slot in _IGNORED_SLOTS:
                continue
            yield _mangle(klass, slot)


def _mangle(klass: type, slot: str) -> str:
    if slot.startswith("__") and not slot.endswith("__"):
        return f"_{klass.__name__.lstrip('_')}{slot}"
    return slot
