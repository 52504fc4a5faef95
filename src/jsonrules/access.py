"""Uniform key access over record-style and attribute-style values.

Data decoded from JSON arrives as dicts, but callers may also hand over
dataclasses, named tuples, ``SimpleNamespace`` objects or other plain
objects. Named tuples are structured values as well as sequences. The shape is
resolved once when a value is wrapped; the validator only ever calls
``has``/``get``.
"""

from collections.abc import Mapping
from typing import Any

_SCALARS = (str, bytes, int, float, bool, list, tuple, set, frozenset)


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


def is_attribute_style(value: Any) -> bool:
    """Return True for plain objects whose fields live in attributes."""
    if is_named_tuple(value):
        return True
    if value is None or isinstance(value, _SCALARS) or isinstance(value, Mapping):
        return False
    return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")


def is_structured(value: Any) -> bool:
    """Return True if ``value`` can carry named properties."""
    return isinstance(value, Mapping) or is_attribute_style(value)


class StructuredValue:
    """Read-only ``has``/``get`` view over a data node."""

    __slots__ = ("_value", "_kind")

    def __init__(self, value: Any, kind: str):
        self._value = value
        self._kind = kind

    @classmethod
    def wrap(cls, value: Any) -> "StructuredValue":
        if isinstance(value, Mapping):
            return cls(value, "record")
        if is_attribute_style(value):
            return cls(value, "attribute")
        return cls(value, "none")

    @property
    def kind(self) -> str:
        """One of ``record``, ``attribute`` or ``none``."""
        return self._kind

    def has(self, key: str) -> bool:
        if self._kind == "record":
            return key in self._value
        if self._kind == "attribute":
            return key in _attribute_names(self._value)
        return False

    def get(self, key: str, default: Any = None) -> Any:
        if self._kind == "record":
            return self._value.get(key, default)
        if self._kind == "attribute" and self.has(key):
            return getattr(self._value, key)
        return default


def _attribute_names(value: Any) -> set[str]:
    # Instance attributes, named tuple fields and readable properties.
    # Methods and plain class attributes are not data.
    names: set[str] = set(getattr(value, "__dict__", {}))
    if is_named_tuple(value):
        names.update(type(value)._fields)
    for klass in type(value).__mro__:
        slots = getattr(klass, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if hasattr(value, slot):
                names.add(slot)
        for name, member in vars(klass).items():
            if isinstance(member, property) and hasattr(value, name):
                names.add(name)
    return names
