"""Value: tagged variant for dynamically-typed strategy parameters.

Strategy parameters are free-form JSON/YAML data. Wrapping them in
:class:`Value` gives them one explicit comparison rule instead of whatever
the decoder happened to produce (``int`` vs ``float``, ``list`` vs
``tuple``, key order of mappings)::

    Value.of({"a": [1, 2.0]}) == Value.of({"a": (1.0, 2)})   # True
    Value.of(True) == Value.of(1)                            # False
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class Value:
    """Immutable tagged value with recursive structural equality."""

    __slots__ = ("_kind", "_data")

    def __init__(self, kind: ValueKind, data: Any) -> None:
        self._kind = kind
        self._data = data

    @classmethod
    def of(cls, obj: Any) -> "Value":
        """Convert plain decoded data into a :class:`Value` tree.

        Raises:
            TypeError: *obj* (or something nested in it) is not a
                null/bool/number/string/sequence/mapping, or a mapping has a
                non-string key.
        """
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return cls(ValueKind.NULL, None)
        # bool is a subclass of int; test it first
        if isinstance(obj, bool):
            return cls(ValueKind.BOOL, obj)
        if isinstance(obj, (int, float)):
            return cls(ValueKind.NUMBER, obj)
        if isinstance(obj, str):
            return cls(ValueKind.STRING, obj)
        if isinstance(obj, Mapping):
            items: dict[str, Value] = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    raise TypeError(f"mapping keys must be strings, got {type(key).__name__}: {key!r}")
                items[key] = cls.of(item)
            return cls(ValueKind.MAPPING, items)
        if isinstance(obj, (list, tuple)):
            return cls(ValueKind.SEQUENCE, tuple(cls.of(item) for item in obj))
        raise TypeError(f"unsupported parameter value type: {type(obj).__name__}")

    @property
    def kind(self) -> ValueKind:
        return self._kind

    def to_plain(self) -> Any:
        """Return the equivalent plain Python data (dicts, lists, scalars)."""
        if self._kind is ValueKind.MAPPING:
            return {key: item.to_plain() for key, item in self._data.items()}
        if self._kind is ValueKind.SEQUENCE:
            return [item.to_plain() for item in self._data]
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self._kind is not other._kind:
            return False
        if self._kind is ValueKind.MAPPING:
            if self._data.keys() != other._data.keys():
                return False
            return all(item == other._data[key] for key, item in self._data.items())
        if self._kind is ValueKind.SEQUENCE:
            if len(self._data) != len(other._data):
                return False
            return all(a == b for a, b in zip(self._data, other._data))
        if self._kind is ValueKind.NUMBER and self._data != self._data:
            # NaN equals NaN
            return other._data != other._data
        return self._data == other._data

    def __hash__(self) -> int:
        if self._kind is ValueKind.MAPPING:
            return hash((self._kind, frozenset(self._data.items())))
        if self._kind is ValueKind.NUMBER and self._data != self._data:
            return hash((self._kind, "nan"))
        return hash((self._kind, self._data))

    def __repr__(self) -> str:
        return f"Value({self._kind.value}, {self.to_plain()!r})"


def values_equal(a: Mapping[str, Value], b: Mapping[str, Value]) -> bool:
    """Deep equality of two parameter maps: same key set, each value equal."""
    if a.keys() != b.keys():
        return False
    return all(Value.of(value) == Value.of(b[key]) for key, value in a.items())


__all__ = ["Value", "ValueKind", "values_equal"]
