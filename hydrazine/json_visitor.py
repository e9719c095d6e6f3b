"""Convenient navigation over parsed JSON values."""

from __future__ import annotations

from collections.abc import Iterator

from hydrazine.json_values import (
    Array,
    DenseArray,
    JsonError,
    Number,
    NumberType,
    Object,
    String,
    Value,
    ValueType,
)


class Visitor:
    """Wraps a value, or nothing, and reads it as a given kind."""

    def __init__(self, value: Value | None = None) -> None:
        self.value = value

    def _require(self, kind: type, message: str) -> Value:
        if not isinstance(self.value, kind):
            raise JsonError(message)
        return self.value

    def is_null(self) -> bool:
        """True when nothing is wrapped or the value is null."""
        return self.value is None or self.value.type is ValueType.NULL

    def __getitem__(self, key: str | int) -> Visitor:
        """Look up a key of an object or an index of an array."""
        if isinstance(key, str):
            obj = self._require(Object, "operator[](const std::string &) expects Visitor to wrap an Object")
            return Visitor(obj.dictionary.get(key))
        if isinstance(self.value, DenseArray):
            return Visitor(self.value.number(key))
        array = self._require(Array, "operator[](int) expects Visitor to wrap an Array")
        return Visitor(array.sequence[key])

    def as_bool(self) -> bool:
        if self.value is None or self.value.type not in (ValueType.TRUE, ValueType.FALSE):
            raise JsonError("operator bool() expects Visitor to wrap True or False")
        return self.value.type is ValueType.TRUE

    def as_int(self) -> int:
        """Return the number as an integer, truncating a real."""
        number = self._require(Number, "operator int() expects Visitor to wrap a Number")
        if number.number_type is NumberType.INTEGER:
            return number.value_integer
        return int(number.value_real)

    def as_float(self) -> float:
        number = self._require(Number, "operator double() expects Visitor to wrap a Number")
        return number.as_number()

    def as_str(self) -> str:
        string = self._require(String, "operator std::string() expects Visitor to wrap a String")
        return string.value_string

    def array(self) -> Iterator[Value]:
        """Iterate over the elements of a (non-dense) array."""
        array = self._require(Array, "array() expects Visitor to wrap an Array")
        return iter(array)

    def size_array(self) -> int:
        array = self._require(Array, "size_array() expects Visitor to wrap an Array")
        return len(array)

    def object_items(self) -> Iterator[tuple[str, Value]]:
        obj = self._require(Object, "object_items() expects Visitor to wrap an Object")
        return obj.items()

    def find(self, key: str) -> Value | None:
        """Return the value under key, or None if absent or nothing is wrapped."""
        if self.value is None:
            return None
        obj = self._require(Object, "find() expects Visitor to wrap an Object")
        return obj.dictionary.get(key)