"""Value types for a relaxed JSON dialect: numbers, strings, arrays and objects."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping

_INVALID_CAST = "Invalid cast"


class JsonError(RuntimeError):
    """Raised when a JSON value is used as a kind it does not hold."""


class ValueType(enum.Enum):
    """The kind of a JSON value."""

    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    DENSE_ARRAY = "dense_array"


class NumberType(enum.Enum):
    """Whether a number was written as an integer or as a real."""

    INTEGER = "integer"
    REAL = "real"


def _to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class Value:
    """A JSON value; on its own it holds null, true or false."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, type: ValueType = ValueType.NULL) -> None:
        self.type = ValueType(type)

    def as_integer(self) -> int:
        """Return the integer held by an integer number."""
        raise JsonError(_INVALID_CAST)

    def as_real(self) -> float:
        """Return the value held by a real number."""
        raise JsonError(_INVALID_CAST)

    def as_number(self) -> float:
        """Return any number as a float."""
        raise JsonError(_INVALID_CAST)

    def as_string(self) -> str:
        raise JsonError(_INVALID_CAST)

    def as_array(self) -> list[Value]:
        raise JsonError(_INVALID_CAST)

    def as_dense_array(self) -> list[int]:
        raise JsonError(_INVALID_CAST)

    def as_object(self) -> dict[str, Value]:
        raise JsonError(_INVALID_CAST)

    def as_boolean(self) -> bool:
        """Return True or False for the true and false values."""
        if self.type is ValueType.TRUE:
            return True
        if self.type is ValueType.FALSE:
            return False
        raise JsonError(_INVALID_CAST)

    def is_null(self) -> bool:
        return self.type is ValueType.NULL

    def _key(self) -> object:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value) or type(other) is not type(self):
            return NotImplemented
        return self.type is other.type and self._key() == other._key()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type.value})"


class Number(Value):
    """An integer or real number."""

    def __init__(self, value: int | float) -> None:
        super().__init__(ValueType.NUMBER)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"a number needs an int or a float, not {type(value).__name__}")
        if isinstance(value, int):
            self.number_type = NumberType.INTEGER
            self.value_integer = value
            self.value_real = _to_float(value)
        else:
            self.number_type = NumberType.REAL
            self.value_real = float(value)
            self.value_integer = int(value) if math.isfinite(value) else 0

    def as_integer(self) -> int:
        if self.number_type is NumberType.INTEGER:
            return self.value_integer
        raise JsonError(_INVALID_CAST)

    def as_real(self) -> float:
        if self.number_type is NumberType.REAL:
            return self.value_real
        raise JsonError(_INVALID_CAST)

    def as_number(self) -> float:
        if self.number_type is NumberType.REAL:
            return self.value_real
        return _to_float(self.value_integer)

    def _key(self) -> object:
        if self.number_type is NumberType.INTEGER:
            return (self.number_type, self.value_integer)
        return (self.number_type, self.value_real)

    def __repr__(self) -> str:
        shown = self.value_integer if self.number_type is NumberType.INTEGER else self.value_real
        return f"Number({shown!r})"


class Array(Value):
    """A sequence of arbitrary values."""

    def __init__(self, values: Iterable[Value] = ()) -> None:
        super().__init__(ValueType.ARRAY)
        self.sequence: list[Value] = list(values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)

    def as_array(self) -> list[Value]:
        return self.sequence

    def _key(self) -> object:
        return self.sequence

    def __repr__(self) -> str:
        return f"Array({self.sequence!r})"


class DenseArray(Value):
    """A compact sequence holding only integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(ValueType.DENSE_ARRAY)
        self.sequence: list[int] = list(values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)

    def number(self, index: int) -> Number:
        """Return the element at index wrapped as a Number."""
        return Number(self.sequence[index])

    def as_dense_array(self) -> list[int]:
        return self.sequence

    def _key(self) -> object:
        return self.sequence

    def __repr__(self) -> str:
        return f"DenseArray({self.sequence!r})"


class String(Value):
    """A string value."""

    def __init__(self, value: str = "") -> None:
        super().__init__(ValueType.STRING)
        self.value_string = value

    def as_string(self) -> str:
        return self.value_string

    def _key(self) -> object:
        return self.value_string

    def __repr__(self) -> str:
        return f"String({self.value_string!r})"


class Object(Value):
    """A mapping from keys to values, kept in key order."""

    def __init__(self, dictionary: Mapping[str, Value] | None = None) -> None:
        super().__init__(ValueType.OBJECT)
        self.dictionary: dict[str, Value] = dict(sorted((dictionary or {}).items()))

    def __iter__(self) -> Iterator[str]:
        return iter(self.dictionary)

    def items(self) -> Iterator[tuple[str, Value]]:
        return iter(self.dictionary.items())

    def as_object(self) -> dict[str, Value]:
        return self.dictionary

    def _key(self) -> object:
        return self.dictionary

    def __repr__(self) -> str:
        return f"Object({self.dictionary!r})"