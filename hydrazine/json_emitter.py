"""Pretty-printing emitter for JSON values."""

from __future__ import annotations

import io
from typing import TextIO

from hydrazine.json_values import (
    Array,
    DenseArray,
    Number,
    NumberType,
    Object,
    String,
    Value,
    ValueType,
)

_ESCAPES = {
    "\n": "\\n",
    "\\": "\\\\",
    "/": "\\/",
    "\f": "\\f",
    "\r": "\\r",
    "\t": "\\t",
}

_KEYWORDS = {
    ValueType.NULL: "null",
    ValueType.TRUE: "true",
    ValueType.FALSE: "false",
}

_WORD_MASK = 0xFFFFFFFF


def _hex(value: int) -> str:
    # Negative integers appear as their 32-bit two's complement.
    return format(value & _WORD_MASK if value < 0 else value, "x")


class Emitter:
    """Writes JSON values as indented text."""

    def __init__(self, use_tabs: bool = True, indent_size: int = 1) -> None:
        self.use_tabs = use_tabs
        self.indent_size = indent_size

    def _emit_indents(self, output: TextIO, indents: int) -> None:
        unit = "\t" if self.use_tabs else " "
        output.write(unit * (indents * self.indent_size))

    def emit_number(self, output: TextIO, number: Number) -> None:
        """Write an integer as is and a real with six significant digits."""
        if number.number_type is NumberType.INTEGER:
            output.write(str(number.value_integer))
        else:
            output.write(format(number.value_real, "g"))

    def emit_string(self, output: TextIO, text: str) -> None:
        """Write text in double quotes with control characters escaped."""
        output.write('"')
        output.write("".join(_ESCAPES.get(ch, ch) for ch in text))
        output.write('"')

    def _emit_object(self, output: TextIO, obj: Object, indents: int) -> None:
        output.write("{\n")
        for n, (key, item) in enumerate(obj.items()):
            if n:
                output.write(",\n")
            self._emit_indents(output, indents + 1)
            self.emit_string(output, key)
            output.write(": ")
            self.emit_pretty(output, item, indents + 1)
        output.write("\n")
        self._emit_indents(output, indents)
        output.write("}")

    def _emit_array(self, output: TextIO, array: Array, indents: int) -> None:
        output.write("[\n")
        for n, item in enumerate(array):
            if n:
                output.write(",\n")
            self._emit_indents(output, indents + 1)
            self.emit_pretty(output, item, indents + 1)
        output.write("\n")
        self._emit_indents(output, indents)
        output.write("]")

    def _emit_dense_array(self, output: TextIO, array: DenseArray, indents: int) -> None:
        output.write("[\n")
        for n, item in enumerate(array):
            if n:
                output.write(",\n")
            self._emit_indents(output, indents + 1)
            output.write(_hex(item))
        output.write("\n")
        self._emit_indents(output, indents)
        output.write("]")

    def emit_pretty(self, output: TextIO, value: Value, indent_level: int = 0) -> None:
        """Write value to output, nested at indent_level."""
        if value.type in _KEYWORDS:
            output.write(_KEYWORDS[value.type])
        elif isinstance(value, Number):
            self.emit_number(output, value)
        elif isinstance(value, String):
            self.emit_string(output, value.value_string)
        elif isinstance(value, Object):
            self._emit_object(output, value, indent_level)
        elif isinstance(value, Array):
            self._emit_array(output, value, indent_level)
        elif isinstance(value, DenseArray):
            self._emit_dense_array(output, value, indent_level)

    def to_string(self, value: Value) -> str:
        """Return the pretty text of value."""
        output = io.StringIO()
        self.emit_pretty(output, value)
        return output.getvalue()