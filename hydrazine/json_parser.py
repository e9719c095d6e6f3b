"""Parser for a relaxed JSON dialect with comments, bare keys and dense integer arrays."""

from __future__ import annotations

import math
import string

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

_EOF = ""
_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_BODY = _IDENT_START | _DIGITS
_CONTEXT_LENGTH = 31

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_KEYWORDS = {
    "true": ValueType.TRUE,
    "True": ValueType.TRUE,
    "false": ValueType.FALSE,
    "False": ValueType.FALSE,
    "null": ValueType.NULL,
}


class ParseError(JsonError):
    """Raised when the input is not valid in the accepted dialect."""

    def __init__(self, line: int, message: str, context: str) -> None:
        super().__init__(f"line {line}: {message}\n before: {context}")
        self.line = line
        self.message = message
        self.context = context


def _pow10(exponent: int) -> float:
    try:
        return 10.0**exponent
    except OverflowError:
        return math.inf


def _to_float(digits: str) -> float:
    try:
        return float(int(digits))
    except OverflowError:
        return math.inf


class Parser:
    """Reads values one after another from a piece of text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0
        self.line_number = 0

    def _get_char(self) -> str:
        if self._position >= len(self._text):
            return _EOF
        ch = self._text[self._position]
        self._position += 1
        if ch == "\n":
            self.line_number += 1
        return ch

    def _putback(self, ch: str) -> None:
        if ch == _EOF:
            return
        self._position -= 1
        if ch == "\n":
            self.line_number -= 1

    def _get_significant_char(self) -> str:
        """Return the next character that is neither whitespace nor in a # comment."""
        in_comment = False
        while True:
            ch = self._get_char()
            if ch == _EOF:
                return ch
            if in_comment:
                if ch in "\r\n":
                    in_comment = False
            elif ch == "#":
                in_comment = True
            elif ch not in _WHITESPACE:
                return ch

    def _error(self, message: str) -> ParseError:
        rest = self._text[self._position :].split("\n", 1)[0]
        return ParseError(self.line_number, message, rest[:_CONTEXT_LENGTH])

    def parse_value(self) -> Value:
        """Parse any value, skipping leading whitespace and comments."""
        ch = self._get_significant_char()
        self._putback(ch)
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        if ch == '"':
            return self.parse_string()
        if ch in _IDENT_START:
            identifier = self.parse_identifier()
            keyword = _KEYWORDS.get(identifier.value_string)
            return Value(keyword) if keyword is not None else identifier
        return self.parse_number()

    def parse_array(self) -> Array | DenseArray:
        """Parse an array; one holding only integers comes back as a DenseArray."""
        ch = self._get_significant_char()
        if ch != "[":
            raise self._error(f"parse_array: unexpected character {ch!r}, expected '['")

        dense: list[int] = []
        values: list[Value] = []
        is_dense = True

        ch = self._get_significant_char()
        while ch != "]":
            self._putback(ch)
            item = self.parse_value()
            if (
                is_dense
                and isinstance(item, Number)
                and item.number_type is NumberType.INTEGER
            ):
                dense.append(item.value_integer)
            else:
                if is_dense:
                    is_dense = False
                    values = [Number(entry) for entry in dense]
                values.append(item)

            ch = self._get_significant_char()
            if ch == "]":
                break
            if ch != ",":
                raise self._error(f"parse_array: unexpected character {ch!r}, expected ','")
            ch = self._get_significant_char()

        if is_dense and dense:
            return DenseArray(dense)
        return Array(values)

    def parse_object(self) -> Object:
        """Parse an object whose keys are quoted strings or bare identifiers."""
        ch = self._get_significant_char()
        if ch != "{":
            raise self._error("parse_object: unexpected character in object")

        dictionary: dict[str, Value] = {}
        ch = self._get_significant_char()
        while ch != "}":
            if ch == '"':
                self._putback(ch)
                key = self.parse_string().value_string
            elif ch in _IDENT_START:
                self._putback(ch)
                key = self.parse_identifier().value_string
            else:
                raise self._error("parse_object: unexpected key character found")

            if self._get_significant_char() != ":":
                raise self._error("parse_object: expected colon after key string")

            value = self.parse_value()
            if key in dictionary:
                raise self._error(f"parse_object: duplicate key {key!r}")
            dictionary[key] = value

            ch = self._get_significant_char()
            if ch == "}":
                break
            if ch != ",":
                raise self._error("parse_object: unexpected char after value")
            ch = self._get_significant_char()

        return Object(dictionary)

    def parse_number(self) -> Number:
        """Parse an integer or a real number."""
        ch = self._get_char()
        while ch in _WHITESPACE:
            ch = self._get_char()

        negative = ch == "-"
        if negative:
            ch = self._get_char()
        if ch not in _DIGITS:
            where = "negative" if negative else "initial"
            raise self._error(f"parse_number [{where}]: unexpected character found")

        whole = ch
        ch = self._get_char()
        if whole == "0":
            exponent_allowed = False
        else:
            while ch in _DIGITS:
                whole += ch
                ch = self._get_char()
            exponent_allowed = len(whole) > 1

        decimal = ""
        if ch == ".":
            ch = self._get_char()
            if ch not in _DIGITS:
                raise self._error("parse_number [decimal]: unexpected character found")
            while ch in _DIGITS:
                decimal += ch
                ch = self._get_char()
            exponent_allowed = True

        exponent = ""
        exponent_negative = False
        if exponent_allowed and ch in ("e", "E"):
            ch = self._get_char()
            if ch in ("+", "-"):
                exponent_negative = ch == "-"
                ch = self._get_char()
            if ch not in _DIGITS:
                raise self._error("parse_number [exponent]: unexpected character found")
            while ch in _DIGITS:
                exponent += ch
                ch = self._get_char()
        self._putback(ch)

        if not decimal and not exponent:
            integer = int(whole)
            return Number(-integer if negative else integer)

        real = _to_float(whole)
        if decimal:
            real += _to_float(decimal) / _pow10(len(decimal))
        if negative:
            real = -real
        if exponent:
            scale = _pow10(int(exponent))
            if exponent_negative:
                scale = 1.0 / scale
            real *= scale
        return Number(real)

    def parse_identifier(self) -> String:
        """Parse a bare identifier; an empty String if none starts here."""
        ch = self._get_char()
        if ch not in _IDENT_START:
            self._putback(ch)
            return String("")
        characters = [ch]
        ch = self._get_char()
        while ch in _IDENT_BODY:
            characters.append(ch)
            ch = self._get_char()
        self._putback(ch)
        return String("".join(characters))

    def parse_string(self) -> String:
        """Parse a double-quoted string with backslash escapes."""
        if self._get_char() != '"':
            raise self._error("parse_string: unexpected character")
        characters: list[str] = []
        while True:
            ch = self._get_char()
            if ch == _EOF:
                raise self._error("parse_string: unterminated string")
            if ch == '"':
                return String("".join(characters))
            if ch == "\\":
                characters.append(self._read_escape())
            else:
                characters.append(ch)

    def _read_escape(self) -> str:
        # Characters that do not start a known escape are skipped.
        while True:
            ch = self._get_char()
            if ch == _EOF:
                raise self._error("parse_string: unterminated string")
            if ch in _ESCAPES:
                return _ESCAPES[ch]
            if ch == "u":
                code = 0
                for _ in range(4):
                    digit = self._get_char()
                    if digit == _EOF:
                        raise self._error("parse_string: unterminated string")
                    code = code * 16 + (int(digit, 16) if digit in _HEX_DIGITS else 0)
                return chr(code)


def parse(text: str) -> Value:
    """Parse the first value in text."""
    return Parser(text).parse_value()