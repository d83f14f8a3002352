"""Turn JSON text into a :class:`~leptjson.value.Value` tree."""

from __future__ import annotations

import math
import re

from leptjson.errors import ParseError, ParseErrorCode
from leptjson.value import Value

__all__ = ["parse"]

_WHITESPACE = " \t\n\r"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
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
_INTEGER = re.compile(r"-?(?:0|[1-9][0-9]*)")
_FRACTION = re.compile(r"\.[0-9]+")
_EXPONENT = re.compile(r"[eE][+-]?[0-9]+")


class _Parser:
    """Recursive-descent reader over one JSON text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _error(self, code: ParseErrorCode, position: int | None = None) -> ParseError:
        return ParseError(code, self._pos if position is None else position)

    def _skip_whitespace(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1

    def parse(self) -> Value:
        self._skip_whitespace()
        value = self._parse_value()
        self._skip_whitespace()
        if self._pos < len(self._text):
            raise self._error(ParseErrorCode.ROOT_NOT_SINGULAR)
        return value

    def _parse_value(self) -> Value:
        ch = self._peek()
        if ch == "":
            raise self._error(ParseErrorCode.EXPECT_VALUE)
        if ch == "t":
            return self._parse_literal("true")
        if ch == "f":
            return self._parse_literal("false")
        if ch == "n":
            return self._parse_literal("null")
        if ch == '"':
            value = Value()
            value.set_string(self._parse_string_raw())
            return value
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_object()
        return self._parse_number()

    def _parse_literal(self, word: str) -> Value:
        if not self._text.startswith(word, self._pos):
            raise self._error(ParseErrorCode.INVALID_VALUE)
        self._pos += len(word)
        value = Value()
        if word != "null":
            value.set_boolean(word == "true")
        return value

    def _parse_number(self) -> Value:
        start = self._pos
        text = self._text
        match = _INTEGER.match(text, start)
        if match is None:
            raise self._error(ParseErrorCode.INVALID_VALUE)
        end = match.end()
        if text.startswith(".", end):
            match = _FRACTION.match(text, end)
            if match is None:
                raise self._error(ParseErrorCode.INVALID_VALUE)
            end = match.end()
        if end < len(text) and text[end] in "eE":
            match = _EXPONENT.match(text, end)
            if match is None:
                raise self._error(ParseErrorCode.INVALID_VALUE)
            end = match.end()
        number = float(text[start:end])
        if math.isinf(number):
            raise self._error(ParseErrorCode.NUMBER_TOO_BIG)
        self._pos = end
        value = Value()
        value.set_number(number)
        return value

    def _parse_hex4(self) -> int:
        digits = self._text[self._pos:self._pos + 4]
        if len(digits) != 4 or not all(d in _HEX_DIGITS for d in digits):
            raise self._error(ParseErrorCode.INVALID_UNICODE_HEX)
        self._pos += 4
        return int(digits, 16)

    def _parse_unicode_escape(self) -> str:
        code = self._parse_hex4()
        if 0xD800 <= code <= 0xDBFF:
            if not self._text.startswith("\\u", self._pos):
                raise self._error(ParseErrorCode.INVALID_UNICODE_SURROGATE)
            self._pos += 2
            low = self._parse_hex4()
            if not 0xDC00 <= low <= 0xDFFF:
                raise self._error(ParseErrorCode.INVALID_UNICODE_SURROGATE)
            code = 0x10000 + (((code - 0xD800) << 10) | (low - 0xDC00))
        return chr(code)

    def _parse_string_raw(self) -> str:
        text = self._text
        self._pos += 1  # opening quotation mark
        chars: list[str] = []
        while True:
            if self._pos >= len(text):
                raise self._error(ParseErrorCode.MISS_QUOTATION_MARK)
            ch = text[self._pos]
            self._pos += 1
            if ch == '"':
                return "".join(chars)
            if ch == "\\":
                escape = self._peek()
                self._pos += 1
                if escape == "u":
                    chars.append(self._parse_unicode_escape())
                elif escape in _ESCAPES:
                    chars.append(_ESCAPES[escape])
                else:
                    raise self._error(ParseErrorCode.INVALID_STRING_ESCAPE, self._pos - 2)
            elif ord(ch) < 0x20:
                raise self._error(ParseErrorCode.INVALID_STRING_CHAR, self._pos - 1)
            else:
                chars.append(ch)

    def _parse_array(self) -> Value:
        self._pos += 1  # '['
        self._skip_whitespace()
        result = Value()
        if self._peek() == "]":
            self._pos += 1
            result.set_array(0)
            return result
        elements: list[Value] = []
        while True:
            elements.append(self._parse_value())
            self._skip_whitespace()
            ch = self._peek()
            if ch == ",":
                self._pos += 1
                self._skip_whitespace()
            elif ch == "]":
                self._pos += 1
                result.set_array(len(elements))
                for element in elements:
                    result.append().move_from(element)
                return result
            else:
                raise self._error(ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET)

    def _parse_object(self) -> Value:
        self._pos += 1  # '{'
        self._skip_whitespace()
        result = Value()
        if self._peek() == "}":
            self._pos += 1
            result.set_object(0)
            return result
        members: list[tuple[str, Value]] = []
        while True:
            if self._peek() != '"':
                raise self._error(ParseErrorCode.MISS_KEY)
            key = self._parse_string_raw()
            self._skip_whitespace()
            if self._peek() != ":":
                raise self._error(ParseErrorCode.MISS_COLON)
            self._pos += 1
            self._skip_whitespace()
            members.append((key, self._parse_value()))
            self._skip_whitespace()
            ch = self._peek()
            if ch == ",":
                self._pos += 1
                self._skip_whitespace()
            elif ch == "}":
                self._pos += 1
                result.set_object(len(members))
                # Members are kept exactly as written, repeated keys included.
                result._data.extend(members)
                return result
            else:
                raise self._error(ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET)


def parse(json: str) -> Value:
    """Parse one JSON text into a :class:`Value`.

    Raises :class:`~leptjson.errors.ParseError` when the text is malformed.
    """
    return _Parser(json).parse()