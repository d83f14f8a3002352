"""Turn a :class:`~leptjson.value.Value` tree back into compact JSON text."""

from __future__ import annotations

from typing import Iterator

from leptjson.value import JsonType, Value

__all__ = ["stringify"]

_ESCAPE_TABLE = {code: f"\\u{code:04X}" for code in range(0x20)}
_ESCAPE_TABLE.update(
    {
        ord('"'): '\\"',
        ord("\\"): "\\\\",
        ord("\b"): "\\b",
        ord("\f"): "\\f",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)


def _quote(text: str) -> str:
    return '"' + text.translate(_ESCAPE_TABLE) + '"'


def _emit(value: Value) -> Iterator[str]:
    kind = value.type
    if kind is JsonType.NULL:
        yield "null"
    elif kind is JsonType.FALSE:
        yield "false"
    elif kind is JsonType.TRUE:
        yield "true"
    elif kind is JsonType.NUMBER:
        yield format(value.number, ".17g")
    elif kind is JsonType.STRING:
        yield _quote(value.string)
    elif kind is JsonType.ARRAY:
        yield "["
        for position, element in enumerate(value):
            if position:
                yield ","
            yield from _emit(element)
        yield "]"
    else:
        yield "{"
        for position in range(len(value)):
            if position:
                yield ","
            yield _quote(value.key(position))
            yield ":"
            yield from _emit(value.object_value(position))
        yield "}"


def stringify(value: Value) -> str:
    """Return the compact JSON text of ``value``."""
    return "".join(_emit(value))