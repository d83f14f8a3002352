# leptjson

A small, strict JSON parser and serializer. JSON text is parsed into a
mutable `Value` tree. You can inspect and edit the tree, then write it
back out as compact JSON.

## Installation

```
pip install leptjson
```

## Parsing

```python
from leptjson.parser import parse
from leptjson.value import JsonType

v = parse('{"n": null, "a": [1, 2, 3], "s": "abc"}')
assert v.type is JsonType.OBJECT
assert len(v) == 3
assert v.key(1) == "a"
assert v.find_value("s").string == "abc"
assert v.object_value(1)[2].number == 3.0
```

`parse(json)` takes a `str` and returns a `Value`.

Parsing is strict:

- Only standard JSON syntax is accepted.
- The whole input, apart from surrounding whitespace, must hold exactly one value.
- Numbers must follow the JSON grammar, so `+1`, `.5`, `1.`, `inf` and `nan` are rejected.
- Numbers too large for a double are rejected.
- `\uXXXX` escapes must use valid surrogate pairs.
- Raw control characters inside strings are rejected.

Any malformed input raises `leptjson.errors.ParseError`, which is a
subclass of `ValueError`. The error has two attributes:

- `code` is a `ParseErrorCode` that says what went wrong: `EXPECT_VALUE`, `INVALID_VALUE`, `ROOT_NOT_SINGULAR`, `NUMBER_TOO_BIG`, `MISS_QUOTATION_MARK`, `INVALID_STRING_ESCAPE`, `INVALID_STRING_CHAR`, `INVALID_UNICODE_HEX`, `INVALID_UNICODE_SURROGATE`, `MISS_COMMA_OR_SQUARE_BRACKET`, `MISS_KEY`, `MISS_COLON` or `MISS_COMMA_OR_CURLY_BRACKET`.
- `position` is the offset in the input where the problem was found.

```python
from leptjson.errors import ParseError, ParseErrorCode

try:
    parse('{"a" 1}')
except ParseError as err:
    assert err.code is ParseErrorCode.MISS_COLON
```

Object members are kept in the order they were written. A key that
appears twice is kept twice.

## The `Value` tree

A new `Value()` is null. These properties read its content:

- `type` gives a `JsonType`: `NULL`, `FALSE`, `TRUE`, `NUMBER`, `STRING`, `ARRAY` or `OBJECT`.
- `boolean`, `number` and `string` give the value held.

Reading a property of the wrong type raises `TypeError`.

These methods replace the content:

- `set_null()`
- `set_boolean(b)`
- `set_number(n)`, which stores a float
- `set_string(s)`
- `set_array(capacity=0)`
- `set_object(capacity=0)`

```python
from leptjson.value import Value
from leptjson.stringify import stringify

doc = Value()
doc.set_object(0)
doc.set_value("name").set_string("leptjson")
items = doc.set_value("items")
items.set_array(0)
for i in range(3):
    items.append().set_number(i)
items.insert(0).set_boolean(True)
items.erase(1, 1)

print(stringify(doc))   # {"name":"leptjson","items":[true,1,2]}
```

Arrays support these operations:

- `len()` and indexing with `v[i]`.
- `append()` and `insert(index)` add a null element and return it.
- `pop()` removes and returns the last element.
- `erase(index, count)` removes a run of elements.

Objects support these operations:

- `len()`.
- `key(index)` and `object_value(index)` read the member at a position.
- `find_index(key)` and `find_value(key)` look a member up by key, returning `None` when it is absent.
- `set_value(key)` returns the existing member value, or appends a new null member.
- `remove(index)` deletes a member.

Arrays and objects also keep a reserved capacity:

- `capacity` reads it.
- `reserve(n)` raises it.
- `shrink()` lowers it to the current size.
- `clear()` empties the container and keeps the capacity.

The capacity doubles when an append finds the container full.

A position out of range raises `IndexError`.

## Copying and comparing

- `copy()` returns a deep copy.
- `move_from(other)` takes over the content of `other` and leaves `other` null.
- `swap(other)` exchanges the contents of two values.

Two values are equal when they have the same type and the same content.
For objects, the order of the members does not matter. Values are
mutable and not hashable.

## Serializing

`stringify(value)` returns compact JSON text with no whitespace.

- Numbers are written with 17 significant digits, so every double survives a round trip. `1.0` is written as `1`.
- `"` and `\` are escaped in strings, and so are control characters.
- Object members are written in their stored order.

## Scope

This is a library only. It has no command-line tool and does not read
or write files itself. Output is always compact, with no pretty-printing
option.