"""The JSON value tree: a mutable node that can hold any JSON type."""

from __future__ import annotations

import enum
from typing import Optional


class JsonType(enum.Enum):
    """The kinds of value a :class:`Value` can hold."""

    NULL = 0
    FALSE = 1
    TRUE = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class Value:
    """A JSON value.

    Arrays hold a list of :class:`Value`; objects hold an ordered list of
    ``(key, Value)`` members. Both containers track a capacity that grows
    by doubling, as a reserved amount of room for elements.
    """

    __slots__ = ("_type", "_data", "_capacity")
    __hash__ = None  # mutable

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._type = JsonType.NULL
        self._data = None
        self._capacity = 0

    def _require(self, *kinds: JsonType) -> None:
        if self._type not in kinds:
            names = " or ".join(k.name for k in kinds)
            raise TypeError(f"expected {names} value, got {self._type.name}")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range")

    def _grow_if_full(self) -> None:
        if len(self._data) == self._capacity:
            self.reserve(1 if self._capacity == 0 else self._capacity * 2)

    def __repr__(self) -> str:
        return f"Value({self._type.name}, {self._data!r})"

    @property
    def type(self) -> JsonType:
        """The kind of value held."""
        return self._type

    def copy(self) -> "Value":
        """Return a deep copy of this value."""
        dup = Value()
        dup._type = self._type
        if self._type is JsonType.ARRAY:
            dup._data = [element.copy() for element in self._data]
            dup._capacity = len(dup._data)
        elif self._type is JsonType.OBJECT:
            dup._data = [(key, member.copy()) for key, member in self._data]
            dup._capacity = len(dup._data)
        else:
            dup._data = self._data
        return dup

    def move_from(self, other: "Value") -> None:
        """Take over the content of ``other``, leaving it null."""
        if other is self:
            raise ValueError("cannot move a value into itself")
        self._type, self._data, self._capacity = other._type, other._data, other._capacity
        other._reset()

    def swap(self, other: "Value") -> None:
        """Exchange contents with ``other``."""
        if other is self:
            return
        self._type, other._type = other._type, self._type
        self._data, other._data = other._data, self._data
        self._capacity, other._capacity = other._capacity, self._capacity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type in (JsonType.NUMBER, JsonType.STRING):
            return self._data == other._data
        if self._type is JsonType.ARRAY:
            return len(self._data) == len(other._data) and all(
                a == b for a, b in zip(self._data, other._data)
            )
        if self._type is JsonType.OBJECT:
            if len(self._data) != len(other._data):
                return False
            for key, member in self._data:
                found = other.find_value(key)
                if found is None or not member == found:
                    return False
            return True
        return True

    def set_null(self) -> None:
        """Make this value null."""
        self._reset()

    @property
    def boolean(self) -> bool:
        """The boolean held; only for true and false."""
        self._require(JsonType.TRUE, JsonType.FALSE)
        return self._type is JsonType.TRUE

    def set_boolean(self, b: object) -> None:
        self._reset()
        self._type = JsonType.TRUE if b else JsonType.FALSE

    @property
    def number(self) -> float:
        """The number held."""
        self._require(JsonType.NUMBER)
        return self._data

    def set_number(self, n: float) -> None:
        self._reset()
        self._data = float(n)
        self._type = JsonType.NUMBER

    @property
    def string(self) -> str:
        """The string held."""
        self._require(JsonType.STRING)
        return self._data

    def set_string(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("string value must be str")
        self._reset()
        self._data = s
        self._type = JsonType.STRING

    def set_array(self, capacity: int = 0) -> None:
        """Make this an empty array with room for ``capacity`` elements."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._reset()
        self._type = JsonType.ARRAY
        self._data = []
        self._capacity = capacity

    def set_object(self, capacity: int = 0) -> None:
        """Make this an empty object with room for ``capacity`` members."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._reset()
        self._type = JsonType.OBJECT
        self._data = []
        self._capacity = capacity

    def __len__(self) -> int:
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        return len(self._data)

    @property
    def capacity(self) -> int:
        """Reserved room of an array or object."""
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        return self._capacity

    def reserve(self, capacity: int) -> None:
        """Ensure room for at least ``capacity`` elements or members."""
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        if self._capacity < capacity:
            self._capacity = capacity

    def shrink(self) -> None:
        """Reduce the capacity to the current size."""
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        self._capacity = min(self._capacity, len(self._data))

    def clear(self) -> None:
        """Remove every element or member; the capacity is kept."""
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        self._data.clear()

    def __getitem__(self, index: int) -> "Value":
        self._require(JsonType.ARRAY)
        self._check_index(index)
        return self._data[index]

    def append(self) -> "Value":
        """Add a null element at the end of the array and return it."""
        self._require(JsonType.ARRAY)
        self._grow_if_full()
        element = Value()
        self._data.append(element)
        return element

    def pop(self) -> "Value":
        """Remove and return the last element of the array."""
        self._require(JsonType.ARRAY)
        if not self._data:
            raise IndexError("pop from empty array")
        return self._data.pop()

    def insert(self, index: int) -> "Value":
        """Insert a null element before ``index`` and return it."""
        self._require(JsonType.ARRAY)
        if not 0 <= index <= len(self._data):
            raise IndexError(f"index {index} out of range")
        self._grow_if_full()
        element = Value()
        self._data.insert(index, element)
        return element

    def erase(self, index: int, count: int) -> None:
        """Remove ``count`` elements starting at ``index``."""
        self._require(JsonType.ARRAY)
        if index < 0 or count < 0 or index + count > len(self._data):
            raise IndexError(f"range {index}+{count} out of range")
        del self._data[index:index + count]

    def key(self, index: int) -> str:
        """The key of the member at ``index``."""
        self._require(JsonType.OBJECT)
        self._check_index(index)
        return self._data[index][0]

    def object_value(self, index: int) -> "Value":
        """The value of the member at ``index``."""
        self._require(JsonType.OBJECT)
        self._check_index(index)
        return self._data[index][1]

    def find_index(self, key: str) -> Optional[int]:
        """Position of the member named ``key``, or None."""
        self._require(JsonType.OBJECT)
        return next((i for i, (k, _) in enumerate(self._data) if k == key), None)

    def find_value(self, key: str) -> Optional["Value"]:
        """Value of the member named ``key``, or None."""
        index = self.find_index(key)
        return None if index is None else self._data[index][1]

    def set_value(self, key: str) -> "Value":
        """Value of the member named ``key``, adding a null member if absent."""
        existing = self.find_value(key)
        if existing is not None:
            return existing
        self._grow_if_full()
        member = Value()
        self._data.append((key, member))
        return member

    def remove(self, index: int) -> None:
        """Remove the member at ``index``."""
        self._require(JsonType.OBJECT)
        self._check_index(index)
        del self._data[index]