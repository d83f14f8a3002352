import pytest

from leptjson.value import JsonType, Value


def _build(data):
    v = Value()
    if data is None:
        v.set_null()
    elif isinstance(data, bool):
        v.set_boolean(data)
    elif isinstance(data, (int, float)):
        v.set_number(data)
    elif isinstance(data, str):
        v.set_string(data)
    elif isinstance(data, list):
        v.set_array(0)
        for item in data:
            v.append().move_from(_build(item))
    else:
        v.set_object(0)
        for key, item in data.items():
            v.set_value(key).move_from(_build(item))
    return v


SAMPLE = {"t": True, "f": False, "n": None, "d": 1.5, "a": [1, 2, 3]}


def test_new_value_is_null():
    assert Value().type is JsonType.NULL


def test_set_null():
    v = Value()
    v.set_string("a")
    v.set_null()
    assert v.type is JsonType.NULL


def test_boolean():
    v = Value()
    v.set_string("a")
    v.set_boolean(True)
    assert v.boolean is True
    assert v.type is JsonType.TRUE
    v.set_boolean(False)
    assert v.boolean is False
    assert v.type is JsonType.FALSE


def test_number():
    v = Value()
    v.set_string("a")
    v.set_number(1234.5)
    assert v.number == 1234.5
    assert v.type is JsonType.NUMBER


def test_string():
    v = Value()
    v.set_string("")
    assert v.string == ""
    v.set_string("Hello")
    assert v.string == "Hello"
    v.set_string("Hello\0World")
    assert v.string == "Hello\0World"


def test_wrong_type_access_raises():
    v = Value()
    v.set_number(1)
    with pytest.raises(TypeError):
        v.boolean
    with pytest.raises(TypeError):
        v.string
    with pytest.raises(TypeError):
        len(v)
    with pytest.raises(TypeError):
        v.append()


@pytest.mark.parametrize(
    "left, right, equal",
    [
        (True, True, True),
        (True, False, False),
        (False, False, True),
        (None, None, True),
        (None, 0, False),
        (123, 123, True),
        (123, 456, False),
        ("abc", "abc", True),
        ("abc", "abcd", False),
        ([], [], True),
        ([], None, False),
        ([1, 2, 3], [1, 2, 3], True),
        ([1, 2, 3], [1, 2, 3, 4], False),
        ([[]], [[]], True),
        ({}, {}, True),
        ({}, None, False),
        ({}, [], False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}, True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, True),
        ({"a": 1, "b": 2}, {"a": 1, "b": 3}, False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2, "c": 3}, False),
        ({"a": {"b": {"c": {}}}}, {"a": {"b": {"c": {}}}}, True),
        ({"a": {"b": {"c": {}}}}, {"a": {"b": {"c": []}}}, False),
    ],
)
def test_equal(left, right, equal):
    assert (_build(left) == _build(right)) is equal


def test_copy_is_equal_and_independent():
    v1 = _build(SAMPLE)
    v2 = v1.copy()
    assert v2 == v1
    v2.find_value("a").append().set_number(4)
    assert len(v1.find_value("a")) == 3
    assert not v2 == v1


def test_move():
    v1 = _build(SAMPLE)
    v2 = v1.copy()
    v3 = Value()
    v3.move_from(v2)
    assert v2.type is JsonType.NULL
    assert v3 == v1


def test_move_into_self_raises():
    v = _build(SAMPLE)
    with pytest.raises(ValueError):
        v.move_from(v)


def test_swap():
    v1 = Value()
    v2 = Value()
    v1.set_string("Hello")
    v2.set_string("World!")
    v1.swap(v2)
    assert v1.string == "World!"
    assert v2.string == "Hello"


def test_access_array():
    a = Value()
    for j in (0, 5):
        a.set_array(j)
        assert len(a) == 0
        assert a.capacity == j
        for i in range(10):
            e = Value()
            e.set_number(i)
            a.append().move_from(e)
        assert len(a) == 10
        assert [a[i].number for i in range(10)] == list(range(10))

    a.pop()
    assert len(a) == 9
    assert [a[i].number for i in range(9)] == list(range(9))

    a.erase(4, 0)
    assert len(a) == 9
    assert [a[i].number for i in range(9)] == list(range(9))

    a.erase(8, 1)
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == list(range(8))

    a.erase(0, 2)
    assert len(a) == 6
    assert [a[i].number for i in range(6)] == list(range(2, 8))

    for i in range(2):
        e = Value()
        e.set_number(i)
        a.insert(i).move_from(e)
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == list(range(8))

    assert a.capacity > 8
    a.shrink()
    assert a.capacity == 8
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == list(range(8))

    e = Value()
    e.set_string("Hello")
    a.append().move_from(e)

    capacity = a.capacity
    a.clear()
    assert len(a) == 0
    assert a.capacity == capacity
    a.shrink()
    assert a.capacity == 0


def test_array_index_errors():
    a = _build([1, 2])
    with pytest.raises(IndexError):
        a[2]
    with pytest.raises(IndexError):
        a.insert(3)
    with pytest.raises(IndexError):
        a.erase(1, 2)
    a.clear()
    with pytest.raises(IndexError):
        a.pop()


def test_pop_returns_last_element():
    a = _build([1, "x"])
    assert a.pop().string == "x"
    assert len(a) == 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Value().set_array(-1)
    with pytest.raises(ValueError):
        Value().set_object(-1)


def test_access_object():
    o = Value()
    keys = "abcdefghij"
    for j in (0, 5):
        o.set_object(j)
        assert len(o) == 0
        assert o.capacity == j
        for i, key in enumerate(keys):
            v = Value()
            v.set_number(i)
            o.set_value(key).move_from(v)
        assert len(o) == 10
        for i, key in enumerate(keys):
            index = o.find_index(key)
            assert index is not None
            assert o.object_value(index).number == i

    index = o.find_index("j")
    assert index is not None
    o.remove(index)
    assert o.find_index("j") is None
    assert len(o) == 9

    index = o.find_index("a")
    assert index is not None
    o.remove(index)
    assert o.find_index("a") is None
    assert len(o) == 8

    assert o.capacity > 8
    o.shrink()
    assert o.capacity == 8
    assert len(o) == 8
    for i, key in enumerate(keys[1:9]):
        assert o.object_value(o.find_index(key)).number == i + 1

    v = Value()
    v.set_string("Hello")
    o.set_value("World").move_from(v)

    found = o.find_value("World")
    assert found is not None
    assert found.string == "Hello"

    capacity = o.capacity
    o.clear()
    assert len(o) == 0
    assert o.capacity == capacity
    o.shrink()
    assert o.capacity == 0


def test_object_keys_keep_insertion_order():
    o = _build({"n": None, "f": False, "t": True})
    assert [o.key(i) for i in range(len(o))] == ["n", "f", "t"]


def test_set_value_returns_existing_member():
    o = _build({"a": 1})
    assert o.set_value("a").number == 1
    assert len(o) == 1


def test_object_index_errors():
    o = _build({"a": 1})
    with pytest.raises(IndexError):
        o.key(1)
    with pytest.raises(IndexError):
        o.object_value(1)
    with pytest.raises(IndexError):
        o.remove(1)
    assert o.find_value("b") is None