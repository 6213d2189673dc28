import pytest

from phpfuncs.arrays import (
    KeyCase,
    array,
    array_change_key_case,
    array_chunk,
    array_column,
    array_count_values,
    array_fill,
    array_fill_keys,
    array_flip,
    array_intersect,
    array_keys,
    array_merge,
    array_push,
    array_reverse,
    count,
)


def test_array_keys():
    output = array_keys({"foo": 123, "bar": "abc"})
    assert sorted(output) == ["bar", "foo"]


def test_array_keys_empty():
    assert array_keys({}) == []


def test_array_and_count():
    values = array(1, "a", "ABC")
    assert values == [1, "a", "ABC"]
    assert count(values) == 3


def test_change_key_case():
    data = {"Foo": 1, "bAr": 2}
    assert array_change_key_case(data, KeyCase.UPPER) == {"FOO": 1, "BAR": 2}
    assert array_change_key_case(data, KeyCase.LOWER) == {"foo": 1, "bar": 2}
    assert array_change_key_case(data, 0) == {"foo": 1, "bar": 2}


def test_change_key_case_unknown_case_is_empty():
    assert array_change_key_case({"a": 1}, 7) == {}


def test_array_chunk():
    assert array_chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert array_chunk([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]
    assert array_chunk([1, 2], 5) == [[1, 2]]


def test_array_chunk_invalid_size():
    with pytest.raises(ValueError):
        array_chunk([1, 2], 0)


def test_array_column():
    rows = {
        "r1": {"id": 1, "name": "a"},
        "r2": {"id": 2},
        "r3": {"id": 3, "name": "c"},
    }
    assert sorted(array_column(rows, "name")) == ["a", "c"]
    assert array_column(rows, "missing") == []


def test_array_count_values():
    assert array_count_values(["a", "b", "a", 1]) == {"a": 2, "b": 1, 1: 1}


def test_array_fill():
    assert array_fill(5, 3, "x") == {5: "x", 6: "x", 7: "x"}
    assert array_fill(0, 0, "x") == {}


def test_array_fill_negative():
    with pytest.raises(ValueError):
        array_fill(0, -1, "x")


def test_array_fill_keys():
    assert array_fill_keys(["a", 5], 0) == {"a": 0, 5: 0}


def test_array_flip():
    assert array_flip({"a": 1, "b": 2}) == {1: "a", 2: "b"}


def test_array_intersect():
    assert array_intersect([1, 2, 2, 1], [2, 2]) == [2, 2]
    assert array_intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [9, 4]
    assert array_intersect([], [1]) == []


def test_array_merge():
    assert array_merge([1, 2], ["a"], []) == [1, 2, "a"]
    assert array_merge() == []


def test_array_push():
    target = ["a"]
    assert array_push(target, "b", "c") == 3
    assert target == ["a", "b", "c"]


def test_array_reverse_in_place():
    values = [1, "a", "ABC"]
    result = array_reverse(values)
    assert result == ["ABC", "a", 1]
    assert result is values