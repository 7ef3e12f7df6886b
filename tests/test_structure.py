"""
Tests for whole-container reshaping helpers.
"""
from nestpath.utils.structure import (
    collapse, cross_join, divide, dot, flatten, is_assoc, is_list,
    sort_recursive, sort_recursive_desc, undot, wrap,
)


def test_wrap():
    assert wrap(None) == []
    assert wrap("a") == ["a"]
    assert wrap(0) == [0]
    items = [1, 2]
    assert wrap(items) is items
    mapping = {"a": 1}
    assert wrap(mapping) is mapping


def test_flatten_flat_container_is_unchanged():
    assert flatten([1, "a", None]) == [1, "a", None]
    assert flatten({"x": 1, "y": 2}) == [1, 2]


def test_flatten_depth():
    nested = [1, [2, [3, [4]]], {"k": [5]}]
    assert flatten(nested) == [1, 2, 3, 4, 5]
    assert flatten(nested, 1) == [1, 2, [3, [4]], [5]]
    assert flatten(nested, 2) == [1, 2, 3, [4], 5]


def test_dot():
    data = {"a": {"b": 1, "c": [10, {"d": 2}]}, "e": {}, "f": None}
    assert dot(data) == {"a.b": 1, "a.c.0": 10, "a.c.1.d": 2, "e": {}, "f": None}
    assert dot({"a": 1}, "root.") == {"root.a": 1}


def test_undot():
    assert undot({"a.b": 1, "a.c": 2, "d": 3}) == {"a": {"b": 1, "c": 2}, "d": 3}
    assert undot({"list.0": "x", "list.1": "y"}) == {"list": ["x", "y"]}


def test_undot_dot_round_trip(config_doc):
    del config_doc["db.host"]  # dotted literal keys cannot survive the trip
    samples = [
        config_doc,
        {"a": [1, [2, 3], {"b": []}], "c": {"d": {}}},
        [{"x": 1}, {"x": 2}],
        {"n": None, "t": True, "f": 1.5},
    ]
    for sample in samples:
        assert undot(dot(sample)) == sample


def test_collapse_lists():
    assert collapse([1, 2], "skipped", [3], None, []) == [1, 2, 3]


def test_collapse_mappings():
    result = collapse({"a": 1, "b": 2}, {"b": 3}, ["x"])
    assert result == {"a": 1, "b": 3, 0: "x"}


def test_cross_join():
    assert cross_join([1, 2], [3, 4]) == [[1, 3], [1, 4], [2, 3], [2, 4]]
    assert cross_join([1], ["a", "b"], [True]) == [[1, "a", True], [1, "b", True]]
    assert cross_join([1, 2], []) == []
    assert cross_join() == [[]]


def test_divide():
    assert divide({"a": 1, "b": 2}) == (["a", "b"], [1, 2])
    assert divide(["x", "y"]) == ([0, 1], ["x", "y"])


def test_sort_recursive():
    data = {"b": [3, 1, 2], "a": {"z": 1, "y": [{"d": 1, "c": 2}]}}
    result = sort_recursive(data)
    assert list(result) == ["a", "b"]
    assert result["b"] == [1, 2, 3]
    assert list(result["a"]) == ["y", "z"]
    assert list(result["a"]["y"][0]) == ["c", "d"]
    # input untouched
    assert data["b"] == [3, 1, 2]


def test_sort_recursive_desc():
    result = sort_recursive_desc({"a": [1, 3, 2], "c": 0, "b": 1})
    assert list(result) == ["c", "b", "a"]
    assert result["a"] == [3, 2, 1]


def test_sort_recursive_mixed_types_do_not_raise():
    assert sort_recursive(["b", 2, None, True, "a", 1]) == [None, True, 1, 2, "a", "b"]


def test_sort_recursive_list_shaped_mapping_sorts_values():
    assert sort_recursive({0: "b", 1: "a"}) == {0: "a", 1: "b"}
    assert sort_recursive_desc({"x": {0: 1, 1: 3, 2: 2}}) == {"x": {0: 3, 1: 2, 2: 1}}
    # gaps in the keys make it a plain mapping, sorted by key
    assert list(sort_recursive({2: "a", 0: "b"})) == [0, 2]


def test_is_list_and_is_assoc():
    assert is_list([1, 2])
    assert is_list({0: "a", 1: "b"})
    assert not is_list({1: "a"})
    assert is_assoc({"a": 1})
    assert not is_assoc([1])
    assert not is_assoc("text")
