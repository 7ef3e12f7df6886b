"""
Tests for selection and projection helpers.
"""
from nestpath.utils.select import (
    except_, first, last, map_values, map_with_keys, only, pluck, prepend,
    select, take, where, where_not_null,
)


def test_first_and_last():
    items = [1, 2, 3, 4]
    assert first(items) == 1
    assert last(items) == 4
    assert first(items, lambda v: v > 2) == 3
    assert last(items, lambda v: v < 3) == 2
    assert first([], default="none") == "none"
    assert last(items, lambda v: v > 10, lambda: "lazy") == "lazy"


def test_callbacks_receive_keys_when_they_ask_for_them():
    data = {"a": 1, "b": 2, "c": 3}
    assert first(data, lambda value, key: key == "b") == 2
    assert last(data, lambda value, key: value < 3 and key != "b") == 1


def test_take():
    items = [1, 2, 3, 4]
    assert take(items, 2) == [1, 2]
    assert take(items, -2) == [3, 4]
    assert take(items, 0) == []
    assert take(items, 10) == [1, 2, 3, 4]
    assert take({"a": 1, "b": 2, "c": 3}, -1) == {"c": 3}


def test_pluck():
    assert pluck([{"a": {"b": 1}}, {"a": {"b": 2}}], "a.b") == [1, 2]


def test_pluck_with_key(config_doc):
    assert pluck(config_doc["users"], "address.city", "name") == {
        "ada": "London",
        "grace": "New York",
    }
    assert pluck(config_doc["users"], ["address", "city"]) == ["London", "New York"]
    assert pluck(config_doc["users"], "missing") == [None, None]


def test_only_and_except(config_doc):
    assert only(config_doc, ["app", "nope"]) == {"app": config_doc["app"]}
    assert only(["a", "b", "c"], [0, 2]) == {0: "a", 2: "c"}

    trimmed = except_(config_doc, ["users", "app.port"])
    assert "users" not in trimmed
    assert "port" not in trimmed["app"]
    # original left alone
    assert config_doc["app"]["port"] == 8000
    assert "users" in config_doc

    items = ["a", "b", "c"]
    assert except_(items, [1]) == {0: "a", 2: "c"}
    assert except_({"tags": items}, "tags.0") == {"tags": {1: "b", 2: "c"}}
    assert items == ["a", "b", "c"]


def test_select(config_doc):
    assert select(config_doc["users"], ["id", "name"]) == [
        {"id": 1, "name": "ada"},
        {"id": 2, "name": "grace"},
    ]


def test_where_preserves_keys():
    assert where({"a": 1, "b": 2, "c": 3}, lambda v: v % 2) == {"a": 1, "c": 3}
    assert where([1, 2, 3, 4], lambda v: v > 2) == {2: 3, 3: 4}
    assert where([1, 2, 3, 4], lambda v: v > 2, preserve_keys=False) == [3, 4]
    assert where({"a": 1, "b": 2}, lambda v, k: k == "b") == {"b": 2}


def test_where_not_null():
    assert where_not_null([1, None, 0, None, ""]) == {0: 1, 2: 0, 4: ""}
    assert where_not_null({"a": None, "b": False}) == {"b": False}


def test_map_values_and_map_with_keys():
    assert map_values({"a": 1, "b": 2}, lambda v: v * 10) == {"a": 10, "b": 20}
    assert map_values([1, 2], lambda v, k: f"{k}:{v}") == ["0:1", "1:2"]
    users = [{"id": 7, "name": "ada"}, {"id": 9, "name": "grace"}]
    assert map_with_keys(users, lambda u: {u["name"]: u["id"]}) == {"ada": 7, "grace": 9}


def test_prepend():
    assert prepend([2, 3], 1) == [1, 2, 3]
    assert prepend({"b": 2}, 1, "a") == {"a": 1, "b": 2}
    assert list(prepend({"b": 2}, 1, "a")) == ["a", "b"]
    assert prepend({"a": 0, "b": 2}, 1, "a") == {"a": 1, "b": 2}
