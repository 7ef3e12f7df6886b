"""
Tests for string rendering and key rewriting helpers.
"""
import pytest

from nestpath.core.errors import InvalidArgumentError
from nestpath.utils.keys import (
    camel_case, camel_keys, convert_keys, kebab_case, prepend_keys_with,
    snake_case, snake_keys, studly_case,
)
from nestpath.utils.strings import join, query, to_css_classes, to_css_styles


def test_query_rfc3986():
    assert query({"a": 1, "b": "hello world"}) == "a=1&b=hello%20world"
    assert query({"email": "x+y@z.com"}) == "email=x%2By%40z.com"
    assert query({"t": True, "f": False, "n": None}) == "t=1&f=0"


def test_query_nested():
    assert query({"user": {"name": "ada", "tags": ["x", "y"]}}) == (
        "user%5Bname%5D=ada&user%5Btags%5D%5B0%5D=x&user%5Btags%5D%5B1%5D=y"
    )
    assert query({"empty": [], "a": "b"}) == "a=b"


def test_join():
    assert join(["a", "b", "c"], ", ") == "a, b, c"
    assert join(["a", "b", "c"], ", ", " and ") == "a, b and c"
    assert join(["a"], ", ", " and ") == "a"
    assert join([], ", ", " and ") == ""
    assert join([1, 2], "-") == "1-2"


def test_css_helpers():
    assert to_css_classes({0: "p-4", "font-bold": True, "hidden": False}) == "p-4 font-bold"
    assert to_css_classes({"p-4": True, "font-bold": 1, "hidden": False}) == "p-4 font-bold"
    assert to_css_classes("solo") == "solo"
    assert to_css_styles({"color: red": True, "display: none;;": True, "x": False}) == (
        "color: red; display: none;"
    )


@pytest.mark.parametrize("text, snake, camel, studly, kebab", [
    ("user_id", "user_id", "userId", "UserId", "user-id"),
    ("userId", "user_id", "userId", "UserId", "user-id"),
    ("UserID", "user_id", "userId", "UserId", "user-id"),
    ("HTTPServer", "http_server", "httpServer", "HttpServer", "http-server"),
    ("first name", "first_name", "firstName", "FirstName", "first-name"),
])
def test_case_conversion(text, snake, camel, studly, kebab):
    assert snake_case(text) == snake
    assert camel_case(text) == camel
    assert studly_case(text) == studly
    assert kebab_case(text) == kebab


def test_convert_keys_deep_and_shallow():
    data = {"userName": "ada", "homeAddress": {"zipCode": 1}, "tagList": [{"tagName": "x"}], 3: "int"}
    assert snake_keys(data) == {
        "user_name": "ada",
        "home_address": {"zip_code": 1},
        "tag_list": [{"tag_name": "x"}],
        3: "int",
    }
    shallow = snake_keys(data, deep=False)
    assert shallow["home_address"] == {"zipCode": 1}
    assert camel_keys({"a_b": {"c_d": 1}}) == {"aB": {"cD": 1}}


def test_convert_keys_unknown_case():
    with pytest.raises(InvalidArgumentError, match="Unknown key case 'shouty'"):
        convert_keys({}, "shouty")


def test_prepend_keys_with():
    assert prepend_keys_with({"a": 1, 0: 2}, "x_") == {"x_a": 1, "x_0": 2}
