"""
Tests for coercion of raw strings.
"""
import pytest

from nestpath.utils.parse import as_bool, as_int, coerce_scalar


@pytest.mark.parametrize("raw, expected", [
    ("42", 42),
    ("-3", -3),
    ("1.5", 1.5),
    ("1e3", 1000.0),
    ("true", True),
    ("False", False),
    ("null", None),
    ("", None),
    ("hello", "hello"),
    ("1.2.3", "1.2.3"),
    ("inf", "inf"),
    (7, 7),
])
def test_coerce_scalar(raw, expected):
    result = coerce_scalar(raw)
    assert result == expected
    assert type(result) is type(expected)


def test_as_bool_and_as_int():
    assert as_bool("yes") is True
    assert as_bool(0) is False
    assert as_int(" 12 ") == 12
    with pytest.raises(ValueError):
        as_int("twelve")
    with pytest.raises(ValueError):
        as_bool("maybe")
