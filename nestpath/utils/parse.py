"""
Utility functions to parse and coerce values typed on the command line or
read from table cells.
"""
from typing import Any
import re

_INT = re.compile(r"^[+-]?\d+$")
_FLOAT = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")
_NULLS = {"", "null", "none", "~"}
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def as_bool(v: Any) -> bool | None:
    """Reads yes/no style flags; None passes through."""
    if v is None or isinstance(v, bool):
        return v
    if isinstance(v, str):
        token = v.strip().lower()
        if token in _TRUTHY:
            return True
        if token in _FALSY:
            return False
    elif isinstance(v, (int, float)) and v in (0, 1):
        return v == 1
    raise ValueError(f"Cannot read {v!r} as a boolean")


def as_int(v: Any) -> int | None:
    """Reads whole numbers, including signed strings; None passes through."""
    if v is None:
        return None
    if isinstance(v, (int, float)):
        return int(v)
    if isinstance(v, str) and _INT.match(v.strip()):
        return int(v.strip())
    raise ValueError(f"Cannot read {v!r} as an integer")


def coerce_scalar(v: Any) -> Any:
    """
    Turn a raw string into None, bool, int or float where it unambiguously is
    one; anything else is returned unchanged.
    """
    if not isinstance(v, str):
        return v
    s = v.strip()
    lowered = s.lower()
    if lowered in _NULLS:
        return None
    if lowered in {"true", "false"}:
        return lowered == "true"
    if _INT.match(s):
        return int(s)
    if _FLOAT.match(s):
        return float(s)
    return v
