"""
Helpers that render containers as strings.
"""
from typing import Any
from urllib.parse import quote

from nestpath.utils.dict_path import accessible, as_index
from nestpath.utils.structure import items_of, values_of, wrap


def _encode(text: Any) -> str:
    # RFC 3986: only unreserved characters stay literal, spaces become %20
    return quote(str(text), safe="")


def _scalar(item: Any) -> str:
    if item is True:
        return "1"
    if item is False:
        return "0"
    return str(item)


def _query_pairs(container: Any, prefix: str | None = None):
    for key, item in items_of(container):
        if item is None:
            continue
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if accessible(item):
            yield from _query_pairs(item, name)
        else:
            yield name, _scalar(item)


def query(container: Any) -> str:
    """
    Build a URL query string. Nested keys use brackets (a[b]=1), None values
    and empty containers are left out, booleans become 1/0.
    """
    return "&".join(f"{_encode(key)}={_encode(item)}" for key, item in _query_pairs(container))


def join(container: Any, glue: str, final_glue: str = "") -> str:
    """Join values with `glue`, using `final_glue` before the last one."""
    parts = [str(item) for item in values_of(container)]
    if final_glue == "":
        return glue.join(parts)
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    return glue.join(parts[:-1]) + final_glue + parts[-1]


def _conditional(value: Any) -> list[str]:
    # positional entries always apply; keyed entries apply when truthy
    picked = []
    for key, constraint in items_of(wrap(value)):
        if as_index(key) is not None:
            picked.append(str(constraint))
        elif constraint:
            picked.append(str(key))
    return picked


def to_css_classes(value: Any) -> str:
    """{0: "p-4", "font-bold": True, "hidden": False} -> "p-4 font-bold" """
    return " ".join(_conditional(value))


def to_css_styles(value: Any) -> str:
    """Like to_css_classes, with every entry terminated by a single ';'."""
    return " ".join(style.rstrip(";") + ";" for style in _conditional(value))
