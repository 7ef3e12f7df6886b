"""
Selection and projection over the top level of a container.

Callbacks are given (value, key) when they take two positional arguments,
otherwise just the value.
"""
import copy
import inspect
from collections.abc import Mapping
from typing import Any, Callable

from nestpath.utils.dict_path import accessible, as_paths, exists, forget, get, normalize_key, value
from nestpath.utils.structure import items_of

_ABSENT = object()


def _call(callback: Callable, item: Any, key: Any) -> Any:
    try:
        params = list(inspect.signature(callback).parameters.values())
    except (TypeError, ValueError):  # builtins without a signature
        return callback(item)
    positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if len(positional) >= 2 or any(p.kind is p.VAR_POSITIONAL for p in params):
        return callback(item, key)
    return callback(item)


def first(container: Any, callback: Callable | None = None, default: Any = None) -> Any:
    """First value passing `callback` (or the first value at all)."""
    for key, item in items_of(container):
        if callback is None or _call(callback, item, key):
            return item
    return value(default)


def last(container: Any, callback: Callable | None = None, default: Any = None) -> Any:
    """Last value passing `callback` (or the last value at all)."""
    for key, item in reversed(items_of(container)):
        if callback is None or _call(callback, item, key):
            return item
    return value(default)


def take(container: Any, limit: int) -> list | dict:
    """A prefix of `limit` items, or a suffix of abs(limit) items when negative."""
    pairs = items_of(container)
    chosen = pairs[limit:] if limit < 0 else pairs[:limit]
    if isinstance(container, Mapping):
        return dict(chosen)
    return [item for _, item in chosen]


def _as_dot_path(path: Any) -> Any:
    if isinstance(path, (list, tuple)):
        return ".".join(str(segment) for segment in path)
    return path


def pluck(container: Any, value_path: Any, key_path: Any = None) -> list | dict:
    """
    Project every element through `value_path`, optionally keyed by
    `key_path`. Both are dot paths (or lists of segments).
    """
    value_path = _as_dot_path(value_path)
    key_path = _as_dot_path(key_path)
    if key_path is None:
        return [get(item, value_path) for _, item in items_of(container)]

    results = {}
    for _, item in items_of(container):
        item_key = get(item, key_path)
        try:
            hash(item_key)
        except TypeError:
            item_key = str(item_key)
        results[item_key] = get(item, value_path)
    return results


def only(container: Any, keys: Any) -> dict:
    """Keep just the given top-level keys (list positions keep their index)."""
    wanted = {str(normalize_key(key)) for key in as_paths(keys)}
    return {key: item for key, item in items_of(container) if str(key) in wanted}


def except_(container: Any, keys: Any) -> Any:
    """A copy without the given keys; dotted paths reach into nested levels."""
    return forget(copy.deepcopy(container), keys)


def select(container: Any, keys: Any) -> list | dict:
    """Reduce every element to the given keys (attributes on plain objects)."""
    keys = as_paths(keys)

    def _pick(item):
        picked = {}
        for key in keys:
            if accessible(item) and exists(item, key):
                picked[key] = get(item, key)
            elif isinstance(key, str) and hasattr(item, key) and not accessible(item):
                picked[key] = getattr(item, key)
        return picked

    return map_values(container, _pick)


def where(container: Any, callback: Callable, preserve_keys: bool = True) -> list | dict:
    """
    Filter by `callback`. Keys are preserved, so a filtered list comes back
    as {index: value} unless `preserve_keys` is False.
    """
    kept = [(key, item) for key, item in items_of(container) if _call(callback, item, key)]
    if isinstance(container, Mapping) or preserve_keys:
        return dict(kept)
    return [item for _, item in kept]


def where_not_null(container: Any, preserve_keys: bool = True) -> list | dict:
    return where(container, lambda item: item is not None, preserve_keys)


def map_values(container: Any, callback: Callable) -> list | dict:
    """Apply `callback` to every value, keeping keys."""
    if isinstance(container, Mapping):
        return {key: _call(callback, item, key) for key, item in container.items()}
    return [_call(callback, item, key) for key, item in items_of(container)]


def map_with_keys(container: Any, callback: Callable) -> dict:
    """Build a mapping from the {key: value} pairs each callback call returns."""
    result = {}
    for key, item in items_of(container):
        for new_key, new_item in _call(callback, item, key).items():
            result[new_key] = new_item
    return result


def prepend(container: Any, item: Any, key: Any = _ABSENT) -> list | dict:
    """
    Put `item` in front. With a key the result is a mapping and an existing
    entry under that key is dropped.
    """
    if key is _ABSENT:
        if not isinstance(container, Mapping):
            return [item, *(v for _, v in items_of(container))]
        result = {0: item}
        next_index = 1
        for k, v in container.items():
            if isinstance(k, int) and not isinstance(k, bool):
                result[next_index] = v
                next_index += 1
            else:
                result[k] = v
        return result

    result = {key: item}
    for k, v in items_of(container):
        result.setdefault(k, v)
    return result
