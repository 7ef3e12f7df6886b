"""
Helpers to navigate and manipulate nested dicts and lists via "dot paths".

A literal key containing dots always shadows the same string read as a
multi-segment path. Missing paths resolve to a default, never an exception.
"""
import copy
from collections.abc import Iterable, Mapping, MutableMapping, MutableSequence, Sequence
import logging
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


def value(default: Any) -> Any:
    """Resolve a default, invoking it if it is a zero-argument producer."""
    return default() if callable(default) else default


def accessible(obj: Any) -> bool:
    """True for mappings and non-string sequences."""
    if isinstance(obj, Mapping):
        return True
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def normalize_key(key: Any) -> Any:
    """Floats are looked up by their string form (2.0 -> "2", 1.5 -> "1.5")."""
    if isinstance(key, float):
        return str(int(key)) if key.is_integer() else str(key)
    return key


def as_index(key: Any) -> int | None:
    """Interpret a key as a list index, or None if it is not one."""
    if isinstance(key, int) and not isinstance(key, bool):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None


def _resolve_key(container: Any, key: Any) -> Any:
    """Return the actual key under which `key` is stored, or _MISSING."""
    key = normalize_key(key)
    if isinstance(container, Mapping):
        try:
            if key in container:
                return key
        except TypeError:  # unhashable
            return _MISSING
        index = as_index(key)
        if isinstance(key, str) and index is not None and index in container:
            return index
        if isinstance(key, int) and not isinstance(key, bool) and str(key) in container:
            return str(key)
        return _MISSING
    if accessible(container):
        index = as_index(key)
        if index is not None and index < len(container):
            return index
    return _MISSING


def as_paths(paths: Any) -> list:
    if paths is None:
        return []
    if isinstance(paths, (str, bytes)) or not isinstance(paths, Iterable):
        return [paths]
    return list(paths)


def exists(container: Any, key: Any) -> bool:
    """Check a single literal key (no dot traversal)."""
    return _resolve_key(container, key) is not _MISSING


def get(container: Any, path: Any, default: Any = None) -> Any:
    """
    Get a value from a nested container via a dot-separated path.

    An empty or None path returns the container itself. Values are returned
    by reference, not copied.
    """
    if not accessible(container):
        return value(default)
    if path is None or path == "":
        return container

    path = normalize_key(path)
    key = _resolve_key(container, path)
    if key is not _MISSING:
        return container[key]
    if not isinstance(path, str) or "." not in path:
        return value(default)

    current = container
    for segment in path.split("."):
        key = _resolve_key(current, segment)
        if key is _MISSING:
            return value(default)
        current = current[key]
    return current


def _can_descend(child: Any, segment: str) -> bool:
    if isinstance(child, MutableMapping):
        return True
    return isinstance(child, MutableSequence) and as_index(segment) is not None


def _put(container: Any, segment: Any, item: Any) -> None:
    key = _resolve_key(container, segment)
    if isinstance(container, MutableMapping):
        container[normalize_key(segment) if key is _MISSING else key] = item
        return
    if isinstance(container, MutableSequence):
        index = as_index(segment)
        if index is None:
            raise TypeError(f"Cannot assign key {segment!r} into a list")
        if index < len(container):
            container[index] = item
        else:
            # indices are append-only
            container.append(item)
        return
    raise TypeError(f"Cannot assign into {type(container).__name__}")


def assign(container: Any, path: Any, item: Any) -> Any:
    """
    Set a value in a nested container via a dot-separated path, in place.

    Missing or non-container intermediates are replaced by empty dicts. With
    an empty path the new value itself is returned, and a container that is
    not mutable (None, a string, a tuple) is replaced by a new dict; in both
    cases the caller rebinds to the return value.
    """
    if path is None or path == "":
        return item
    if not isinstance(container, (MutableMapping, MutableSequence)):
        container = {}
    path = normalize_key(path)
    segments = path.split(".") if isinstance(path, str) else [path]

    current = container
    for segment, following in zip(segments, segments[1:]):
        key = _resolve_key(current, segment)
        child = current[key] if key is not _MISSING else None
        if not _can_descend(child, following):
            child = {}
            _put(current, segment, child)
        current = child
    _put(current, segments[-1], item)
    return container


def forget(container: Any, paths: Any) -> Any:
    """
    Remove one or many paths from a nested container, in place, and return it.

    Paths that do not resolve are skipped. A list that loses items becomes a
    {index: value} mapping of what is left, so the remaining items keep their
    positions and a forgotten index stays gone. A list at the root cannot
    change type in place: the mapping is returned for the caller to rebind
    and the list itself is left alone.
    """
    # id(list) -> [depth, holder, key in holder, list, indices to drop]
    pending: dict[int, list] = {}

    def _delete(parent: Any, key: Any, holder: Any, holder_key: Any, depth: int) -> None:
        if isinstance(parent, MutableMapping):
            del parent[key]
        elif isinstance(parent, MutableSequence):
            entry = pending.setdefault(id(parent), [depth, holder, holder_key, parent, set()])
            entry[4].add(key)
        else:
            logger.debug("Cannot delete %r from immutable %s", key, type(parent).__name__)

    for path in as_paths(paths):
        path = normalize_key(path)
        key = _resolve_key(container, path)
        if key is not _MISSING:
            _delete(container, key, None, None, 0)
            continue
        if not isinstance(path, str):
            continue

        *parents, last = path.split(".")
        holder, holder_key, current = None, None, container
        for segment in parents:
            key = _resolve_key(current, segment)
            if key is _MISSING or not accessible(current[key]):
                logger.debug("Path %r does not exist; nothing to forget", path)
                break
            holder, holder_key, current = current, key, current[key]
        else:
            key = _resolve_key(current, last)
            if key is not _MISSING:
                _delete(current, key, holder, holder_key, len(parents))

    result = container
    # inner lists before the lists that hold them
    for _, holder, holder_key, items, indices in sorted(pending.values(), key=lambda e: e[0], reverse=True):
        remaining = {i: item for i, item in enumerate(items) if i not in indices}
        if holder is None:
            result = remaining
        elif isinstance(holder, (MutableMapping, MutableSequence)):
            holder[holder_key] = remaining
        else:
            logger.debug("Cannot replace %r inside immutable %s", holder_key, type(holder).__name__)
    return result


def has(container: Any, paths: Any) -> bool:
    """True if every path exists (a stored None still counts)."""
    keys = as_paths(paths)
    if not accessible(container) or not container or not keys:
        return False

    for path in keys:
        path = normalize_key(path)
        if _resolve_key(container, path) is not _MISSING:
            continue
        if not isinstance(path, str):
            return False
        current = container
        for segment in path.split("."):
            key = _resolve_key(current, segment)
            if key is _MISSING:
                return False
            current = current[key]
    return True


def has_any(container: Any, paths: Any) -> bool:
    """True if at least one of the paths exists."""
    if paths is None:
        return False
    keys = as_paths(paths)
    if not accessible(container) or not container or not keys:
        return False
    return any(has(container, key) for key in keys)


def add(container: Any, path: Any, item: Any) -> Any:
    """Return a copy with `item` set at `path` unless a non-None value is there."""
    result = copy.deepcopy(container)
    if get(result, path) is None:
        result = assign(result, path, item)
    return result


def pull(container: Any, path: Any, default: Any = None) -> Any:
    """
    Get a value and remove it from the container. A list at the root keeps
    its items; use forget() and rebind to drop them there.
    """
    found = get(container, path, default)
    forget(container, path)
    return found
