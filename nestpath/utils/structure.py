"""
Helpers that reshape whole containers: flatten, dot/undot, merge, product, sort.
"""
import itertools
import math
from collections.abc import Mapping
from typing import Any

from nestpath.utils.dict_path import accessible, assign


def items_of(container: Any) -> list[tuple[Any, Any]]:
    """(key, value) pairs of a mapping, (index, value) pairs of a sequence."""
    if isinstance(container, Mapping):
        return list(container.items())
    if accessible(container):
        return list(enumerate(container))
    return []


def values_of(container: Any) -> list:
    return [item for _, item in items_of(container)]


def wrap(item: Any) -> list | dict:
    """None becomes [], scalars become [item], lists and dicts pass through."""
    if item is None:
        return []
    return item if isinstance(item, (list, dict)) else [item]


def is_list(container: Any) -> bool:
    """A list, or a mapping keyed exactly 0..n-1 in order."""
    if isinstance(container, Mapping):
        return all(
            isinstance(key, int) and not isinstance(key, bool) and key == i
            for i, key in enumerate(container)
        )
    return accessible(container)


def is_assoc(container: Any) -> bool:
    return accessible(container) and not is_list(container)


def flatten(container: Any, depth: float = math.inf) -> list:
    """
    Inline nested containers into a single list, descending at most `depth`
    levels. At depth 1 the values one level down are taken verbatim.
    """
    result = []
    for item in values_of(container):
        if not accessible(item):
            result.append(item)
        elif depth == 1:
            result.extend(values_of(item))
        else:
            result.extend(flatten(item, depth - 1))
    return result


def dot(container: Any, prepend: str = "") -> dict[str, Any]:
    """Flatten a nested container into {"dotted.path": leaf}. Empty containers are leaves."""
    results: dict[str, Any] = {}
    for key, item in items_of(container):
        if accessible(item) and item:
            results.update(dot(item, f"{prepend}{key}."))
        else:
            results[f"{prepend}{key}"] = item
    return results


def _restore_lists(container: Any) -> Any:
    if not isinstance(container, dict):
        return container
    restored = {key: _restore_lists(item) for key, item in container.items()}
    if restored and all(str(key) == str(i) for i, key in enumerate(restored)):
        return list(restored.values())
    return restored


def undot(mapping: Any) -> Any:
    """
    Expand {"dotted.path": value} back into nested containers.

    Levels keyed exactly "0".."n-1" come back as lists, so a mapping that
    uses such keys on purpose is returned as a list too.
    """
    results: dict = {}
    for key, item in items_of(mapping):
        assign(results, key, item)
    return _restore_lists(results)


def collapse(*containers: Any) -> list | dict:
    """
    Merge containers one level deep. Lists are concatenated; as soon as a
    mapping is involved string keys overwrite and integer keys are renumbered.
    """
    parts = [c for c in containers if accessible(c)]
    if not any(isinstance(c, Mapping) for c in parts):
        return [item for part in parts for item in part]

    results: dict = {}
    next_index = 0
    for part in parts:
        for key, item in items_of(part):
            if isinstance(key, int) and not isinstance(key, bool):
                results[next_index] = item
                next_index += 1
            else:
                results[key] = item
    return results


def cross_join(*sequences: Any) -> list[list]:
    """Cartesian product of the inputs; the last input varies fastest."""
    return [list(combo) for combo in itertools.product(*(values_of(s) for s in sequences))]


def divide(container: Any) -> tuple[list, list]:
    """Split a container into its keys and its values."""
    pairs = items_of(container)
    return [key for key, _ in pairs], [item for _, item in pairs]


def _rank(item: Any) -> tuple:
    # None < bools < numbers < strings < anything else
    if item is None:
        return (0, 0)
    if isinstance(item, bool):
        return (1, int(item))
    if isinstance(item, (int, float)):
        return (2, item)
    if isinstance(item, str):
        return (3, item)
    return (4, repr(item))


def sort_recursive(container: Any, descending: bool = False) -> Any:
    """
    Sort mappings by key and lists by value at every level. A mapping keyed
    0..n-1 counts as a list: its values are sorted and renumbered.
    """
    if isinstance(container, Mapping) and is_list(container):
        items = [sort_recursive(item, descending) for item in container.values()]
        return dict(enumerate(sorted(items, key=_rank, reverse=descending)))
    if isinstance(container, Mapping):
        ordered = sorted(container.items(), key=lambda pair: _rank(pair[0]), reverse=descending)
        return {key: sort_recursive(item, descending) for key, item in ordered}
    if accessible(container):
        items = [sort_recursive(item, descending) for item in container]
        return sorted(items, key=_rank, reverse=descending)
    return container


def sort_recursive_desc(container: Any) -> Any:
    return sort_recursive(container, descending=True)
