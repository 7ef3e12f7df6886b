"""
Key rewriting: case conversion and prefixing.
"""
from collections.abc import Mapping
import re
from typing import Any, Callable

from nestpath.core.errors import InvalidArgumentError
from nestpath.utils.dict_path import accessible
from nestpath.utils.structure import items_of

# lower->Upper and ACRONYMWord boundaries
_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s_\-]+")


def _words(text: str) -> list[str]:
    return [w for w in _SEPARATORS.split(_BOUNDARY.sub(" ", text)) if w]


def snake_case(text: str, delimiter: str = "_") -> str:
    """userId / UserID / user-id -> user_id"""
    return delimiter.join(w.lower() for w in _words(text))


def kebab_case(text: str) -> str:
    return snake_case(text, "-")


def studly_case(text: str) -> str:
    """user_id -> UserId"""
    return "".join(w.capitalize() for w in _words(text))


def camel_case(text: str) -> str:
    """user_id -> userId"""
    studly = studly_case(text)
    return studly[:1].lower() + studly[1:]


CASES: dict[str, Callable[[str], str]] = {
    "snake": snake_case,
    "kebab": kebab_case,
    "camel": camel_case,
    "studly": studly_case,
}


def _convert(container: Any, convert: Callable[[str], str], deep: bool) -> Any:
    if isinstance(container, Mapping):
        return {
            (convert(key) if isinstance(key, str) else key): (_convert(item, convert, deep) if deep else item)
            for key, item in container.items()
        }
    if deep and accessible(container):
        return [_convert(item, convert, deep) for item in container]
    return container


def convert_keys(container: Any, case: str, deep: bool = True) -> Any:
    """Rewrite string keys into the given case ("snake", "kebab", "camel" or "studly")."""
    try:
        convert = CASES[case]
    except KeyError as e:
        raise InvalidArgumentError(
            f"Unknown key case '{case}'. Expected one of: {', '.join(CASES)}"
        ) from e
    return _convert(container, convert, deep)


def snake_keys(container: Any, deep: bool = True) -> Any:
    return convert_keys(container, "snake", deep)


def kebab_keys(container: Any, deep: bool = True) -> Any:
    return convert_keys(container, "kebab", deep)


def camel_keys(container: Any, deep: bool = True) -> Any:
    return convert_keys(container, "camel", deep)


def studly_keys(container: Any, deep: bool = True) -> Any:
    return convert_keys(container, "studly", deep)


def prepend_keys_with(container: Any, prefix: str) -> dict:
    """Prefix every top-level key."""
    return {f"{prefix}{key}": item for key, item in items_of(container)}
