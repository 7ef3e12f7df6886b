"""
nestpath: dot-path helpers for nested dicts and lists.

The functions below are the public API; the `nestpath` command line wraps
them for JSON, YAML and CSV documents.
"""
from importlib.metadata import version, PackageNotFoundError

from nestpath.core.errors import InvalidArgumentError, NestpathError, UnsupportedFormatError
from nestpath.utils.dict_path import (
    accessible,
    add,
    assign,
    exists,
    forget,
    get,
    has,
    has_any,
    pull,
)
from nestpath.utils.keys import (
    camel_keys,
    convert_keys,
    kebab_keys,
    prepend_keys_with,
    snake_keys,
    studly_keys,
)
from nestpath.utils.sampling import random, shuffle
from nestpath.utils.select import (
    except_,
    first,
    last,
    map_values,
    map_with_keys,
    only,
    pluck,
    prepend,
    select,
    take,
    where,
    where_not_null,
)
from nestpath.utils.strings import join, query, to_css_classes, to_css_styles
from nestpath.utils.structure import (
    collapse,
    cross_join,
    divide,
    dot,
    flatten,
    is_assoc,
    is_list,
    sort_recursive,
    sort_recursive_desc,
    undot,
    wrap,
)

try:
    __version__ = version("nestpath")
except PackageNotFoundError:
    __version__ = "unknown"
__app_name__ = "nestpath"
