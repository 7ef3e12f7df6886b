"""
An Adapter converts between a raw text document (JSON, YAML, CSV...) and the
nested dicts and lists the rest of nestpath works on.

Adapters register themselves with the global `adapter_registry` when their
module is imported (see nestpath.adapters).
"""

from abc import ABC, abstractmethod
import logging
from pathlib import Path
import sys
from typing import Any, ClassVar

from nestpath.core.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "json"


class BaseAdapter(ABC):
    """The base class for all Adapters."""
    accepted_formats: ClassVar[set[str]] = set()  # e.g. {"json", "yaml", "csv"}

    @property
    def name(self) -> str:
        """Adapters do not need a name, but for messages we can use the class name"""
        return self.__class__.__name__

    def accepts(self, fmt: str) -> bool:
        return normalize_format(fmt) in self.accepted_formats

    @abstractmethod
    def parse(self, raw_data: str, fmt: str) -> Any:
        """Convert raw text into nested dicts/lists/scalars."""

    @abstractmethod
    def serialize(self, data: Any, fmt: str, *, indent: int = 2, sort_keys: bool = False) -> str:
        """Convert nested data back into raw text."""


class AdapterRegistry:
    """
    Global registry for Adapters. The CLI queries this to find an Adapter for
    a file extension or an explicit --format.
    """
    def __init__(self):
        self._adapters: dict[str, BaseAdapter] = {}

    def __getitem__(self, key: str) -> BaseAdapter:
        """Allows dict-like access to Adapter definitions"""
        if key not in self._adapters:
            raise KeyError(f"Adapter with key '{key}' not found.")
        return self._adapters[key]

    def register(self, adapter: BaseAdapter) -> None:
        """Called on import of each adapter module"""
        if not adapter.accepted_formats:
            raise ValueError(f"Adapter {adapter} accepts no formats")
        if adapter.name in self._adapters:
            raise ValueError(f"Adapter with key '{adapter.name}' is already registered.")
        self._adapters[adapter.name] = adapter

    @property
    def formats(self) -> list[str]:
        return sorted({fmt for a in self._adapters.values() for fmt in a.accepted_formats})

    def for_format(self, fmt: str) -> BaseAdapter:
        """Find the Adapter for a format name such as 'json' or '.yml'."""
        for adapter in self._adapters.values():
            if adapter.accepts(fmt):
                return adapter
        raise UnsupportedFormatError(
            f"No adapter for format '{fmt}'. Known formats: {', '.join(self.formats) or 'none'}"
        )

    def for_path(self, path: str | Path) -> BaseAdapter:
        return self.for_format(detect_format(path))


adapter_registry = AdapterRegistry()


# --- Helpers ---

def normalize_format(fmt: str) -> str:
    fmt = fmt.strip().lower().lstrip(".")
    return "yaml" if fmt == "yml" else fmt


def detect_format(path: str | Path, default: str = DEFAULT_FORMAT) -> str:
    """Format from the file extension; stdin ('-') and bare names use `default`."""
    if str(path) == "-":
        return default
    suffix = Path(path).suffix
    return normalize_format(suffix) if suffix else default


def parse_document(raw_data: str, fmt: str = DEFAULT_FORMAT) -> Any:
    adapter = adapter_registry.for_format(fmt)
    logger.debug("Parsing %s document with %s", fmt, adapter.name)
    return adapter.parse(raw_data, normalize_format(fmt))


def load_document(source: str | Path, fmt: str | None = None) -> Any:
    """Read and parse a document from a file path, or stdin for '-'."""
    fmt = fmt or detect_format(source)
    if str(source) == "-":
        raw_data = sys.stdin.read()
    else:
        raw_data = Path(source).read_text(encoding="utf-8")
    return parse_document(raw_data, fmt)


def dump_document(data: Any, fmt: str = DEFAULT_FORMAT, *, indent: int = 2, sort_keys: bool = False) -> str:
    adapter = adapter_registry.for_format(fmt)
    return adapter.serialize(data, normalize_format(fmt), indent=indent, sort_keys=sort_keys)
