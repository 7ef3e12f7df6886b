"""
Adapter for YAML documents.
"""
from typing import Any

import yaml

from nestpath.core.adapters import BaseAdapter, adapter_registry


class YamlAdapter(BaseAdapter):
    """YAML via PyYAML's safe loader and dumper."""
    accepted_formats = {"yaml"}

    def parse(self, raw_data: str, fmt: str = "yaml") -> Any:
        return yaml.safe_load(raw_data)

    def serialize(self, data: Any, fmt: str = "yaml", *, indent: int = 2, sort_keys: bool = False) -> str:
        return yaml.safe_dump(
            data,
            indent=indent if 2 <= indent <= 9 else None,  # PyYAML's accepted range
            sort_keys=sort_keys,
            allow_unicode=True,
            default_flow_style=False,
        ).rstrip("\n")


adapter_registry.register(YamlAdapter())
