"""
Adapter for JSON documents and JSON lines.
"""
import json
import logging
from typing import Any

from nestpath.core.adapters import BaseAdapter, adapter_registry

logger = logging.getLogger(__name__)


class JsonAdapter(BaseAdapter):
    """
    Plain JSON, plus JSON lines (jsonl/ndjson) where every non-empty line
    is one document and the whole file reads as a list.
    """
    accepted_formats = {"json", "jsonl", "ndjson"}

    def parse(self, raw_data: str, fmt: str = "json") -> Any:
        if fmt not in {"jsonl", "ndjson"}:
            return json.loads(raw_data) if raw_data.strip() else None

        records = []
        for lineno, line in enumerate(raw_data.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                logger.warning("Skipping malformed JSON on line %s: %s", lineno, e)
        return records

    def serialize(self, data: Any, fmt: str = "json", *, indent: int = 2, sort_keys: bool = False) -> str:
        if fmt in {"jsonl", "ndjson"}:
            rows = data if isinstance(data, list) else [data]
            return "\n".join(json.dumps(r, sort_keys=sort_keys) for r in rows) + "\n"
        return json.dumps(data, indent=indent or None, sort_keys=sort_keys, ensure_ascii=False)


adapter_registry.register(JsonAdapter())
