"""
Adapter for CSV/TSV tables whose column headers are dot paths.

Reading undots every row into a nested record; writing dots every record and
uses the union of the paths as the header row.
"""
import csv
import io
import json
import logging
from typing import Any, TYPE_CHECKING

from nestpath.core.adapters import BaseAdapter, adapter_registry
from nestpath.utils.dict_path import accessible
from nestpath.utils.parse import coerce_scalar
from nestpath.utils.structure import dot, undot

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def _records(data: Any) -> list:
    if data is None:
        return []
    return list(data) if isinstance(data, list) else [data]


def _flat_rows(data: Any) -> list[dict[str, Any]]:
    return [dot(r) if accessible(r) and r else {"value": r} for r in _records(data)]


def _cell(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    if accessible(item):
        return json.dumps(item)
    return str(item)


class TableAdapter(BaseAdapter):
    """
    Adapter for handling TSV, CSV files in nestpath.
    """
    accepted_formats = {"csv", "tsv", "tab"}

    @staticmethod
    def delimiter(fmt: str) -> str:
        return "," if fmt == "csv" else "\t"

    def parse(self, raw_data: str, fmt: str = "csv") -> list:
        """
        Parse a table into a list of nested records. Cells are coerced to
        None/bool/int/float where unambiguous.
        """
        if not raw_data.strip():
            return []

        reader = list(csv.reader(io.StringIO(raw_data), delimiter=self.delimiter(fmt)))
        if not reader:
            return []
        headers, data_rows = reader[0], reader[1:]

        records = []
        for lineno, row in enumerate(data_rows, start=2):
            if not any(cell.strip() for cell in row):
                continue
            if len(row) != len(headers):
                # Rows with missing or extra columns: fill None or ignore extra
                logger.warning("Row %s has %s cells, expected %s", lineno, len(row), len(headers))
                row = row + [None] * (len(headers) - len(row)) if len(row) < len(headers) else row[:len(headers)]
            records.append(undot({h: coerce_scalar(cell) for h, cell in zip(headers, row)}))
        return records

    def serialize(self, data: Any, fmt: str = "csv", *, indent: int = 2, sort_keys: bool = False) -> str:
        """Write records as a table; `indent` has no meaning here."""
        rows = _flat_rows(data)
        headers: list[str] = []
        for row in rows:
            headers.extend(k for k in row if k not in headers)
        if sort_keys:
            headers.sort()

        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter(fmt), lineterminator="\n")
        writer.writerow(headers)
        for row in rows:
            writer.writerow([_cell(row.get(h)) for h in headers])
        return buffer.getvalue()

    # --- pandas bridge ---

    def to_dataframe(self, data: Any) -> "pd.DataFrame":
        """One row per record, one column per dot path."""
        import pandas as pd  # pylint: disable=import-outside-toplevel
        return pd.DataFrame(_flat_rows(data))

    def from_dataframe(self, df: "pd.DataFrame") -> list:
        """Inverse of to_dataframe; missing cells (NaN) are left out of the record."""
        import pandas as pd  # pylint: disable=import-outside-toplevel
        records = []
        for row in df.to_dict(orient="records"):
            kept = {str(k): v for k, v in row.items() if accessible(v) or not pd.isna(v)}
            records.append(undot(kept))
        return records


adapter_registry.register(TableAdapter())
