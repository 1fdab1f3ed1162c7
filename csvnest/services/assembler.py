from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..models.nested import NestedValue, Record
from ..models.row_data import CsvTable, RowData
from .inference import infer_value
from .structure import set_nested_value

"""Record assembly: one CSV data row -> one nested record -> result document.

Every row is turned into its own record tree. The record's ``name`` value is
taken out of the tree and becomes the record's key in the result document,
which starts from a copy of the fixed metadata entries.
"""

__all__ = [
    "KEY_FIELD",
    "MissingKeyError",
    "assemble_document",
    "build_record",
    "extract_key",
]

logger = logging.getLogger(__name__)

KEY_FIELD = "name"


class MissingKeyError(Exception):
    """A data row has no usable ``name`` value.

    Attributes:
        row: 1-based line number of the offending row
    """

    def __init__(self, row: int, detail: str | None = None) -> None:
        self.row = row
        self.detail = detail or f"'{KEY_FIELD}' column is empty"
        super().__init__(f"row {row}: {self.detail}")


def build_record(headers: Sequence[str], cells: Sequence[str]) -> Record:
    """Build one nested record from header cells and the matching data cells.

    Missing trailing cells count as empty; cells past the last header are
    ignored.
    """
    record: Record = {}
    for i, header in enumerate(headers):
        raw = cells[i] if i < len(cells) else ""
        set_nested_value(record, header.strip(), infer_value(raw.strip()))
    return record


def _key_text(value: NestedValue) -> str:
    if isinstance(value, str):
        return value
    # true / 3 / 1.5 (JSON と同じ表記)
    return json.dumps(value)


def extract_key(record: Record, row_number: int) -> str:
    """Remove the ``name`` entry from ``record`` and return it as text.

    Raises:
        MissingKeyError: ``name`` is absent, null, empty or not a scalar
    """
    value = record.get(KEY_FIELD)
    if value is None:
        raise MissingKeyError(row_number)
    if isinstance(value, (dict, list)):
        raise MissingKeyError(row_number, f"'{KEY_FIELD}' must be a single value, got {type(value).__name__}")
    key = _key_text(value)
    if key == "":
        raise MissingKeyError(row_number)
    del record[KEY_FIELD]
    return key


def assemble_document(
    table: CsvTable,
    seed: Mapping[str, Any] | None = None,
    *,
    on_row: Callable[[RowData, str], None] | None = None,
) -> dict[str, NestedValue]:
    """Convert every data row of ``table`` and collect them by key.

    Args:
        table: header cells plus data rows
        seed: fixed entries written before the records (copied, not mutated)
        on_row: optional callback(row, key) after each inserted row

    Returns:
        The result document: seed entries, then one entry per distinct key

    Raises:
        MissingKeyError: first row without a usable ``name``; nothing is returned
    """
    document: dict[str, NestedValue] = dict(seed) if seed else {}
    seeded = set(document)
    seen: set[str] = set()

    for row in table.rows:
        record = build_record(table.headers, row.cells)
        key = extract_key(record, row.row_number)
        if key in seen:
            logger.warning(f"row {row.row_number}: duplicate {KEY_FIELD} '{key}' replaces earlier row")
        elif key in seeded:
            logger.warning(f"row {row.row_number}: {KEY_FIELD} '{key}' replaces metadata entry")
        seen.add(key)
        document[key] = record
        if on_row is not None:
            on_row(row, key)

    return document
