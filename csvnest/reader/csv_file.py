from __future__ import annotations

import codecs
import logging
from pathlib import Path

import pandas as pd

from ..models.row_data import CsvTable, RowData
from .cells import split_cells, split_lines

"""CSV file reader.

The first line is the header row, every following line is one data row.
Row numbers are physical 1-based line numbers (header = 1), so error reports
point at the line a user sees in an editor.

現段階では全体をメモリに読み込む (ストリーミング非対応)。
"""

__all__ = [
    "CsvFileError",
    "NoDataError",
    "read_csv_file",
    "read_csv_text",
    "table_to_frame",
]

logger = logging.getLogger(__name__)

HEADER_LINE = 1


class CsvFileError(Exception):
    """Raised when the CSV file cannot be opened or decoded."""


class NoDataError(Exception):
    """Raised when the CSV source has a header but no data rows."""


def _decode(raw: bytes, encoding: str, path: Path) -> str:
    # UTF-8 BOM はスキップ
    if raw.startswith(codecs.BOM_UTF8) and encoding.replace("_", "-").lower() in ("utf-8", "utf8"):
        raw = raw[len(codecs.BOM_UTF8):]
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise CsvFileError(f"cannot decode {path} as {encoding}: {e}") from e


def read_csv_text(text: str, *, source: str = "<memory>", skip_blank_lines: bool = False) -> CsvTable:
    """Build a CsvTable from already decoded CSV text.

    Steps:
    1. Split into physical lines
    2. First line -> header cells
    3. Remaining lines -> RowData (line numbers kept even when blank lines are skipped)
    4. Validate at least one data row exists
    """
    lines = split_lines(text)
    if not lines:
        raise NoDataError(f"{source}: CSV has no header row")

    headers = split_cells(lines[0])
    rows: list[RowData] = []
    skipped = 0
    for line_number, line in enumerate(lines[1:], start=HEADER_LINE + 1):
        if skip_blank_lines and line.strip() == "":
            skipped += 1
            continue
        rows.append(RowData(row_number=line_number, cells=split_cells(line)))

    if skipped:
        logger.debug(f"{source}: skipped {skipped} blank line(s)")
    if not rows:
        raise NoDataError(f"{source}: CSV has no data rows")

    return CsvTable(headers=headers, rows=rows, source=source)


def read_csv_file(path: Path, encoding: str = "utf-8", skip_blank_lines: bool = False) -> CsvTable:
    """Read a CSV file into a CsvTable.

    Parameters
    ----------
    path: CSV ファイルパス
    encoding: テキストエンコーディング (UTF-8 の場合 BOM を除去)
    skip_blank_lines: True なら空行をデータ行として扱わない (既定は 1 行 = 1 レコード)
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise CsvFileError(f"CSV file not found: {path}") from e
    except OSError as e:
        raise CsvFileError(f"cannot open CSV file {path}: {e}") from e

    text = _decode(raw, encoding, path)
    table = read_csv_text(text, source=path.name, skip_blank_lines=skip_blank_lines)
    logger.debug(f"{path.name}: headers={len(table.headers)} rows={table.row_count}")
    return table


def table_to_frame(table: CsvTable, limit: int | None = None) -> pd.DataFrame:
    """Raw cells as a DataFrame (header cells as columns) for inspection.

    Short rows are padded with "" and cells past the header count are dropped,
    the same pairing the record assembler applies.
    """
    rows = table.rows if limit is None else table.rows[:limit]
    width = len(table.headers)
    data = [[r.cell(i) for i in range(width)] for r in rows]
    frame = pd.DataFrame(data, columns=[h.strip() for h in table.headers], dtype=object)
    frame.index = [r.row_number for r in rows]
    frame.index.name = "line"
    return frame
