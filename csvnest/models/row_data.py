from __future__ import annotations

from dataclasses import dataclass, field

"""RowData / CsvTable models for the CSV -> nested JSON converter.

RowData represents a single physical data line of the source CSV after it has
been split into cells. CsvTable groups the header cells with every data row.
"""

__all__ = [
    "CsvTable",
    "RowData",
]


@dataclass(frozen=True)
class RowData:
    """One data row as read from the CSV file.

    The row_number refers to the physical line in the source file
    (line 1 = header, line 2 = 1st data row).
    """
    row_number: int  # 1-based physical line number
    cells: list[str]  # raw cells, untrimmed

    def cell(self, index: int) -> str:
        """Return the cell at ``index`` or ``""`` when the row is too short."""
        return self.cells[index] if index < len(self.cells) else ""


@dataclass(frozen=True)
class CsvTable:
    """Header cells plus every data row of one CSV source."""
    headers: list[str]
    rows: list[RowData] = field(default_factory=list)
    source: str = "<memory>"  # 入力ファイル名 (エラーログ用)

    @property
    def row_count(self) -> int:
        return len(self.rows)
