"""CSV text reading: quote-aware cell splitting and file loading."""

from .cells import parse_rows, split_cells, split_lines
from .csv_file import CsvFileError, NoDataError, read_csv_file, read_csv_text, table_to_frame

__all__ = [
    "CsvFileError",
    "NoDataError",
    "parse_rows",
    "read_csv_file",
    "read_csv_text",
    "split_cells",
    "split_lines",
    "table_to_frame",
]
