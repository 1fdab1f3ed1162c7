from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..models.config_models import ConvertConfig
from ..models.conversion_result import ConversionResult
from ..models.row_data import CsvTable, RowData
from ..reader.csv_file import read_csv_file
from .assembler import assemble_document
from .progress import ProgressTracker
from .serializer import render_document

logger = logging.getLogger(__name__)

"""Conversion service for the CSV -> nested JSON converter.

Coordinates one run: read the CSV file, assemble the result document seeded
with the configured metadata, render it and write the output file. The output
file is only written after every row converted successfully.
"""


class ConversionError(Exception):
    """Raised when the output document cannot be written."""


def write_output(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write rendered JSON, creating parent directories as needed.

    Raises:
        ConversionError: directory creation or file write failed
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=encoding)
    except PermissionError as e:
        raise ConversionError(f"no permission to write JSON file: {path}") from e
    except OSError as e:
        raise ConversionError(f"cannot write JSON file {path}: {e}") from e


def convert_table(table: CsvTable, config: ConvertConfig) -> tuple[str, list[str]]:
    """Assemble and render ``table``.

    Returns:
        (rendered JSON text, record keys in row order)
    """
    keys: list[str] = []
    seen: set[str] = set()
    with ProgressTracker(table.row_count) as progress:

        def _on_row(row: RowData, key: str) -> None:
            if key in seen:
                progress.set_postfix(duplicates=len(keys) + 1 - len(seen))
            seen.add(key)
            keys.append(key)
            progress.advance()

        document = assemble_document(table, config.metadata, on_row=_on_row)
    return render_document(document, indent=config.indent), keys


def convert(config: ConvertConfig) -> ConversionResult:
    """Run one full conversion described by ``config``.

    This is the main orchestration function that:
    1. Reads the configured CSV file
    2. Converts every data row into a keyed nested record
    3. Writes the rendered JSON document
    4. Returns ConversionResult with summary data

    Raises:
        CsvFileError / NoDataError: input unreadable or empty
        MissingKeyError: a data row has no ``name`` value
        ConversionError: output could not be written
    """
    start_time = datetime.now(UTC)
    input_file = config.input_file
    output_file = config.output_file

    table = read_csv_file(input_file, encoding=config.encoding, skip_blank_lines=config.skip_blank_lines)
    logger.info(f"Converting {table.row_count} rows from: {input_file}")

    text, keys = convert_table(table, config)
    write_output(output_file, text, encoding=config.encoding)
    logger.info(f"JSON written: {output_file}")

    end_time = datetime.now(UTC)
    elapsed = (end_time - start_time).total_seconds()
    distinct = len(set(keys))
    return ConversionResult(
        input_path=str(input_file),
        output_path=str(output_file),
        data_rows=table.row_count,
        records=distinct,
        duplicate_keys=len(keys) - distinct,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed,
        throughput_rows_per_sec=(table.row_count / elapsed) if elapsed > 0 else 0.0,
    )
