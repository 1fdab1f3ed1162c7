from __future__ import annotations

from ..models.conversion_result import ConversionResult

"""Summary line rendering service for the CSV -> nested JSON converter.

Format:
SUMMARY records={records} rows={rows} duplicates={dups} elapsed_sec={elapsed}
throughput_rps={throughput} output={path}
"""


def _format_number(value: float) -> str:
    # 整数値は小数点なし、極小値は指数表記を避ける
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip('0').rstrip('.')
    return str(round(value, 4))


def render_summary_line(result: ConversionResult) -> str:
    """Render a SUMMARY line from a ConversionResult.
    
    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2023, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2023, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ConversionResult(
        ...     input_path="export.csv", output_path="export.json",
        ...     data_rows=1000, records=1000, duplicate_keys=0,
        ...     start_time=start, end_time=end,
        ...     elapsed_seconds=2.0, throughput_rows_per_sec=500.0
        ... )
        >>> render_summary_line(result)
        'SUMMARY records=1000 rows=1000 duplicates=0 elapsed_sec=2 throughput_rps=500 output=export.json'
    """
    return (
        f"SUMMARY records={result.records} "
        f"rows={result.data_rows} "
        f"duplicates={result.duplicate_keys} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_rows_per_sec)} "
        f"output={result.output_path}"
    )
