from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Conversion result model for the CSV -> nested JSON converter.

Aggregates the metrics of one run for the SUMMARY output line.
"""


@dataclass(frozen=True)
class ConversionResult:
    """Aggregated results and summary output for one conversion run."""
    input_path: str  # 入力ファイル
    output_path: str  # 出力ファイル
    data_rows: int  # 読み込んだデータ行数 (スキップ行除く)
    records: int  # 出力ドキュメント内のレコード数 (重複キーは1件)
    duplicate_keys: int  # 上書きされた name の数
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float  # end - start
    throughput_rows_per_sec: float  # data_rows / elapsed
