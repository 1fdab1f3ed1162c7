from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

"""Config dataclass for the CSV -> nested JSON converter.

Built by csvnest.config.loader from config/convert.yml (or from defaults when
no config file exists) and then adjusted by environment / CLI overrides.
"""

DEFAULT_METADATA: dict[str, Any] = {"Name": "Address", "Version": "1.0"}


def _default_metadata() -> dict[str, Any]:
    return dict(DEFAULT_METADATA)


@dataclass(frozen=True)
class ConvertConfig:
    """Root configuration object for one conversion run.

    Fixed top-level metadata entries are written to the output document before
    any per-row record.
    """
    input_path: str = "export.csv"  # 入力 CSV ファイル
    output_path: str = "export.json"  # 出力 JSON ファイル
    encoding: str = "utf-8"
    indent: int = 2
    metadata: dict[str, Any] = field(default_factory=_default_metadata)
    skip_blank_lines: bool = False  # True なら空行をスキップ (行番号は維持)
    log_dir: str = "logs"

    @property
    def input_file(self) -> Path:
        return Path(self.input_path)

    @property
    def output_file(self) -> Path:
        return Path(self.output_path)

    def with_overrides(self, **overrides: Any) -> ConvertConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)
