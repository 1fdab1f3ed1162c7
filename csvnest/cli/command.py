from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, resolve_config
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import enable_debug, log_summary, setup_logging
from ..models.config_models import ConvertConfig
from ..models.error_record import ErrorRecord
from ..reader.csv_file import CsvFileError, NoDataError, read_csv_file, table_to_frame
from ..services.assembler import MissingKeyError
from ..services.converter import ConversionError, convert
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (values override the process environment)
- Load config (config/convert.yml or defaults) + CSVNEST_* overrides + flags
- Convert the input CSV into the output JSON, or just inspect the input
- Print a SUMMARY line; fatal errors are logged, recorded in the error log and
  no output file is written
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

INSPECT_ROWS = 5


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv.

    override=True により .env の値で既存環境変数を上書き。
    失敗時は警告を出すのみで続行。
    """
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="csvnest", description="Dotted-header CSV -> nested JSON converter")
    p.add_argument("--config", default=None, help="Path to YAML config (default: config/convert.yml if present)")
    p.add_argument("--input", default=None, help="Input CSV file (overrides config)")
    p.add_argument("--output", default=None, help="Output JSON file (overrides config)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg: ConvertConfig) -> int:
    try:
        table = read_csv_file(cfg.input_file, encoding=cfg.encoding, skip_blank_lines=cfg.skip_blank_lines)
    except (CsvFileError, NoDataError) as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    print(f"FILE: {cfg.input_file.name} rows={table.row_count}")
    print(f"  HEADERS: {[h.strip() for h in table.headers]}")
    print(table_to_frame(table, limit=INSPECT_ROWS).to_string())
    return EXIT_SUCCESS


def _record_error(cfg: ConvertConfig | None, file: str, row: int, error_type: str, message: str) -> None:
    buffer = ErrorLogBuffer(Path(cfg.log_dir) if cfg is not None else None)
    buffer.append(ErrorRecord.create(file=file, row=row, error_type=error_type, message=message))
    buffer.flush()


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: 空リスト [] が与えられた場合 (テストで main([]) 呼び出し) に
    #       sys.argv[1:] が混入しないよう None のときのみシステム引数を読む。
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = resolve_config(Path(args.config) if args.config else None)
        cfg = cfg.with_overrides(input_path=args.input, output_path=args.output)
    except ConfigError as e:
        logger.error(f"config: {e}")
        _record_error(None, args.config or "", -1, "CONFIG_ERROR", str(e))
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    source = cfg.input_file.name
    try:
        result = convert(cfg)
    except CsvFileError as e:
        logger.error(f"input: {e}")
        _record_error(cfg, source, -1, "INPUT_ERROR", str(e))
        return EXIT_FATAL
    except NoDataError as e:
        logger.error(f"input: {e}")
        _record_error(cfg, source, -1, "NO_DATA", str(e))
        return EXIT_FATAL
    except MissingKeyError as e:
        logger.error(f"{source}: {e}")
        _record_error(cfg, source, e.row, "MISSING_KEY", e.detail)
        return EXIT_FATAL
    except ConversionError as e:
        logger.error(f"output: {e}")
        _record_error(cfg, str(cfg.output_file), -1, "OUTPUT_ERROR", str(e))
        return EXIT_FATAL

    # log_summary が "SUMMARY " を付与するので除去
    summary_line = render_summary_line(result)
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS
