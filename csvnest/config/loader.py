from __future__ import annotations

import codecs
import json
import os
from pathlib import Path
from typing import Any, Mapping

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ConvertConfig

"""Config loader.

Responsibilities:
- Load YAML config (default: config/convert.yml)
- Validate keys and types against config_schema.json
- Apply defaults for every missing key
- Apply environment overrides (CSVNEST_INPUT / CSVNEST_OUTPUT / CSVNEST_ENCODING)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_OVERRIDES",
    "apply_env_overrides",
    "load_config",
    "resolve_config",
]

DEFAULT_CONFIG_PATH = Path("config/convert.yml")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")

# 環境変数 -> ConvertConfig フィールド
ENV_OVERRIDES = {
    "CSVNEST_INPUT": "input_path",
    "CSVNEST_OUTPUT": "output_path",
    "CSVNEST_ENCODING": "encoding",
}


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails schema validation (unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _check_encoding(name: str) -> None:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {name}") from e


def load_config(path: Path) -> ConvertConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    defaults = ConvertConfig()
    cfg = ConvertConfig(
        input_path=data.get("input_path", defaults.input_path),
        output_path=data.get("output_path", defaults.output_path),
        encoding=data.get("encoding", defaults.encoding),
        indent=data.get("indent", defaults.indent),
        metadata=dict(data["metadata"]) if "metadata" in data else defaults.metadata,
        skip_blank_lines=data.get("skip_blank_lines", defaults.skip_blank_lines),
        log_dir=data.get("log_dir", defaults.log_dir),
    )
    _check_encoding(cfg.encoding)
    return cfg


def apply_env_overrides(cfg: ConvertConfig, environ: Mapping[str, str] | None = None) -> ConvertConfig:
    """Apply CSVNEST_* environment variables (empty values are ignored)."""
    env = os.environ if environ is None else environ
    overrides = {field: env.get(var) or None for var, field in ENV_OVERRIDES.items()}
    cfg = cfg.with_overrides(**overrides)
    _check_encoding(cfg.encoding)
    return cfg


def resolve_config(path: Path | None, environ: Mapping[str, str] | None = None) -> ConvertConfig:
    """Load ``path`` (or the default file if present, else defaults) plus env overrides.

    An explicitly given path must exist; the default path is optional.
    """
    if path is not None:
        cfg = load_config(path)
    elif DEFAULT_CONFIG_PATH.exists():
        cfg = load_config(DEFAULT_CONFIG_PATH)
    else:
        cfg = ConvertConfig()
    return apply_env_overrides(cfg, environ)
