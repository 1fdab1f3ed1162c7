# Shared pytest fixtures
from __future__ import annotations
import importlib.util
import logging
import tempfile
from pathlib import Path
import pytest

from csvnest.logging.init import APP_LOGGER_NAME, reset_logging


def _reset_app_logger() -> None:
    # setup_logging() の handler / propagate=False を元に戻す (caplog で拾えるように)
    reset_logging()
    logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # CSVNEST_* がテスト環境から漏れないように (空文字は未設定扱い)
    for var in ("CSVNEST_INPUT", "CSVNEST_OUTPUT", "CSVNEST_ENCODING"):
        monkeypatch.setenv(var, "")
    _reset_app_logger()
    yield
    _reset_app_logger()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """input_path: ./data/export.csv
output_path: ./out/export.json
encoding: utf-8
indent: 2
metadata:
  Name: Address
  Version: "1.0"
skip_blank_lines: false
log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "convert.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv_text() -> str:
    return (
        "name,address.city,address.zip,skills.0,skills.1,active,age\n"
        "alice,Tokyo,100-0001,reading,chess,true,30\n"
        'bob,"Osaka, Kansai",530-0001,go,,FALSE,41\n'
    )


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(text: str, name: str = "export.csv", bom: bool = False) -> Path:
        p = temp_workdir / "data" / name
        data = text.encode("utf-8")
        if bom:
            data = b"\xef\xbb\xbf" + data
        p.write_bytes(data)
        return p
    return _write


@pytest.fixture()
def gen_script():
    # scripts/ はパッケージ外なのでファイルパスから読み込む
    path = Path(__file__).resolve().parents[1] / "scripts" / "gen_sample_csv.py"
    mod_spec = importlib.util.spec_from_file_location("gen_sample_csv", path)
    module = importlib.util.module_from_spec(mod_spec)
    mod_spec.loader.exec_module(module)
    return module
