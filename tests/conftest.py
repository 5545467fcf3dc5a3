# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from pathlib import Path
import pytest

from cart_parser.logging.init import LOGGER_NAME, reset_logging

SAMPLE_CART = """Product name,Price,Quantity
Mollis consequat,9.00,2
Tvoluptatem,10.32,1
Scelerisque lacinia,18.90,1
Consectetur adipiscing,28.72,10
Condimentum aliquet,13.90,1
"""


@pytest.fixture(autouse=True)
def _clean_logging():
    # capsys の差し替え stdout を毎テスト拾い直すため handler を破棄
    reset_logging()
    logger = logging.getLogger(LOGGER_NAME)
    yield
    reset_logging()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    monkeypatch.delenv("CART_SOURCE_DIRECTORY", raising=False)
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
file_pattern: "*.csv"
encoding: utf-8
logs_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "cart.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_cart_csv() -> str:
    return SAMPLE_CART


@pytest.fixture()
def write_cart(temp_workdir: Path):
    def _write(name: str, contents: str) -> Path:
        f = temp_workdir / "data" / name
        f.write_text(contents, encoding="utf-8")
        return f
    return _write


@pytest.fixture()
def fixed_id():
    return lambda: "uuid"
