from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for batch cart processing.

Responsibilities:
- Load YAML config (default config/cart.yml)
- Validate against the bundled JSON schema (config_schema.json)
- Apply defaults (file_pattern=*.csv, encoding=utf-8, logs_directory=./logs)
- Let CART_SOURCE_DIRECTORY override source_directory
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/cart.yml")
SOURCE_DIRECTORY_ENV = "CART_SOURCE_DIRECTORY"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CartConfig:
    source_directory: str  # 走査対象ディレクトリ
    file_pattern: str = "*.csv"
    encoding: str = "utf-8"
    logs_directory: str = "./logs"


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid JSON, or the
            config data fails validation (missing keys, wrong types, extra keys).
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


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> CartConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    encoding = data.get("encoding", "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e

    # 環境変数 (.env 含む) が設定ファイルより優先
    source_directory = os.getenv(SOURCE_DIRECTORY_ENV) or data["source_directory"]
    return CartConfig(
        source_directory=source_directory,
        file_pattern=data.get("file_pattern", "*.csv"),
        encoding=encoding,
        logs_directory=data.get("logs_directory", "./logs"),
    )
