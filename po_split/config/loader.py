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

"""Config loader.

Responsibilities:
- Load an optional YAML config (marker / box size / key separator / encoding)
- Validate against config_schema.json
- Apply defaults for every key not given

Resolution order (resolve_config_path):
    1. explicit --config path
    2. PO_SPLIT_CONFIG environment variable (.env already loaded by the CLI)
    3. config/po_split.yml under the working directory, if present
    4. built-in defaults
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/po_split.yml")
CONFIG_ENV_VAR = "PO_SPLIT_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class SplitConfig:
    marker: str = "$"
    box_size: int = 60
    key_separator: str = "-"
    encoding: str = "utf-8"
    output_suffix: str = ".csv"


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: if the schema file is missing or unreadable, or the
            config violates it (unknown keys, wrong types, out-of-range values)
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


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file to load, or None when defaults apply."""
    if explicit is not None:
        return explicit
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_config(path: Path | None) -> SplitConfig:
    if path is None:
        return SplitConfig()
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)
    defaults = SplitConfig()
    encoding = data.get("encoding", defaults.encoding)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding {encoding!r}") from e

    return SplitConfig(
        marker=data.get("marker", defaults.marker),
        box_size=data.get("box_size", defaults.box_size),
        key_separator=data.get("key_separator", defaults.key_separator),
        encoding=encoding,
        output_suffix=data.get("output_suffix", defaults.output_suffix),
    )
