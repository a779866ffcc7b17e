"""Configuration: frozen dataclass from an optional YAML file plus environment variables."""

import codecs
import logging
import os
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    folder_path: str = "./logs"
    base_name: str = "logs"
    extension: str = "csv"
    max_file_size_bytes: int = 500 * 1024  # 500 KB
    encoding: str = "utf-8"
    queue_size: int = 0  # 0 = unbounded

    def __post_init__(self):
        if self.max_file_size_bytes <= 0:
            raise ValueError(
                f"max_file_size_bytes must be > 0, got {self.max_file_size_bytes}"
            )
        if self.queue_size < 0:
            raise ValueError(f"queue_size must be >= 0, got {self.queue_size}")
        if not self.base_name:
            raise ValueError("base_name must not be empty")
        if not self.extension:
            raise ValueError("extension must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding!r}") from None


# env var -> (field, converter)
_ENV_OVERRIDES = {
    "LOG_FOLDER": ("folder_path", str),
    "LOG_BASE_NAME": ("base_name", str),
    "LOG_EXTENSION": ("extension", str),
    "MAX_FILE_SIZE_BYTES": ("max_file_size_bytes", int),
    "LOG_ENCODING": ("encoding", str),
    "QUEUE_SIZE": ("queue_size", int),
}


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from defaults, then YAML data, then environment variables."""
    known = {f.name for f in fields(Config)}
    values = {}

    for key, value in (yaml_data or {}).items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        values[key] = value

    for env_name, (field_name, convert) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is not None:
            values[field_name] = convert(raw)

    for key in ("max_file_size_bytes", "queue_size"):
        if key in values:
            values[key] = int(values[key])

    return Config(**values)
