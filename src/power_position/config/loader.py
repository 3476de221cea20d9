"""Config loader — reads YAML, applies POWER_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from power_position.config.schema import AppConfig

# env var -> (section, key)
_ENV_OVERRIDES = {
    "POWER_INTERVAL_MINUTES": ("extract", "interval_minutes"),
    "POWER_OUTPUT_FOLDER": ("extract", "output_folder_path"),
    "POWER_TIME_ZONE": ("extract", "time_zone"),
    "POWER_LOG_LEVEL": ("logging", "level"),
    "POWER_LOG_FORMAT": ("logging", "format"),
    "POWER_LOG_FILE": ("logging", "file_path"),
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        POWER_INTERVAL_MINUTES  -> extract.interval_minutes
        POWER_OUTPUT_FOLDER     -> extract.output_folder_path
        POWER_TIME_ZONE         -> extract.time_zone
        POWER_LOG_LEVEL         -> logging.level
        POWER_LOG_FORMAT        -> logging.format
        POWER_LOG_FILE          -> logging.file_path
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data.setdefault(section, {})[key] = value

    return AppConfig.model_validate(data)
