"""Configuration system."""

from power_position.config.loader import load_config
from power_position.config.schema import AppConfig

__all__ = ["AppConfig", "load_config"]
