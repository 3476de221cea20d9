"""Exception hierarchy."""

from __future__ import annotations


class PowerPositionError(Exception):
    """Base class for all power_position errors."""


class ConfigurationError(PowerPositionError):
    """Static configuration is unusable; retrying cannot fix it."""


class InvalidTimezoneError(ConfigurationError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown time zone: {key!r}")
        self.key = key


class TradeSourceError(PowerPositionError):
    """The trade source could not deliver trades."""
