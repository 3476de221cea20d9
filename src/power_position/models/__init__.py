"""Pydantic domain models."""

from power_position.models.position import HourlyPosition
from power_position.models.trade import PowerPeriod, PowerTrade

__all__ = [
    "HourlyPosition",
    "PowerPeriod",
    "PowerTrade",
]
