"""Trade sources — where the day's power trades come from."""

from power_position.sources.base import TradeSource
from power_position.sources.http import HttpTradeSource
from power_position.sources.simulated import RandomTradeSource

__all__ = ["HttpTradeSource", "RandomTradeSource", "TradeSource"]
