"""Trade source abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from power_position.models import PowerTrade


class TradeSource(ABC):
    """Capability that returns every trade for one local calendar date.

    Implementations must be safe to call repeatedly for the same date,
    since failed extractions are retried.
    """

    @abstractmethod
    async def get_trades(self, day: date) -> list[PowerTrade]:
        ...

    async def close(self) -> None:
        """Release any held resources. No-op by default."""
