"""Simulated power trade source for local runs and demos.

Behaves like the vendor power service: a random number of trades per
call, random hourly volumes, and an optional random failure.
"""

from __future__ import annotations

import asyncio
import random
import uuid
from datetime import date

from power_position.errors import TradeSourceError
from power_position.models import PowerPeriod, PowerTrade
from power_position.models.trade import PERIODS_PER_DAY
from power_position.sources.base import TradeSource


class RandomTradeSource(TradeSource):
    """Generates random trades for the requested date."""

    def __init__(
        self,
        max_trades: int = 5,
        failure_rate: float = 0.0,
        latency_s: float = 0.0,
        seed: int | None = None,
    ) -> None:
        if max_trades < 1:
            raise ValueError("max_trades must be >= 1")
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be within [0, 1]")
        self.max_trades = max_trades
        self.failure_rate = failure_rate
        self.latency_s = latency_s
        self._rng = random.Random(seed)

    async def get_trades(self, day: date) -> list[PowerTrade]:
        if self.latency_s > 0:
            await asyncio.sleep(self.latency_s)
        if self._rng.random() < self.failure_rate:
            raise TradeSourceError("Error retrieving power volumes")

        count = self._rng.randint(1, self.max_trades)
        return [self._make_trade(day) for _ in range(count)]

    def _make_trade(self, day: date) -> PowerTrade:
        periods = tuple(
            PowerPeriod(period=i, volume=round(self._rng.uniform(-500.0, 500.0), 2))
            for i in range(1, PERIODS_PER_DAY + 1)
        )
        trade_id = str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
        return PowerTrade(trade_id=trade_id, date=day, periods=periods)
