"""Test helpers — trade builders and an in-memory trade source."""

from __future__ import annotations

from datetime import date

from power_position.models import PowerPeriod, PowerTrade
from power_position.sources.base import TradeSource


def make_trade(day: date, volumes: list[float] | float = 100.0, trade_id: str = "t1") -> PowerTrade:
    """A 24-period trade; a scalar volume is repeated for every period."""
    if not isinstance(volumes, list):
        volumes = [volumes] * 24
    return PowerTrade(
        trade_id=trade_id,
        date=day,
        periods=tuple(PowerPeriod(period=i + 1, volume=v) for i, v in enumerate(volumes)),
    )


class StaticTradeSource(TradeSource):
    """Returns the same trades for any date and records the dates asked for."""

    def __init__(self, trades: list[PowerTrade] | None = None) -> None:
        self.trades = trades or []
        self.requested: list[date] = []
        self.closed = False

    async def get_trades(self, day: date) -> list[PowerTrade]:
        self.requested.append(day)
        return list(self.trades)

    async def close(self) -> None:
        self.closed = True


class FlakyOperation:
    """Async callable that raises for the first *failures* calls, then returns *value*."""

    def __init__(self, failures: int, value: str = "ok") -> None:
        self.failures = failures
        self.value = value
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError(f"boom {self.calls}")
        return self.value


def events(capture, level: str | None = None) -> list[str]:
    """Event names from a LogCapture, optionally filtered by level."""
    return [
        e["event"] for e in capture.entries
        if level is None or e["log_level"] == level
    ]
