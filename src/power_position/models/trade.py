"""Trade models — one contract per calendar day, 24 hourly periods."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

PERIODS_PER_DAY = 24


class PowerPeriod(BaseModel):
    """Net volume for one local hour. Period 1 covers [00:00, 01:00)."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(ge=1, le=PERIODS_PER_DAY)
    volume: float


class PowerTrade(BaseModel):
    """A trade for a single local calendar date."""

    model_config = ConfigDict(frozen=True)

    trade_id: str
    date: dt.date
    periods: tuple[PowerPeriod, ...]

    @field_validator("periods")
    @classmethod
    def _check_periods(cls, periods: tuple[PowerPeriod, ...]) -> tuple[PowerPeriod, ...]:
        indices = sorted(p.period for p in periods)
        if indices != list(range(1, PERIODS_PER_DAY + 1)):
            raise ValueError(
                f"expected periods 1..{PERIODS_PER_DAY} exactly once, got {indices}"
            )
        return periods

    def total_volume(self) -> float:
        return sum(p.volume for p in self.periods)
