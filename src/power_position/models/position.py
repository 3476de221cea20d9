"""Aggregated position model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HourlyPosition(BaseModel):
    """Summed volume for the UTC hour starting at ``ts``."""

    model_config = ConfigDict(frozen=True)

    ts: datetime
    volume: float
