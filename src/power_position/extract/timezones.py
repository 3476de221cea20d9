"""Local wall-clock to UTC resolution backed by the IANA tz database."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from power_position.errors import InvalidTimezoneError


class TimezoneResolver(Protocol):
    key: str

    def to_utc(self, local: datetime) -> datetime:
        """Convert a naive local wall-clock time to an aware UTC datetime."""
        ...


class ZoneInfoResolver:
    """Resolve wall-clock times with :mod:`zoneinfo`.

    Ambiguous times (autumn fold) take the first occurrence, i.e. the
    pre-transition offset. Non-existent times (spring gap) also take the
    pre-transition offset, which lands them one gap later on the wall
    clock: 02:30 in a 02:00->03:00 jump resolves like 03:30.
    """

    def __init__(self, key: str) -> None:
        try:
            self._zone = ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise InvalidTimezoneError(key) from exc
        self.key = key

    def to_utc(self, local: datetime) -> datetime:
        if local.tzinfo is not None:
            raise ValueError(f"expected a naive datetime, got {local.isoformat()}")
        return local.replace(tzinfo=self._zone, fold=0).astimezone(timezone.utc)
