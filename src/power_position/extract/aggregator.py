"""Hourly aggregation of trade periods into UTC buckets."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime, time, timedelta

from power_position.extract.timezones import TimezoneResolver, ZoneInfoResolver
from power_position.models import HourlyPosition, PowerTrade


def aggregate_positions(
    trades: Iterable[PowerTrade],
    tz: str | TimezoneResolver,
) -> list[HourlyPosition]:
    """Sum period volumes per UTC hour, ascending by hour.

    Period ``p`` of a trade dated ``D`` starts at local wall-clock
    ``D 00:00 + (p - 1)h`` in *tz*. Local hours that land on the same UTC
    instant (several trades, or a DST gap) are merged into one bucket.

    Raises:
        InvalidTimezoneError: *tz* is not a known IANA zone key.
    """
    resolver = ZoneInfoResolver(tz) if isinstance(tz, str) else tz

    totals: dict[datetime, float] = defaultdict(float)
    for trade in trades:
        midnight = datetime.combine(trade.date, time())
        for p in trade.periods:
            local_start = midnight + timedelta(hours=p.period - 1)
            totals[resolver.to_utc(local_start)] += p.volume

    return [HourlyPosition(ts=ts, volume=totals[ts]) for ts in sorted(totals)]
