"""One extraction cycle — fetch tomorrow's trades, aggregate, write the report."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import structlog

from power_position.extract.aggregator import aggregate_positions
from power_position.extract.timezones import ZoneInfoResolver
from power_position.extract.writer import report_filename, write_positions
from power_position.sources.base import TradeSource


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def reference_date_for(now: datetime) -> date:
    """The UTC calendar day after *now*."""
    return now.astimezone(timezone.utc).date() + timedelta(days=1)


class PowerPositionExtractor:
    """Runs fetch -> aggregate -> write once per call to :meth:`extract`.

    Holds only static configuration, so it can be invoked again after a
    failed attempt.
    """

    def __init__(
        self,
        source: TradeSource,
        output_folder: str | Path,
        time_zone: str,
        *,
        clock: Callable[[], datetime] = _utc_now,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.source = source
        self.output_folder = Path(output_folder).expanduser()
        self.time_zone = time_zone
        self._clock = clock
        self._log = log if log is not None else structlog.get_logger("extractor")

    async def extract(self) -> Path:
        """Produce one report and return its path."""
        reference_date = reference_date_for(self._clock())
        log = self._log.bind(reference_date=reference_date.isoformat())

        log.info("extract_started", time_zone=self.time_zone)
        resolver = ZoneInfoResolver(self.time_zone)
        trades = await self.source.get_trades(reference_date)

        log.info("aggregating_positions", trades=len(trades))
        positions = aggregate_positions(trades, resolver)

        path = self.output_folder / report_filename(reference_date, self._clock())
        log.info("writing_report", path=str(path), rows=len(positions))
        write_positions(path, positions)

        log.info("extract_generated", path=str(path))
        return path
