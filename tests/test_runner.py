"""Tests for process wiring."""

from __future__ import annotations

import asyncio
from datetime import date

from power_position.config import AppConfig
from power_position.config.schema import SourceConfig
from power_position.runner import build_scheduler, build_source, run
from power_position.sources import HttpTradeSource, RandomTradeSource
from tests.helpers import StaticTradeSource, make_trade


class StopAfterFetch(StaticTradeSource):
    """Sets *stop* once the first fetch happens, ending the schedule after one cycle."""

    def __init__(self, stop: asyncio.Event, trades):
        super().__init__(trades)
        self.stop = stop

    async def get_trades(self, day: date):
        self.stop.set()
        return await super().get_trades(day)


def _config(tmp_path, **extract) -> AppConfig:
    return AppConfig.model_validate(
        {
            "extract": {"output_folder_path": str(tmp_path), **extract},
            "retry": {"max_attempts": 2, "delay_s": 0},
        }
    )


class TestBuildSource:
    def test_random_by_default(self):
        assert isinstance(build_source(SourceConfig()), RandomTradeSource)

    def test_http(self):
        source = build_source(SourceConfig(kind="http", base_url="https://trades.example/"))
        assert isinstance(source, HttpTradeSource)
        assert source.base_url == "https://trades.example"


class TestBuildScheduler:
    def test_interval_and_policy_from_config(self, tmp_path):
        scheduler = build_scheduler(_config(tmp_path, interval_minutes=2), StaticTradeSource())
        assert scheduler.interval_s == 120
        assert scheduler.policy.max_attempts == 2
        assert scheduler.policy.delay_s == 0


class TestRun:
    def test_one_cycle_writes_report_and_closes_source(self, tmp_path):
        async def scenario():
            stop = asyncio.Event()
            source = StopAfterFetch(stop, [])
            cycles = await run(_config(tmp_path), source=source, stop=stop)
            return cycles, source

        cycles, source = asyncio.run(asyncio.wait_for(scenario(), timeout=5))

        assert cycles == 1
        assert source.closed
        reports = list(tmp_path.glob("PowerPosition_*.csv"))
        assert len(reports) == 1
        assert reports[0].name.startswith(f"PowerPosition_{source.requested[0]:%Y%m%d}_")

    def test_invalid_timezone_does_not_crash(self, tmp_path):
        async def scenario():
            stop = asyncio.Event()
            source = StaticTradeSource([make_trade(date(2024, 6, 10))])
            asyncio.get_running_loop().call_later(0.1, stop.set)
            cycles = await run(_config(tmp_path, time_zone="Bad/Zone"), source=source, stop=stop)
            return cycles, source

        cycles, source = asyncio.run(asyncio.wait_for(scenario(), timeout=5))
        assert cycles == 1
        assert source.requested == []
        assert list(tmp_path.iterdir()) == []
