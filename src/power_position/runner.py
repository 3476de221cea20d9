"""Runner — wires config, source, extractor and scheduler into one process."""

from __future__ import annotations

import asyncio
import contextlib
import signal

import structlog

from power_position.config.loader import load_config
from power_position.config.schema import AppConfig, SourceConfig
from power_position.extract.extractor import PowerPositionExtractor
from power_position.logging.setup import setup_logging
from power_position.scheduling.retry import RetryPolicy
from power_position.scheduling.scheduler import Scheduler
from power_position.sources import HttpTradeSource, RandomTradeSource, TradeSource

log = structlog.get_logger("runner")


def build_source(config: SourceConfig) -> TradeSource:
    """Instantiate the trade source named by ``config.kind``."""
    if config.kind == "http":
        return HttpTradeSource(base_url=config.base_url, timeout_s=config.timeout_s)
    return RandomTradeSource(
        max_trades=config.max_trades,
        failure_rate=config.failure_rate,
        seed=config.seed,
    )


def build_scheduler(config: AppConfig, source: TradeSource) -> Scheduler:
    extractor = PowerPositionExtractor(
        source,
        output_folder=config.extract.output_folder,
        time_zone=config.extract.time_zone,
        log=structlog.get_logger("extractor"),
    )
    return Scheduler(
        extractor.extract,
        interval_s=config.extract.interval_minutes * 60,
        policy=RetryPolicy(
            max_attempts=config.retry.max_attempts,
            delay_s=config.retry.delay_s,
        ),
        log=structlog.get_logger("scheduler"),
    )


async def run(
    config: AppConfig,
    source: TradeSource | None = None,
    stop: asyncio.Event | None = None,
) -> int:
    """Run the schedule until *stop* is set (SIGINT / SIGTERM set it too)."""
    stop = stop if stop is not None else asyncio.Event()
    source = source if source is not None else build_source(config.source)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not available on Windows event loops
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)

    log.info(
        "power_position_started",
        interval_minutes=config.extract.interval_minutes,
        output_folder=str(config.extract.output_folder),
        time_zone=config.extract.time_zone,
        source=config.source.kind,
    )
    try:
        return await build_scheduler(config, source).run(stop)
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            with contextlib.suppress(NotImplementedError):
                loop.remove_signal_handler(sig)
        await source.close()


def main(config_path: str | None = None) -> None:
    """Entry point — load config, set up logging, run the async loop."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        file_path=config.logging.file_path,
    )
    asyncio.run(run(config))
