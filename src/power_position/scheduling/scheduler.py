"""Fixed-interval scheduler — run now, then every interval until stopped."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from power_position.scheduling.retry import Failure, RetryPolicy, retry, sleep_or_stop


class Scheduler:
    """Sequential cycle loop.

    Each cycle runs *operation* through :func:`retry`. A cycle that fails
    after all attempts is logged and the loop carries on; only the stop
    event ends it. The interval is measured from the end of one cycle to
    the start of the next, so cycles never overlap.
    """

    def __init__(
        self,
        operation: Callable[[], Awaitable[Any]],
        interval_s: float,
        policy: RetryPolicy | None = None,
        *,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        self.operation = operation
        self.interval_s = interval_s
        self.policy = policy if policy is not None else RetryPolicy()
        self._log = log if log is not None else structlog.get_logger("scheduler")

    async def run_cycle(self, number: int, stop: asyncio.Event) -> bool:
        """Run one cycle. Returns False if a stop request cut it short."""
        log = self._log.bind(cycle=number)
        log.info("cycle_started")
        result = await retry(self.operation, self.policy, stop=stop, log=log)

        if isinstance(result, Failure):
            if result.cancelled:
                log.info("cycle_cancelled", attempts=result.attempts)
                return False
            log.error("cycle_failed", attempts=result.attempts, exc_info=result.error)
        else:
            log.info("cycle_completed", attempts=result.attempts, result=str(result.value))
        return True

    async def run(self, stop: asyncio.Event) -> int:
        """Loop until *stop* is set. Returns the number of cycles started."""
        cycles = 0
        self._log.info("scheduler_started", interval_s=self.interval_s)
        while not stop.is_set():
            cycles += 1
            if not await self.run_cycle(cycles, stop):
                break
            if await sleep_or_stop(stop, self.interval_s):
                break
        self._log.info("scheduler_stopped", cycles=cycles)
        return cycles
