"""Fixed-delay retry combinator over explicit Success / Failure results."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

import structlog

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    attempts: int = 1


@dataclass(frozen=True)
class Failure:
    """The last error seen, plus how many attempts were made.

    ``cancelled`` is set when a stop request cut the retries short.
    """

    error: Exception
    attempts: int = 1
    cancelled: bool = False


Result = Union[Success[T], Failure]


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    delay_s: float = 5.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.delay_s < 0:
            raise ValueError("delay_s must be >= 0")


async def sleep_or_stop(stop: asyncio.Event | None, seconds: float) -> bool:
    """Sleep for *seconds* unless *stop* is set first.

    Returns True if the stop event was set (before or during the wait).
    """
    if stop is None:
        await asyncio.sleep(seconds)
        return False
    if stop.is_set():
        return True
    try:
        await asyncio.wait_for(stop.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        return False
    return True


async def attempt(operation: Callable[[], Awaitable[T]]) -> Result[T]:
    """Run *operation* once, turning a raised exception into a Failure."""
    try:
        return Success(await operation())
    except Exception as exc:
        return Failure(exc)


async def retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    stop: asyncio.Event | None = None,
    log: structlog.stdlib.BoundLogger | None = None,
) -> Result[T]:
    """Call *operation* until it succeeds or ``policy.max_attempts`` is reached.

    Waits ``policy.delay_s`` between attempts, never after the last one.
    Each failed attempt logs a warning. A stop request during the wait
    ends the retries with a cancelled Failure.
    """
    log = log if log is not None else structlog.get_logger("retry")

    for number in range(1, policy.max_attempts + 1):
        log.info("extract_attempt_started", attempt=number, max_attempts=policy.max_attempts)
        result = await attempt(operation)
        if isinstance(result, Success):
            return Success(result.value, attempts=number)

        failure = Failure(result.error, attempts=number)
        log.warning(
            "extract_attempt_failed",
            attempt=number,
            max_attempts=policy.max_attempts,
            error=str(result.error) or type(result.error).__name__,
        )
        if number < policy.max_attempts and await sleep_or_stop(stop, policy.delay_s):
            return Failure(result.error, attempts=number, cancelled=True)

    return failure
