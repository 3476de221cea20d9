"""Cycle scheduling — bounded retries and the fixed-interval loop."""

from power_position.scheduling.retry import (
    Failure,
    Result,
    RetryPolicy,
    Success,
    attempt,
    retry,
    sleep_or_stop,
)
from power_position.scheduling.scheduler import Scheduler

__all__ = [
    "Failure",
    "Result",
    "RetryPolicy",
    "Scheduler",
    "Success",
    "attempt",
    "retry",
    "sleep_or_stop",
]
