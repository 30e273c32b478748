"""Fixed-window rate limiter.

A pool of ``capacity`` permits. Each request takes one permit; a periodic
refill resets the pool to full capacity regardless of how many permits were
used. This is a window counter, not a token bucket: nothing accrues between
refills, so a caller can burst the whole quota right after a reset.
"""

import asyncio
import logging
from datetime import timedelta
from typing import Any

logger = logging.getLogger("crpt.ratelimit")


def to_seconds(period: float | timedelta) -> float:
    if isinstance(period, timedelta):
        return period.total_seconds()
    return float(period)


class FixedWindowRateLimiter:
    """Permit pool shared by all concurrent callers of one client."""

    def __init__(self, capacity: int, period: float | timedelta):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        seconds = to_seconds(period)
        if seconds <= 0:
            raise ValueError(f"period must be positive, got {period!r}")

        self._capacity = capacity
        self._period = seconds
        self._available = capacity
        self._condition = asyncio.Condition()

        # Stats
        self._total_acquired = 0
        self._refills = 0
        self._waiting = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def period(self) -> float:
        """Seconds between refills."""
        return self._period

    @property
    def available(self) -> int:
        return self._available

    async def acquire(self) -> None:
        """Wait until a permit is free and take it.

        There is no timeout. Cancelling the waiting task aborts the wait and
        leaves the pool untouched.
        """
        async with self._condition:
            self._waiting += 1
            try:
                await self._condition.wait_for(lambda: self._available > 0)
            finally:
                self._waiting -= 1
            self._available -= 1
            self._total_acquired += 1

    async def refill(self) -> int:
        """Reset the pool to full capacity. Returns how many permits were restored."""
        async with self._condition:
            restored = self._capacity - self._available
            if restored > 0:
                self._available = self._capacity
                self._condition.notify_all()
            self._refills += 1
        if restored:
            logger.debug("Refilled %d permit(s), %d available", restored, self._capacity)
        return restored

    def get_stats(self) -> dict[str, Any]:
        return {
            "capacity": self._capacity,
            "period": self._period,
            "available": self._available,
            "total_acquired": self._total_acquired,
            "refills": self._refills,
            "waiting": self._waiting,
        }
