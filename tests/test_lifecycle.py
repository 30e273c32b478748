import asyncio
import logging
import time
from unittest.mock import patch

from crpt.services.lifecycle import RefillScheduler
from crpt.services.rate_limiter import FixedWindowRateLimiter


async def test_first_refill_runs_immediately():
    limiter = FixedWindowRateLimiter(3, 60)
    for _ in range(3):
        await limiter.acquire()

    scheduler = RefillScheduler(limiter)
    scheduler.start()
    await asyncio.sleep(0.01)

    assert limiter.available == 3
    await scheduler.shutdown()


async def test_refills_every_period():
    limiter = FixedWindowRateLimiter(2, 0.1)
    scheduler = RefillScheduler(limiter)
    scheduler.start()

    for _ in range(6):
        await asyncio.wait_for(limiter.acquire(), timeout=1.0)

    assert limiter.get_stats()["refills"] >= 2
    await scheduler.shutdown()


async def test_shutdown_twice_is_prompt():
    scheduler = RefillScheduler(FixedWindowRateLimiter(1, 0.05))
    scheduler.start()
    assert scheduler.is_running

    started = time.monotonic()
    await scheduler.shutdown()
    await scheduler.shutdown()

    assert time.monotonic() - started < 1.0
    assert not scheduler.is_running


async def test_shutdown_before_start_is_noop():
    scheduler = RefillScheduler(FixedWindowRateLimiter(1, 1.0))
    await scheduler.shutdown()
    assert not scheduler.is_running


async def test_concurrent_shutdowns():
    scheduler = RefillScheduler(FixedWindowRateLimiter(1, 0.05))
    scheduler.start()
    await asyncio.gather(scheduler.shutdown(), scheduler.shutdown(), scheduler.shutdown())
    assert not scheduler.is_running


async def test_no_refill_after_shutdown():
    limiter = FixedWindowRateLimiter(2, 0.05)
    scheduler = RefillScheduler(limiter)
    scheduler.start()
    await asyncio.sleep(0.01)
    await scheduler.shutdown()

    await limiter.acquire()
    await limiter.acquire()
    await asyncio.sleep(0.2)

    assert limiter.available == 0


async def test_stuck_refill_is_cancelled_after_timeout():
    limiter = FixedWindowRateLimiter(1, 0.05)
    refill_started = asyncio.Event()

    async def stuck_refill():
        refill_started.set()
        await asyncio.sleep(30)

    with patch.object(limiter, "refill", stuck_refill):
        scheduler = RefillScheduler(limiter, shutdown_timeout=0.05)
        scheduler.start()
        await refill_started.wait()

        started = time.monotonic()
        await scheduler.shutdown()

    assert time.monotonic() - started < 1.0
    assert not scheduler.is_running


async def test_refill_error_is_logged_and_ticking_continues(caplog):
    limiter = FixedWindowRateLimiter(1, 0.05)
    real_refill = limiter.refill
    calls = 0

    async def flaky_refill():
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("refill exploded")
        return await real_refill()

    with patch.object(limiter, "refill", flaky_refill):
        scheduler = RefillScheduler(limiter)
        with caplog.at_level(logging.ERROR, logger="crpt.lifecycle"):
            scheduler.start()
            await asyncio.sleep(0.2)

        assert scheduler.is_running
        assert calls >= 2
        await scheduler.shutdown()

    assert "Refill failed" in caplog.text
