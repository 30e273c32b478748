import asyncio
import logging

from crpt.services.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger("crpt.lifecycle")


class RefillScheduler:
    """Runs the limiter's refill at a fixed rate until shut down.

    The first refill happens as soon as the task starts. Ticks are scheduled
    against absolute deadlines so a slow cycle does not shift later ones.
    """

    def __init__(self, limiter: FixedWindowRateLimiter, shutdown_timeout: float = 5.0):
        self.limiter = limiter
        self.shutdown_timeout = shutdown_timeout
        self._stopping = asyncio.Event()
        self._shutdown_lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the refill task. Must be called from a running event loop."""
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name="crpt-refill-scheduler"
        )
        logger.info(
            "Refill scheduler started (capacity=%d, period=%.3fs)",
            self.limiter.capacity,
            self.limiter.period,
        )

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while not self._stopping.is_set():
            try:
                await self.limiter.refill()
            except Exception:
                logger.exception("Refill failed, retrying on next tick")
            next_tick += self.limiter.period
            delay = max(0.0, next_tick - loop.time())
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=delay)
            except asyncio.TimeoutError:
                continue

    async def shutdown(self) -> None:
        """Stop the refill task, waiting up to ``shutdown_timeout`` seconds.

        Safe to call more than once; later calls return immediately. Callers
        still waiting for a permit are not woken.
        """
        async with self._shutdown_lock:
            if self._task is None or self._task.done():
                return
            self._stopping.set()
            try:
                await asyncio.wait_for(asyncio.shield(self._task), timeout=self.shutdown_timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    "Refill scheduler did not stop within %.1fs, cancelling",
                    self.shutdown_timeout,
                )
                self._task.cancel()
                await asyncio.wait({self._task})
            logger.info("Refill scheduler stopped")
