"""Fixed-interval timer driving refresh cycles."""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 3000


class RefreshScheduler:
    """
    Owns a single recurring timer task on the running event loop.

    on_tick is called synchronously on every tick and must not block;
    the engine spawns the cycle itself.
    """

    def __init__(self, on_tick: Callable[[], None], interval_ms: int = DEFAULT_INTERVAL_MS):
        self._on_tick = on_tick
        self._interval_ms = interval_ms
        self._task: Optional[asyncio.Task] = None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, interval_ms: Optional[int] = None) -> None:
        """Start the timer, replacing any timer already running."""
        if interval_ms is not None:
            if interval_ms <= 0:
                raise ValueError("interval_ms must be positive")
            self._interval_ms = interval_ms
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Auto refresh started (every %d ms)", self._interval_ms)

    def stop(self) -> None:
        """Cancel the timer. Cached data is left untouched."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.info("Auto refresh stopped")

    async def _run(self) -> None:
        interval = self._interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            try:
                self._on_tick()
            except Exception:
                logger.exception("Refresh tick failed")
