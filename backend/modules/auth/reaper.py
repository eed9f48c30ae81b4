"""
Background cleanup of dead authorization codes.

Used and expired codes are already rejected at redemption time; the reaper
only keeps the code collection from growing without bound.
"""

import asyncio
import logging
from datetime import timedelta
from typing import Optional

from shared.clock import Clock, utc_now
from shared.store import KeyValueStore

from .models import AuthorizationCode


logger = logging.getLogger(__name__)


class AuthCodeReaper:
    """
    Periodic sweep over the authorization code store.

    Owned by the application lifespan: start() schedules the loop on the
    running event loop and stop() cancels it. Each sweep runs in a worker
    thread, since it takes the same thread locks as request handlers.
    """

    def __init__(
        self,
        codes: KeyValueStore[AuthorizationCode],
        interval: timedelta,
        clock: Clock = utc_now,
    ):
        if interval.total_seconds() <= 0:
            raise ValueError("Reaper interval must be positive")
        self._codes = codes
        self._interval = interval
        self._clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep(self) -> int:
        """
        Remove every used or expired code.

        Each candidate is re-checked under its key lock before deletion, the
        same lock redemption holds.

        Returns:
            Number of codes removed
        """
        removed = 0
        for key in self._codes.keys():
            with self._codes.lock(key):
                code = self._codes.get(key)
                if code is not None and code.is_dead(self._clock()):
                    self._codes.delete(key)
                    removed += 1

        if removed:
            logger.info(f"Cleaned up {removed} expired/used authorization codes")
        else:
            logger.debug("No authorization codes to clean up")
        return removed

    async def _run(self) -> None:
        seconds = self._interval.total_seconds()
        while True:
            await asyncio.sleep(seconds)
            try:
                await asyncio.to_thread(self.sweep)
            except Exception:
                logger.exception("Authorization code sweep failed")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(
            f"Started authorization code cleanup every "
            f"{int(self._interval.total_seconds())}s"
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Stopped authorization code cleanup")
