"""Optional spacing between request start times.

The service asks clients to stay around one request per second. The engine
does not retry or queue; it can only delay the start of a request until
``min_interval`` seconds have passed since the previous one started.
"""

from __future__ import annotations

import asyncio
import logging
import time

logger = logging.getLogger(__name__)


class RequestThrottle:
    """Monotonic sleep guard shared by every request of one engine."""

    def __init__(self) -> None:
        self._last_start: float | None = None
        self._lock: asyncio.Lock | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    def _get_lock(self) -> asyncio.Lock:
        # asyncio.Lock binds to the loop that first waits on it
        loop = asyncio.get_running_loop()
        if self._lock is None or self._loop is not loop:
            self._lock = asyncio.Lock()
            self._loop = loop
        return self._lock

    async def wait(self, min_interval: float | None) -> None:
        """Delay the caller until ``min_interval`` has passed since the last start.

        A None or non-positive interval returns immediately.
        """
        if not min_interval or min_interval <= 0:
            return
        async with self._get_lock():
            if self._last_start is not None:
                delay = min_interval - (time.monotonic() - self._last_start)
                if delay > 0:
                    logger.debug("Throttling request", extra={"delay": round(delay, 3)})
                    await asyncio.sleep(delay)
            self._last_start = time.monotonic()
