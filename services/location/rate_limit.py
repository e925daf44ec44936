"""Request spacing for the geocoding provider"""

import asyncio
import logging
import time

logger = logging.getLogger(__name__)


class RequestRateLimiter:
    """
    Enforces a minimum interval between request starts.

    One instance is shared by every caller of a geocoder, so concurrent
    lookups queue up instead of bursting past the provider's limit.
    """

    def __init__(self, min_interval: float = 1.0):
        """
        Args:
            min_interval: Seconds between consecutive requests (0 disables limiting)
        """
        self.min_interval = min_interval
        self._lock = asyncio.Lock()
        self._last_request: float | None = None

    async def acquire(self) -> float:
        """
        Wait until a request may be sent.

        Returns:
            Delay in seconds (0 if no delay needed)
        """
        async with self._lock:
            delay = 0.0
            if self.min_interval > 0 and self._last_request is not None:
                delay = self._last_request + self.min_interval - time.monotonic()
                if delay > 0:
                    logger.debug(f"Rate limiting geocoder request for {delay:.2f}s")
                    await asyncio.sleep(delay)
                else:
                    delay = 0.0
            self._last_request = time.monotonic()
            return delay
