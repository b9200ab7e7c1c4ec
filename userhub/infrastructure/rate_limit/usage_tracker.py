# Standard library imports
import logging
import time
from typing import Callable, Dict, Tuple

# Local application imports
from ...domain.models.rate_usage import RateUsage

logger = logging.getLogger(__name__)


class RateUsageTracker:
    """
    Fixed-window request counter per client.

    Produces the usage snapshot attached to every request. It only counts:
    requests over the limit are reported (and logged once per window) but
    never rejected here.
    """

    def __init__(
        self,
        window_seconds: int,
        max_requests: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self._clock = clock
        # client_id -> (window start, hits in window)
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_sweep = clock()

    def hit(self, client_id: str) -> RateUsage:
        """
        Count one request for a client

        Args:
            client_id: Client identifier (usually the remote address)

        Returns:
            RateUsage snapshot after counting this request
        """
        now = self._clock()
        self._sweep(now)

        window_start, count = self._windows.get(client_id, (now, 0))
        if now - window_start >= self.window_seconds:
            window_start, count = now, 0
        count += 1
        self._windows[client_id] = (window_start, count)

        if count == self.max_requests + 1:
            logger.warning(f"Rate limit reached for client: {client_id}")

        return RateUsage(current=count, limit=self.max_requests, client_id=client_id)

    def _sweep(self, now: float) -> None:
        # Drop expired windows at most once per window length
        if now - self._last_sweep < self.window_seconds:
            return
        self._windows = {
            client_id: entry
            for client_id, entry in self._windows.items()
            if now - entry[0] < self.window_seconds
        }
        self._last_sweep = now
