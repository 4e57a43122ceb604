import threading
import time


class InMemoryRateLimiter:
    """
    Fixed-window rate limiter keyed by client and route.
    State is per process; a multi-instance deployment needs a shared store.
    """

    def __init__(self, sweep_interval_seconds: int = 60) -> None:
        self._lock = threading.Lock()
        # key -> (count, window_end)
        self._state: dict[str, tuple[int, float]] = {}
        self._sweep_interval = sweep_interval_seconds
        self._last_sweep = time.monotonic()

    def _sweep(self, now: float) -> None:
        """Drop keys whose window has closed. Caller holds the lock."""
        expired = [key for key, (_, window_end) in self._state.items() if window_end <= now]
        for key in expired:
            del self._state[key]
        self._last_sweep = now

    def allow(self, key: str, limit: int, window_seconds: int = 60) -> tuple[bool, int]:
        """
        Returns (allowed, retry_after_seconds).
        """
        now = time.monotonic()
        with self._lock:
            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)
            count, window_end = self._state.get(key, (0, now + window_seconds))
            if window_end <= now:
                count = 0
                window_end = now + window_seconds
            if count >= limit:
                retry_after = max(1, int(window_end - now))
                return False, retry_after
            self._state[key] = (count + 1, window_end)
            return True, 0

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._state)

    def reset(self) -> None:
        with self._lock:
            self._state.clear()


rate_limiter = InMemoryRateLimiter()
