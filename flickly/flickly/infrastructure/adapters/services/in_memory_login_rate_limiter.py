import threading
import time
from typing import Callable, Dict, List

from flickly.domain.ports.services.login_rate_limiter import LoginRateLimiter


class InMemoryLoginRateLimiter(LoginRateLimiter):
    """Counts failed logins per client inside a sliding window"""

    def __init__(self, max_attempts: int, window_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._failures: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    def _recent(self, client_id: str, now: float) -> List[float]:
        failures = [stamp for stamp in self._failures.get(client_id, []) if now - stamp < self.window_seconds]
        if failures:
            self._failures[client_id] = failures
        else:
            self._failures.pop(client_id, None)
        return failures

    def is_blocked(self, client_id: str) -> bool:
        with self._lock:
            return len(self._recent(client_id, self._clock())) >= self.max_attempts

    def register_failure(self, client_id: str) -> None:
        with self._lock:
            now = self._clock()
            failures = self._recent(client_id, now)
            failures.append(now)
            self._failures[client_id] = failures

    def reset(self, client_id: str) -> None:
        with self._lock:
            self._failures.pop(client_id, None)
