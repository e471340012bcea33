"""Request rate limiters (token bucket, sliding window, fixed window) and a WSGI guard.

Times are in seconds. Every limiter takes an optional ``clock``, which returns
the current time, and an optional ``sleep``, which pauses. Both default to the
real ones, and tests may supply their own.
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

Clock = Callable[[], float]
Sleeper = Callable[[float], None]


@dataclass(frozen=True)
class RateLimiterMetrics:
    """Counters of a limiter since it was created or last reset."""

    total_requests: int = 0
    allowed_requests: int = 0
    denied_requests: int = 0
    average_wait_time: float = 0.0


class RateLimiter(ABC):
    """Interface of the limiters, with the bookkeeping they share.

    Subclasses decide when capacity is free through ``_acquire`` and
    ``_restart``, and expose ``allow``, ``allow_n``, ``wait``, ``wait_n``,
    ``reset`` and ``metrics``.
    """

    def __init__(
        self,
        rate: int,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = time.sleep,
    ) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        self._rate = rate
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._clear_counters()

    @property
    def limit(self) -> int:
        """The configured rate."""
        return self._rate

    @property
    @abstractmethod
    def burst(self) -> int:
        """Largest number of requests that can be granted at once."""

    @abstractmethod
    def allow(self) -> bool:
        """Take one request's worth of capacity if it is free right now."""

    @abstractmethod
    def allow_n(self, n: int) -> bool:
        """Take ``n`` requests' worth of capacity if it is all free right now."""

    @abstractmethod
    def wait(self, timeout: float | None = None) -> None:
        """Block until one request is allowed; TimeoutError past ``timeout``."""

    @abstractmethod
    def wait_n(self, n: int, timeout: float | None = None) -> None:
        """Block until ``n`` requests are allowed; TimeoutError past ``timeout``."""

    @abstractmethod
    def reset(self) -> None:
        """Restore full capacity and clear the metrics."""

    @abstractmethod
    def metrics(self) -> RateLimiterMetrics:
        """Return a snapshot of the counters."""

    @abstractmethod
    def _acquire(self, n: int, now: float) -> float:
        """Take ``n`` units if free and return 0; otherwise return the seconds to wait."""

    @abstractmethod
    def _restart(self, now: float) -> None:
        """Return the limiter to its initial, full state."""

    def _clear_counters(self) -> None:
        self._total = 0
        self._allowed = 0
        self._denied = 0
        self._waits = 0
        self._wait_total = 0.0

    def _record(self, granted: bool) -> None:
        self._total += 1
        if granted:
            self._allowed += 1
        else:
            self._denied += 1

    @staticmethod
    def _check_n(n: int) -> None:
        if n < 1:
            raise ValueError("the number of requests must be at least 1")

    def _allow_n(self, n: int) -> bool:
        self._check_n(n)
        with self._lock:
            granted = n <= self.burst and self._acquire(n, self._clock()) <= 0
            self._record(granted)
        return granted

    def _wait_n(self, n: int, timeout: float | None) -> None:
        self._check_n(n)
        if n > self.burst:
            raise ValueError(f"cannot wait for {n} requests with a burst of {self.burst}")
        start = self._clock()
        deadline = None if timeout is None else start + timeout
        while True:
            with self._lock:
                now = self._clock()
                delay = self._acquire(n, now)
                if delay <= 0:
                    self._record(True)
                    self._waits += 1
                    self._wait_total += now - start
                    return
                if deadline is not None and now + delay > deadline:
                    self._record(False)
                    raise TimeoutError("rate limit would not allow the request before the timeout")
            self._sleep(delay)

    def _reset(self) -> None:
        with self._lock:
            self._restart(self._clock())
            self._clear_counters()

    def _snapshot(self) -> RateLimiterMetrics:
        with self._lock:
            average = self._wait_total / self._waits if self._waits else 0.0
            return RateLimiterMetrics(self._total, self._allowed, self._denied, average)


class TokenBucketLimiter(RateLimiter):
    """Refills ``rate`` tokens per second up to ``burst``; each request takes one."""

    def __init__(
        self,
        rate: int,
        burst: int,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = time.sleep,
    ) -> None:
        if burst <= 0:
            raise ValueError("burst must be positive")
        self._burst = burst
        super().__init__(rate, clock=clock, sleep=sleep)
        self._restart(self._clock())

    @property
    def burst(self) -> int:
        return self._burst

    def allow(self) -> bool:
        """Take one token if the bucket holds one."""
        return self._allow_n(1)

    def allow_n(self, n: int) -> bool:
        """Take ``n`` tokens if the bucket holds that many."""
        return self._allow_n(n)

    def wait(self, timeout: float | None = None) -> None:
        """Block until a token is free; TimeoutError past ``timeout`` seconds."""
        self._wait_n(1, timeout)

    def wait_n(self, n: int, timeout: float | None = None) -> None:
        """Block until ``n`` tokens are free; ValueError if ``n`` exceeds the burst."""
        self._wait_n(n, timeout)

    def reset(self) -> None:
        """Refill the bucket and clear the metrics."""
        self._reset()

    def metrics(self) -> RateLimiterMetrics:
        """Counters since the bucket was created or last reset."""
        return self._snapshot()

    def _restart(self, now: float) -> None:
        self._tokens = float(self._burst)
        self._last_refill = now

    def _acquire(self, n: int, now: float) -> float:
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self._burst), self._tokens + elapsed * self._rate)
        self._last_refill = now
        if self._tokens >= n:
            self._tokens -= n
            return 0.0
        return (n - self._tokens) / self._rate


class SlidingWindowLimiter(RateLimiter):
    """Allows at most ``rate`` requests in any span of ``window_size`` seconds."""

    def __init__(
        self,
        rate: int,
        window_size: float,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = time.sleep,
    ) -> None:
        if window_size <= 0:
            raise ValueError("window size must be positive")
        self._window = window_size
        self._requests: deque[float] = deque()
        super().__init__(rate, clock=clock, sleep=sleep)

    @property
    def burst(self) -> int:
        return self._rate

    def allow(self) -> bool:
        """Admit one request if the trailing window has room."""
        return self._allow_n(1)

    def allow_n(self, n: int) -> bool:
        """Admit ``n`` requests if the trailing window has room for all of them."""
        return self._allow_n(n)

    def wait(self, timeout: float | None = None) -> None:
        """Block until the window admits a request; TimeoutError past ``timeout``."""
        self._wait_n(1, timeout)

    def wait_n(self, n: int, timeout: float | None = None) -> None:
        """Block until the window admits ``n`` requests; ValueError if ``n`` exceeds the rate."""
        self._wait_n(n, timeout)

    def reset(self) -> None:
        """Forget recorded requests and clear the metrics."""
        self._reset()

    def metrics(self) -> RateLimiterMetrics:
        """Counters since the window was created or last reset."""
        return self._snapshot()

    def _restart(self, now: float) -> None:
        self._requests.clear()

    def _acquire(self, n: int, now: float) -> float:
        while self._requests and now - self._requests[0] >= self._window:
            self._requests.popleft()
        if len(self._requests) + n <= self._rate:
            self._requests.extend([now] * n)
            return 0.0
        expiring = self._requests[len(self._requests) + n - self._rate - 1]
        return expiring + self._window - now


class FixedWindowLimiter(RateLimiter):
    """Allows at most ``rate`` requests per window; a window opens on the first request after the last one closed."""

    def __init__(
        self,
        rate: int,
        window_size: float,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = time.sleep,
    ) -> None:
        if window_size <= 0:
            raise ValueError("window size must be positive")
        self._window = window_size
        super().__init__(rate, clock=clock, sleep=sleep)
        self._restart(self._clock())

    @property
    def burst(self) -> int:
        return self._rate

    def allow(self) -> bool:
        """Count one request against the current window if it has room."""
        return self._allow_n(1)

    def allow_n(self, n: int) -> bool:
        """Count ``n`` requests against the current window if it has room."""
        return self._allow_n(n)

    def wait(self, timeout: float | None = None) -> None:
        """Block until a window has room for a request; TimeoutError past ``timeout``."""
        self._wait_n(1, timeout)

    def wait_n(self, n: int, timeout: float | None = None) -> None:
        """Block until a window has room for ``n`` requests; ValueError if ``n`` exceeds the rate."""
        self._wait_n(n, timeout)

    def reset(self) -> None:
        """Open a fresh window and clear the metrics."""
        self._reset()

    def metrics(self) -> RateLimiterMetrics:
        """Counters since the limiter was created or last reset."""
        return self._snapshot()

    def _restart(self, now: float) -> None:
        self._window_start = now
        self._used = 0

    def _acquire(self, n: int, now: float) -> float:
        if now - self._window_start >= self._window:
            self._restart(now)
        if self._used + n <= self._rate:
            self._used += n
            return 0.0
        return self._window_start + self._window - now


@dataclass(frozen=True)
class RateLimiterConfig:
    """Settings for :func:`create_limiter`.

    ``algorithm`` is ``"token_bucket"``, ``"sliding_window"`` or ``"fixed_window"``;
    ``burst`` is used by the token bucket and ``window_size`` (seconds) by the windows.
    """

    algorithm: str
    rate: int
    burst: int = 0
    window_size: float = 0.0


def create_limiter(config: RateLimiterConfig) -> RateLimiter:
    """Build the limiter a configuration describes; raise ValueError if it is invalid."""
    if config.algorithm == "token_bucket":
        if config.rate <= 0 or config.burst <= 0:
            raise ValueError(
                "invalid token bucket configuration: rate and burst must be positive"
            )
        return TokenBucketLimiter(config.rate, config.burst)
    if config.algorithm == "sliding_window":
        if config.rate <= 0 or config.window_size <= 0:
            raise ValueError(
                "invalid sliding window configuration: rate and window size must be positive"
            )
        return SlidingWindowLimiter(config.rate, config.window_size)
    if config.algorithm == "fixed_window":
        if config.rate <= 0 or config.window_size <= 0:
            raise ValueError(
                "invalid fixed window configuration: rate and window size must be positive"
            )
        return FixedWindowLimiter(config.rate, config.window_size)
    raise ValueError(f"unsupported algorithm: {config.algorithm}")


class RateLimitMiddleware:
    """WSGI middleware that answers 429 Too Many Requests when the limiter refuses."""

    def __init__(self, app: Callable[..., Iterable[bytes]], limiter: RateLimiter) -> None:
        self.app = app
        self.limiter = limiter

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        if self.limiter.allow():
            return self.app(environ, start_response)
        body = b"Rate limit exceeded"
        start_response(
            "429 Too Many Requests",
            [
                ("X-RateLimit-Limit", str(self.limiter.limit)),
                ("X-RateLimit-Remaining", "0"),
                ("Content-Type", "text/plain; charset=utf-8"),
                ("Content-Length", str(len(body))),
            ],
        )
        return [body]