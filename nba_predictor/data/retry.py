"""Bounded retry and shared rate limiting for outbound requests."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Tuple, Type, TypeVar

from .errors import UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 1.0
MIN_REQUEST_INTERVAL = 1.0


def linear_backoff(base_delay: float = DEFAULT_BASE_DELAY) -> Callable[[int], float]:
    """Delay of ``base_delay * attempt`` seconds after the given failed attempt."""

    def delay(attempt: int) -> float:
        return base_delay * attempt

    return delay


class RateLimiter:
    """
    Single shared cooldown between consecutive outbound requests.

    Every resource type goes through the same instance, so the gap is
    enforced globally rather than per endpoint.
    """

    def __init__(
        self,
        min_interval: float = MIN_REQUEST_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_request: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def last_request_time(self) -> Optional[float]:
        return self._last_request

    def acquire(self) -> None:
        """Block until the cooldown has elapsed, then stamp the request time."""
        with self._lock:
            if self._last_request is not None:
                elapsed = self._clock() - self._last_request
                if elapsed < self.min_interval:
                    wait = self.min_interval - elapsed
                    logger.debug("Rate limit: waiting %.3fs", wait)
                    self._sleep(wait)
            self._last_request = self._clock()


def retry_call(
    fn: Callable[[], T],
    attempts: int = DEFAULT_ATTEMPTS,
    delay: Optional[Callable[[int], float]] = None,
    sleep: Callable[[float], None] = time.sleep,
    retry_on: Tuple[Type[BaseException], ...] = (UpstreamError,),
    rate_limiter: Optional[RateLimiter] = None,
    description: str = "request",
) -> T:
    """
    Call ``fn`` until it succeeds or ``attempts`` are used up.

    Args:
        fn: Zero-argument callable performing one attempt
        attempts: Total attempts allowed (at least 1)
        delay: Maps the 1-based number of the failed attempt to a wait in seconds
        sleep: Sleep function (injected by tests)
        retry_on: Exception types that trigger another attempt
        rate_limiter: Shared limiter acquired before every attempt
        description: Label used in log messages

    Returns:
        The first successful result

    Raises:
        The last exception once all attempts have failed.
    """
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")
    delay = delay or linear_backoff()

    for attempt in range(1, attempts + 1):
        if rate_limiter is not None:
            rate_limiter.acquire()
        try:
            return fn()
        except retry_on as exc:
            if attempt == attempts:
                logger.error("%s failed after %d attempts: %s", description, attempts, exc)
                raise
            wait = delay(attempt)
            logger.warning("%s attempt %d failed (%s); retrying in %.1fs", description, attempt, exc, wait)
            sleep(wait)
    raise AssertionError("unreachable")
