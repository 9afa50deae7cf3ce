"""A token bucket rate limiter with periodic refill."""

from __future__ import annotations

import functools
import logging
import threading

log = logging.getLogger(__name__)


class RateLimitExceeded(Exception):
    """Raised by a rate-limited callable when the bucket is empty."""


class TokenBucketRateLimiter:
    """Hands out tokens from a bucket that refills on a fixed interval."""

    def __init__(self, capacity=10, tokens=10, tokens_per_refill=5, refill_interval=5.0):
        self.capacity = capacity
        self.tokens_per_refill = tokens_per_refill
        self.refill_interval = refill_interval
        self.tokens = tokens
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = None

    def try_acquire(self):
        """Take one token if any are left."""
        with self._lock:
            if self.tokens == 0:
                return False
            self.tokens -= 1
            return True

    def refill_once(self):
        """Add one refill's worth of tokens, capped at capacity."""
        with self._lock:
            self.tokens = min(self.tokens + self.tokens_per_refill, self.capacity)

    def _refill_loop(self):
        while not self._stop.wait(self.refill_interval):
            self.refill_once()

    def start(self):
        """Start refilling in a background thread."""
        self._stop.clear()
        self._thread = threading.Thread(target=self._refill_loop, daemon=True)
        self._thread.start()

    def stop(self):
        """Stop the background refill."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def rate_limit(self, handler):
        """Wrap ``handler`` so each call costs a token; raise RateLimitExceeded if none."""

        @functools.wraps(handler)
        def limited(*args, **kwargs):
            if not self.try_acquire():
                log.info("Rate limited")
                raise RateLimitExceeded("Too Many Requests")
            return handler(*args, **kwargs)

        return limited