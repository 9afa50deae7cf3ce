import time

import pytest

from concurrencylab.ratelimiter import RateLimitExceeded, TokenBucketRateLimiter


def test_defaults_match_bucket_configuration():
    limiter = TokenBucketRateLimiter()
    assert limiter.capacity == 10
    assert limiter.tokens == 10
    assert limiter.tokens_per_refill == 5
    assert limiter.refill_interval == 5.0


def test_try_acquire_drains_bucket():
    limiter = TokenBucketRateLimiter()
    results = [limiter.try_acquire() for _ in range(12)]
    assert results.count(True) == limiter.capacity
    assert results[-2:] == [False, False]
    assert limiter.tokens == 0


def test_refill_is_capped_at_capacity():
    limiter = TokenBucketRateLimiter(capacity=4, tokens=0, tokens_per_refill=3)
    limiter.refill_once()
    assert limiter.tokens == 3
    limiter.refill_once()
    assert limiter.tokens == limiter.capacity


def test_background_refill_restores_tokens():
    limiter = TokenBucketRateLimiter(capacity=2, tokens=0, tokens_per_refill=1, refill_interval=0.05)
    limiter.start()
    try:
        deadline = time.monotonic() + 2.0
        while limiter.tokens == 0 and time.monotonic() < deadline:
            time.sleep(0.01)
        assert limiter.try_acquire()
    finally:
        limiter.stop()


def test_stop_halts_refill():
    limiter = TokenBucketRateLimiter(capacity=5, tokens=0, tokens_per_refill=1, refill_interval=0.05)
    with limiter:
        pass
    time.sleep(0.2)
    assert limiter.tokens == 0


def test_rate_limit_wraps_handler():
    limiter = TokenBucketRateLimiter(capacity=1, tokens=1)
    calls = []

    def handler(value):
        calls.append(value)
        return value

    wrapped = limiter.rate_limit(handler)
    assert wrapped("a") == "a"
    with pytest.raises(RateLimitExceeded):
        wrapped("b")
    assert calls == ["a"]
    assert wrapped.__name__ == "handler"


@pytest.mark.parametrize(
    "kwargs",
    [{"capacity": -1}, {"tokens": -1}, {"tokens_per_refill": -1}, {"refill_interval": 0}],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        TokenBucketRateLimiter(**kwargs)