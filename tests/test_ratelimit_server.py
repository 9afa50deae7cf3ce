import threading
import urllib.error
import urllib.request

import pytest

from concurrencylab.ratelimit_server import make_server
from concurrencylab.ratelimiter import TokenBucketRateLimiter


@pytest.fixture
def running_server():
    limiter = TokenBucketRateLimiter(capacity=2, tokens=2)
    server = make_server("127.0.0.1", 0, limiter)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/", limiter
    server.shutdown()
    server.server_close()


def _fetch(url):
    try:
        with urllib.request.urlopen(url, timeout=5) as resp:
            return resp.status, resp.read().decode()
    except urllib.error.HTTPError as exc:
        with exc:
            return exc.code, exc.read().decode()


def test_requests_beyond_tokens_are_rejected(running_server):
    url, _ = running_server
    assert _fetch(url) == (200, "Request served successfully")
    assert _fetch(url + "any/path") == (200, "Request served successfully")
    status, body = _fetch(url)
    assert status == 429
    assert body.strip() == "Too Many Requests"


def test_refill_allows_requests_again(running_server):
    url, limiter = running_server
    for _ in range(2):
        _fetch(url)
    assert _fetch(url)[0] == 429
    limiter.refill_once()
    assert _fetch(url)[0] == 200


def test_server_exposes_limiter():
    limiter = TokenBucketRateLimiter(capacity=1, tokens=1)
    server = make_server("127.0.0.1", 0, limiter)
    try:
        assert server.limiter is limiter
    finally:
        server.server_close()