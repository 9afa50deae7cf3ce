"""A client that fires concurrent requests at a rate-limited server."""

from __future__ import annotations

import argparse
import time
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor, as_completed


def make_request(url):
    """Request ``url`` and describe the outcome in one line."""
    try:
        with urllib.request.urlopen(url, timeout=10) as resp:
            status = resp.status
    except urllib.error.HTTPError as exc:
        status = exc.code
        exc.close()
    except OSError as exc:
        return f"Error: {exc}"
    if status == 429:
        return "Rate-limited: 429 Too Many Requests"
    return f"Success: {status}"


def make_requests(url, count):
    """Send ``count`` requests at once; results come back in completion order."""
    if count <= 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        futures = [pool.submit(make_request, url) for _ in range(count)]
        return [future.result() for future in as_completed(futures)]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Exercise a rate-limited server.")
    parser.add_argument("--url", default="http://localhost:8080")
    args = parser.parse_args(argv)

    print(*make_requests(args.url, 20), sep="\n")
    time.sleep(5)
    print(*make_requests(args.url, 10), sep="\n")
    return 0