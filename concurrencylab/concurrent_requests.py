"""Simulated API calls made concurrently and gathered together."""

from __future__ import annotations

import argparse
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

POST_DELAY = 5.0
FRIENDS_DELAY = 4.0
API_DELAY = 2.0

API_URLS = ("http://example.1", "http://example.2", "http://example.3")


def generate_user_name() -> str:
    return "Alice"


def fetch_user_post(user_name: str, delay: float = POST_DELAY) -> str:
    """Pretend to fetch a user's post, taking ``delay`` seconds."""
    print(f"Fetching post for {user_name}", flush=True)
    time.sleep(delay)
    return f"This is a post from {user_name}"


def fetch_user_friends(user_name: str, delay: float = FRIENDS_DELAY) -> list[str]:
    """Pretend to fetch a user's friends, taking ``delay`` seconds."""
    print(f"Fetching friends for {user_name}", flush=True)
    time.sleep(delay)
    return ["Bob", "Carlos", "Doug"]


def make_api_request(api_url: str, delay: float = API_DELAY) -> str:
    """Pretend to call ``api_url``, taking ``delay`` seconds."""
    print(f"Fetching api: {api_url}", flush=True)
    time.sleep(delay)
    return f"Dummy data from {api_url}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run simulated API calls concurrently.")
    parser.add_argument("--delay-scale", type=float, default=1.0)
    args = parser.parse_args(argv)
    scale = args.delay_scale

    start = time.perf_counter()
    user_name = generate_user_name()

    with ThreadPoolExecutor(max_workers=2 + len(API_URLS)) as pool:
        post = pool.submit(fetch_user_post, user_name, POST_DELAY * scale)
        friends = pool.submit(fetch_user_friends, user_name, FRIENDS_DELAY * scale)
        api_calls = [pool.submit(make_api_request, url, API_DELAY * scale) for url in API_URLS]

        for call in as_completed(api_calls):
            print(call.result())

        print("User Post:", post.result())
        print("User Friends:", friends.result())

    print(f"Total time taken: {time.perf_counter() - start:.3f}s")
    return 0