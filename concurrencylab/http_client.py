"""A client that posts a text message and returns the server's reply."""

from __future__ import annotations

import argparse
import sys
import urllib.error
import urllib.request


class UnexpectedStatus(Exception):
    """The server answered with a status other than 200."""

    def __init__(self, status):
        super().__init__(f"Error: Received status code {status}")
        self.status = status


def post_message(url="http://localhost:8080", data=b"Hello, server!"):
    """POST ``data`` as text/plain to ``url`` and return the response body."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    request = urllib.request.Request(url, data=data, headers={"Content-Type": "text/plain"})
    try:
        with urllib.request.urlopen(request, timeout=10) as resp:
            if resp.status != 200:
                raise UnexpectedStatus(resp.status)
            return resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        exc.close()
        raise UnexpectedStatus(exc.code) from None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Post a message to the HTTP server.")
    parser.add_argument("--url", default="http://localhost:8080")
    args = parser.parse_args(argv)

    try:
        body = post_message(args.url)
    except UnexpectedStatus as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print("Error making request:", exc, file=sys.stderr)
        return 1
    print("Response from server:", body)
    return 0