"""An HTTP server whose every request costs a token from a rate limiter."""

from __future__ import annotations

import argparse
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from concurrencylab.ratelimiter import RateLimitExceeded, TokenBucketRateLimiter

log = logging.getLogger(__name__)

SUCCESS_BODY = "Request served successfully"
LIMITED_BODY = "Too Many Requests\n"


def _send(request, status, text):
    body = text.encode("utf-8")
    request.send_response(status)
    request.send_header("Content-Type", "text/plain; charset=utf-8")
    request.send_header("Content-Length", str(len(body)))
    request.end_headers()
    request.wfile.write(body)


def make_server(host="", port=8080, limiter=None):
    """Build a server on ``host:port``; the limiter is exposed as ``server.limiter``."""
    limiter = limiter or TokenBucketRateLimiter()
    serve = limiter.rate_limit(lambda request: _send(request, HTTPStatus.OK, SUCCESS_BODY))

    class Handler(BaseHTTPRequestHandler):
        def _handle(self):
            log.info("Serving %s", self.client_address[0])
            try:
                serve(self)
            except RateLimitExceeded:
                _send(self, HTTPStatus.TOO_MANY_REQUESTS, LIMITED_BODY)

        do_GET = do_POST = do_PUT = do_DELETE = _handle

        def log_message(self, format, *args):
            log.debug(format, *args)

    server = ThreadingHTTPServer((host, port), Handler)
    server.limiter = limiter
    return server


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rate-limited HTTP server.")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        server = make_server("", args.port)
    except OSError as exc:
        print("Error starting server", exc)
        return 1
    server.limiter.start()
    log.info("Starting server on :%d", args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.limiter.stop()
        server.server_close()
    return 0