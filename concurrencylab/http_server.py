"""An HTTP server that prints each request body and echoes the path."""

from __future__ import annotations

import argparse
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

log = logging.getLogger(__name__)


def _send(request, status, text):
    body = text.encode("utf-8")
    request.send_response(status)
    request.send_header("Content-Type", "text/plain; charset=utf-8")
    request.send_header("Content-Length", str(len(body)))
    request.end_headers()
    request.wfile.write(body)


def make_server(host="", port=8080):
    """Build a server that answers every path and method."""

    class Handler(BaseHTTPRequestHandler):
        def _handle(self):
            log.info("Serving %s", self.client_address[0])
            try:
                size = int(self.headers.get("Content-Length", 0))
                body = self.rfile.read(size)
                if size < 0 or len(body) < size:
                    raise ValueError("truncated request body")
            except (ValueError, OSError):
                self.close_connection = True
                _send(self, HTTPStatus.BAD_REQUEST, "Unable to read request body\n")
                return
            print(body.decode("utf-8", errors="replace"), flush=True)
            path = unquote(urlsplit(self.path).path)
            _send(self, HTTPStatus.OK, f"Hello, World! You've requested: {path}\n")

        do_GET = do_POST = do_PUT = do_DELETE = _handle

        def log_message(self, format, *args):
            log.debug(format, *args)

    return ThreadingHTTPServer((host, port), Handler)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plain HTTP server.")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    log.info("Starting server on :%d", args.port)
    try:
        server = make_server("", args.port)
    except OSError as exc:
        print("Error starting server", exc)
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0