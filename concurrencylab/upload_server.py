"""An HTTP server that opens upload sessions."""

from __future__ import annotations

import argparse
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

log = logging.getLogger(__name__)

INITIATE_PATH = "/upload/initiate"
UPLOAD_ID = "123"
NOT_FOUND_BODY = "404 page not found\n"


def _send(request, status, text):
    body = text.encode("utf-8")
    request.send_response(status)
    request.send_header("Content-Type", "text/plain; charset=utf-8")
    request.send_header("Content-Length", str(len(body)))
    request.end_headers()
    request.wfile.write(body)


def make_server(host="", port=8080):
    """Build a server that answers ``/upload/initiate`` with a session id."""

    class Handler(BaseHTTPRequestHandler):
        def _handle(self):
            self.rfile.read(int(self.headers.get("Content-Length", 0)))
            if urlsplit(self.path).path != INITIATE_PATH:
                _send(self, HTTPStatus.NOT_FOUND, NOT_FOUND_BODY)
                return
            log.info("Serving %s", self.client_address[0])
            _send(self, HTTPStatus.OK, UPLOAD_ID)

        do_GET = do_POST = do_PUT = do_DELETE = _handle

        def log_message(self, format, *args):
            log.debug(format, *args)

    return ThreadingHTTPServer((host, port), Handler)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Upload session server.")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    log.info("Starting server on port :%d", args.port)
    try:
        server = make_server("", args.port)
    except OSError as exc:
        log.error("%s", exc)
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0