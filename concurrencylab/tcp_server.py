"""A TCP server that reads until the client stops sending, then replies once."""

from __future__ import annotations

import argparse
import logging
import socket
import threading

log = logging.getLogger(__name__)

BUFFER_SIZE = 2048
DEFAULT_PORT = 3000
_ACCEPT_POLL = 0.2


def build_response() -> bytes:
    """Return the reply sent to every client after it finishes sending."""
    return ("Hi from server! " + "foo" * 1000).encode("utf-8")


def _format_peer(address: object) -> str:
    if isinstance(address, tuple) and len(address) >= 2:
        return f"{address[0]}:{address[1]}"
    return str(address)


class TcpServer:
    """Accepts connections and serves each one in its own thread."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port
        self.address: tuple[str, int] | None = None
        self.ready = threading.Event()
        self._stop = threading.Event()

    def start(self) -> None:
        """Listen and accept connections until ``stop`` is called."""
        with socket.create_server((self.host, self.port)) as listener:
            listener.settimeout(_ACCEPT_POLL)
            host, port = listener.getsockname()[:2]
            self.address = (host, port)
            print(f"TCP server started on :{port}", flush=True)
            self.ready.set()
            while not self._stop.is_set():
                try:
                    conn, address = listener.accept()
                except TimeoutError:
                    continue
                conn.settimeout(None)
                threading.Thread(
                    target=self.handle_connection, args=(conn, address), daemon=True
                ).start()

    def handle_connection(self, conn: socket.socket, address: object) -> bytes | None:
        """Read everything the peer sends, reply, close; return the bytes read."""
        peer = _format_peer(address)
        print(f"Serving {peer}", flush=True)
        received = bytearray()
        try:
            with conn:
                while chunk := conn.recv(BUFFER_SIZE):
                    print(f"Received {len(chunk)} bytes over the network", flush=True)
                    print(chunk.decode("utf-8", errors="replace"), flush=True)
                    received += chunk
                print("EOF Reached.", flush=True)
                try:
                    conn.sendall(build_response())
                except OSError as exc:
                    log.error("Error sending response: %s", exc)
        except OSError as exc:
            log.error("Connection read error: %s", exc)
            return None
        finally:
            print(f"Closed connection to {peer}", flush=True)
        return bytes(received)

    def stop(self) -> None:
        """Ask the accept loop to finish."""
        self._stop.set()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="TCP server that replies after EOF.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    server = TcpServer(args.host, args.port)
    try:
        server.start()
    except KeyboardInterrupt:
        server.stop()
    except OSError as exc:
        print(f"Error starting server: {exc}")
        return 1
    return 0