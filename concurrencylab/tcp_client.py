"""A TCP client that sends its data, half-closes, and reads the reply."""

from __future__ import annotations

import argparse
import socket

BUFFER_SIZE = 2048
DEFAULT_PORT = 3000


def send_and_receive(host: str = "localhost", port: int = DEFAULT_PORT, data: bytes = b"") -> bytes:
    """Send ``data``, signal end of input, and return everything the server sends back."""
    with socket.create_connection((host, port)) as conn:
        conn.sendall(data)
        print(f"Wrote {len(data)} bytes over the network", flush=True)
        conn.shutdown(socket.SHUT_WR)
        print("EOF sent", flush=True)

        response = bytearray()
        while chunk := conn.recv(BUFFER_SIZE):
            print(chunk.decode("utf-8", errors="replace"), flush=True)
            response += chunk
        print("EOF Reached.", flush=True)
    return bytes(response)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send data to the TCP server.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        send_and_receive(args.host, args.port, b"Hi" * 2000)
    except OSError as exc:
        print(f"Failed to talk to server: {exc}")
        return 1
    return 0