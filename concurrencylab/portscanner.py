"""Finding open TCP ports, one at a time or concurrently."""

from __future__ import annotations

import argparse
import socket
from concurrent.futures import ThreadPoolExecutor

MAX_PORT = 65535
_CONNECT_TIMEOUT = 1.0
_DEFAULT_WORKERS = 512


def is_port_open(port: int, host: str = "127.0.0.1") -> bool:
    """Return whether a TCP connection to ``host:port`` succeeds."""
    try:
        with socket.create_connection((host, port), timeout=_CONNECT_TIMEOUT):
            return True
    except (OSError, OverflowError):
        return False


def open_ports_sequential(start_port: int, end_port: int, host: str = "127.0.0.1") -> list[int]:
    """Check each port in ``start_port..end_port`` in turn."""
    return [port for port in range(start_port, end_port + 1) if is_port_open(port, host)]


def open_ports_concurrent(
    start_port: int,
    end_port: int,
    host: str = "127.0.0.1",
    max_workers: int | None = None,
) -> list[int]:
    """Check the ports in ``start_port..end_port`` in parallel; result is sorted."""
    ports = range(start_port, end_port + 1)
    with ThreadPoolExecutor(max_workers=max_workers or _DEFAULT_WORKERS) as pool:
        results = pool.map(lambda port: (port, is_port_open(port, host)), ports)
        return sorted(port for port, is_open in results if is_open)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare sequential and concurrent port scans.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--start", type=int, default=0)
    parser.add_argument("--end", type=int, default=MAX_PORT)
    args = parser.parse_args(argv)

    sequential = open_ports_sequential(args.start, args.end, args.host)
    concurrent = open_ports_concurrent(args.start, args.end, args.host)
    print(sequential == concurrent)
    return 0