"""An interactive terminal client for the WebSocket chat server."""

from __future__ import annotations

import argparse
import enum
import sys
import threading
from typing import Any

from websockets.exceptions import ConnectionClosed, ConnectionClosedError
from websockets.sync.client import connect

DEFAULT_URL = "ws://localhost:8080/chat"
DEFAULT_ORIGIN = "http://localhost/"

WELCOME = "Welcome to the WebSocket chat!"
COMMANDS = "Commands: join <username>, msg <message>, history, leave"
INVALID_HELP = "Invalid command. Use: join <username>, msg <message>, leave."


class InputAction(enum.Enum):
    """What the client does with a line typed by the user."""

    SEND = "send"
    LEAVE = "leave"
    INVALID = "invalid"


def classify_input(line: str) -> InputAction:
    """Decide whether ``line`` is sent, ends the session, or is rejected."""
    if line.startswith(("join", "msg")) or line == "history":
        return InputAction.SEND
    if line == "leave":
        return InputAction.LEAVE
    return InputAction.INVALID


def _receive(ws: Any) -> None:
    try:
        for message in ws:
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="replace")
            print(message, flush=True)
    except ConnectionClosedError as exc:
        print("Error receiving message:", exc, flush=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="WebSocket chat client.")
    parser.add_argument("--url", default=DEFAULT_URL)
    args = parser.parse_args(argv)

    try:
        ws = connect(args.url, origin=DEFAULT_ORIGIN)
    except (OSError, ConnectionClosed, ValueError) as exc:
        print("Error connecting to WebSocket server:", exc, file=sys.stderr)
        return 1

    with ws:
        threading.Thread(target=_receive, args=(ws,), daemon=True).start()
        print(WELCOME)
        print(COMMANDS)
        print("Enter command: ", end="", flush=True)

        for raw in sys.stdin:
            line = raw.rstrip("\r\n")
            action = classify_input(line)
            if action is InputAction.INVALID:
                print(INVALID_HELP, flush=True)
                continue
            try:
                ws.send(line)
            except ConnectionClosed as exc:
                if action is InputAction.LEAVE:
                    break
                print("Error sending message:", exc, flush=True)
                continue
            except OSError as exc:
                print("Error sending message:", exc, flush=True)
                continue
            if action is InputAction.LEAVE:
                break
    return 0