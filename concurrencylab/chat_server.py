"""A WebSocket chat server with join, msg, history and leave commands."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed

log = logging.getLogger(__name__)

ALREADY_JOINED = "You have already joined the chat\n"
MUST_JOIN = "You must join first\n"


@dataclass(eq=False)
class ChatClient:
    """One connected participant; ``name`` stays empty until it joins."""

    conn: Any
    name: str = ""


async def _send_quietly(websocket, text):
    try:
        await websocket.send(text)
    except (ConnectionClosed, OSError) as exc:
        log.info("%s", exc)


class ChatServer:
    """Tracks connected clients, relays broadcasts and keeps recent history."""

    def __init__(self, history_size=100):
        self.clients = set()
        self._history = deque(maxlen=history_size)
        self._lock = asyncio.Lock()

    async def handle_ws(self, websocket):
        """Serve one connection until it closes, then forget the client."""
        client = ChatClient(conn=websocket)
        log.info("New incoming connection from client: %s", websocket.remote_address)
        self.clients.add(client)
        try:
            async for message in websocket:
                if isinstance(message, bytes):
                    message = message.decode("utf-8", errors="replace")
                await self.handle_command(client, message)
            log.info("Connection ended from client: %s", websocket.remote_address)
        except ConnectionClosed as exc:
            log.info("Error reading message: %s", exc)
        finally:
            await self.remove_client(client)

    async def handle_command(self, client, msg):
        """Act on one command line sent by ``client``; unknown commands are ignored."""
        command, _, arg = msg.partition(" ")
        if command == "join":
            if client.name:
                await _send_quietly(client.conn, ALREADY_JOINED)
                return
            client.name = arg
            await self.broadcast(f"{client.name} joined the chat")
        elif command == "msg":
            if not client.name:
                await _send_quietly(client.conn, MUST_JOIN)
                return
            await self.broadcast(f"{client.name}: {arg}")
        elif command == "history":
            async with self._lock:
                await _send_quietly(client.conn, "\n".join(self._history))
        elif command == "leave":
            await self.remove_client(client)
            await self.broadcast(f"{client.name} left the chat")

    async def remove_client(self, client):
        """Drop ``client`` and close its connection; safe to call twice."""
        self.clients.discard(client)
        await client.conn.close()

    async def broadcast(self, msg):
        """Send ``msg`` to every client and record it in the history."""
        async with self._lock:
            for client in list(self.clients):
                await _send_quietly(client.conn, f"Server: {msg}")
            self._history.append(msg)
            log.info("Broadcasted message: %s", msg)

    def history(self):
        """Return the recorded messages, oldest first."""
        return list(self._history)


async def _serve(port):
    server = ChatServer()
    async with websockets.serve(server.handle_ws, None, port):
        print(f"Starting websockets chat server on :{port}", flush=True)
        await asyncio.Future()


def main(argv=None):
    parser = argparse.ArgumentParser(description="WebSocket chat server.")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        asyncio.run(_serve(args.port))
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        log.error("%s", exc)
        return 1
    return 0