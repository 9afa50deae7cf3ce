import pytest

from concurrencylab.chat_server import (
    ALREADY_JOINED,
    MUST_JOIN,
    ChatClient,
    ChatServer,
)


class FakeSocket:
    def __init__(self, incoming=(), fail_send=False):
        self.sent = []
        self.closed = False
        self.fail_send = fail_send
        self.remote_address = ("127.0.0.1", 40000)
        self._incoming = list(incoming)

    async def send(self, message):
        if self.closed or self.fail_send:
            raise ConnectionResetError("connection closed")
        self.sent.append(message)

    async def close(self):
        self.closed = True

    def __aiter__(self):
        return self._messages()

    async def _messages(self):
        for message in self._incoming:
            if self.closed:
                return
            yield message


def _register(server, name=""):
    client = ChatClient(conn=FakeSocket(), name=name)
    server.clients.add(client)
    return client


@pytest.mark.asyncio
async def test_join_broadcasts_to_everyone():
    server = ChatServer()
    alice = _register(server)
    bob = _register(server)
    await server.handle_command(alice, "join alice")
    assert alice.name == "alice"
    assert alice.conn.sent == ["Server: alice joined the chat"]
    assert bob.conn.sent == ["Server: alice joined the chat"]
    assert server.history() == ["alice joined the chat"]


@pytest.mark.asyncio
async def test_joining_twice_is_refused():
    server = ChatServer()
    alice = _register(server)
    await server.handle_command(alice, "join alice")
    await server.handle_command(alice, "join other")
    assert alice.name == "alice"
    assert alice.conn.sent[-1] == ALREADY_JOINED
    assert len(server.history()) == 1


@pytest.mark.asyncio
async def test_msg_requires_join():
    server = ChatServer()
    anon = _register(server)
    await server.handle_command(anon, "msg hello")
    assert anon.conn.sent == [MUST_JOIN]
    assert server.history() == []


@pytest.mark.asyncio
async def test_msg_keeps_rest_of_line():
    server = ChatServer()
    alice = _register(server, name="alice")
    await server.handle_command(alice, "msg hello there friend")
    assert server.history() == ["alice: hello there friend"]
    assert alice.conn.sent == ["Server: alice: hello there friend"]


@pytest.mark.asyncio
async def test_history_command_sends_joined_lines():
    server = ChatServer()
    alice = _register(server, name="alice")
    await server.broadcast("one")
    await server.broadcast("two")
    alice.conn.sent.clear()
    await server.handle_command(alice, "history")
    assert alice.conn.sent == ["one\ntwo"]


@pytest.mark.asyncio
async def test_history_is_bounded():
    server = ChatServer(history_size=2)
    for text in ("a", "b", "c"):
        await server.broadcast(text)
    assert server.history() == ["b", "c"]


def test_history_size_must_be_positive():
    with pytest.raises(ValueError):
        ChatServer(history_size=0)


@pytest.mark.asyncio
async def test_leave_removes_and_closes_client():
    server = ChatServer()
    alice = _register(server, name="alice")
    bob = _register(server, name="bob")
    await server.handle_command(alice, "leave")
    assert alice not in server.clients
    assert alice.conn.closed
    assert alice.conn.sent == []
    assert bob.conn.sent == ["Server: alice left the chat"]


@pytest.mark.asyncio
async def test_unknown_command_is_ignored():
    server = ChatServer()
    alice = _register(server, name="alice")
    await server.handle_command(alice, "dance now")
    assert alice.conn.sent == []
    assert server.history() == []


@pytest.mark.asyncio
async def test_failed_send_does_not_stop_broadcast():
    server = ChatServer()
    broken = ChatClient(conn=FakeSocket(fail_send=True))
    server.clients.add(broken)
    bob = _register(server)
    await server.broadcast("news")
    assert bob.conn.sent == ["Server: news"]
    assert server.history() == ["news"]


@pytest.mark.asyncio
async def test_handle_ws_runs_commands_and_cleans_up():
    server = ChatServer()
    watcher = _register(server)
    socket = FakeSocket(incoming=["join carol", b"msg hi"])
    await server.handle_ws(socket)
    assert socket.closed
    assert server.clients == {watcher}
    assert watcher.conn.sent == ["Server: carol joined the chat", "Server: carol: hi"]