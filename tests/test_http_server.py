import http.client
import threading
import urllib.request

import pytest

from concurrencylab.http_server import make_server


@pytest.fixture
def server_port():
    server = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server.server_address[1]
    server.shutdown()
    server.server_close()
    thread.join(5)


def test_post_echoes_path_and_prints_body(server_port, capsys):
    request = urllib.request.Request(
        f"http://127.0.0.1:{server_port}/",
        data=b"Hello, server!",
        headers={"Content-Type": "text/plain"},
        method="POST",
    )
    with urllib.request.urlopen(request, timeout=5) as resp:
        status = resp.status
        body = resp.read().decode()
        content_type = resp.headers["Content-Type"]
    assert status == 200
    assert body == "Hello, World! You've requested: /\n"
    assert content_type.startswith("text/plain")
    assert "Hello, server!" in capsys.readouterr().out


def test_get_reports_path_without_query(server_port):
    with urllib.request.urlopen(
        f"http://127.0.0.1:{server_port}/some/path?x=1", timeout=5
    ) as resp:
        body = resp.read().decode()
    assert body == "Hello, World! You've requested: /some/path\n"


def test_chunked_body_is_read(server_port, capsys):
    conn = http.client.HTTPConnection("127.0.0.1", server_port, timeout=5)
    try:
        conn.request(
            "POST",
            "/chunked",
            body=iter([b"abc", b"def"]),
            headers={"Transfer-Encoding": "chunked"},
            encode_chunked=True,
        )
        resp = conn.getresponse()
        body = resp.read().decode()
    finally:
        conn.close()
    assert resp.status == 200
    assert body == "Hello, World! You've requested: /chunked\n"
    assert "abcdef" in capsys.readouterr().out


def test_bad_content_length_is_rejected(server_port):
    conn = http.client.HTTPConnection("127.0.0.1", server_port, timeout=5)
    try:
        conn.putrequest("POST", "/")
        conn.putheader("Content-Length", "abc")
        conn.endheaders()
        resp = conn.getresponse()
        body = resp.read().decode()
    finally:
        conn.close()
    assert resp.status == 400
    assert body == "Unable to read request body\n"