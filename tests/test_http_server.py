from __future__ import annotations

import pathlib
import socket

import pytest

from libs.python.http_core.server import serve_connection
from spa_server.handlers import build_handler
from spa_server.resolver import Resolver


def _exchange(raw_request: bytes, processor) -> bytes:
    client, server = socket.socketpair()
    with client:
        client.sendall(raw_request)
        serve_connection(server, ("127.0.0.1", 0), processor)
        chunks = []
        while True:
            chunk = client.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def _split(raw: bytes) -> tuple[str, dict[str, str], bytes]:
    head, body = raw.split(b"\r\n\r\n", 1)
    lines = head.decode("iso-8859-1").split("\r\n")
    headers = {}
    for line in lines[1:]:
        name, value = line.split(":", 1)
        headers[name.strip().lower()] = value.strip()
    return lines[0], headers, body


@pytest.fixture
def processor(tmp_path: pathlib.Path):
    (tmp_path / "index.html").write_bytes(b"<html>index</html>")
    (tmp_path / "app.css").write_bytes(b"body{}")
    return build_handler(Resolver(str(tmp_path)))


def test_get_static_file(processor) -> None:
    status, headers, body = _split(_exchange(b"GET /app.css HTTP/1.1\r\nHost: x\r\n\r\n", processor))

    assert status == "HTTP/1.1 200 OK"
    assert headers["content-type"] == "text/css"
    assert headers["content-length"] == "6"
    assert headers["connection"] == "close"
    assert body == b"body{}"


def test_query_string_is_part_of_the_file_name(processor) -> None:
    status, headers, body = _split(_exchange(b"GET /app.css?v=3 HTTP/1.1\r\n\r\n", processor))

    assert status == "HTTP/1.1 200 OK"
    assert headers["content-type"] == "text/html"
    assert body == b"<html>index</html>"


def test_client_route_falls_back(processor) -> None:
    status, headers, body = _split(_exchange(b"GET /dashboard/42 HTTP/1.1\r\n\r\n", processor))

    assert status == "HTTP/1.1 200 OK"
    assert headers["content-type"] == "text/html"
    assert body == b"<html>index</html>"


def test_head_omits_body(processor) -> None:
    status, headers, body = _split(_exchange(b"HEAD /app.css HTTP/1.1\r\n\r\n", processor))

    assert status == "HTTP/1.1 200 OK"
    assert headers["content-length"] == "6"
    assert body == b""


def test_error_response_over_the_wire(tmp_path: pathlib.Path) -> None:
    processor = build_handler(Resolver(str(tmp_path / "empty")))

    status, headers, body = _split(_exchange(b"GET /missing.png HTTP/1.0\r\n\r\n", processor))

    assert status == "HTTP/1.1 500 Internal Server Error"
    assert "content-type" not in headers
    assert body == b"Error loading index.html"


def test_malformed_request_line(processor) -> None:
    status, headers, body = _split(_exchange(b"NONSENSE\r\n\r\n", processor))

    assert status == "HTTP/1.1 400 Bad Request"
    assert headers["content-type"] == "text/plain"
    assert body == b"invalid request line"


def test_unsupported_version(processor) -> None:
    status, _, body = _split(_exchange(b"GET / HTTP/2.0\r\n\r\n", processor))

    assert status == "HTTP/1.1 400 Bad Request"
    assert body == b"unsupported HTTP version"
