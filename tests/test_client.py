import socket
import threading

import pytest

from siphttp.client import brew, resolve_target
from siphttp.methods import HttpMethod
from siphttp.request import HttpRequest
from siphttp.status import HttpError, HttpStatus


def _serve_once(response):
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    received = []

    def run():
        with server:
            conn, _ = server.accept()
            with conn:
                data = b""
                while b"\r\n\r\n" not in data:
                    part = conn.recv(4096)
                    if not part:
                        break
                    data += part
                received.append(data)
                conn.sendall(response)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return port, received, thread


def _closed_port():
    with socket.create_server(("127.0.0.1", 0)) as probe:
        return probe.getsockname()[1]


def test_resolve_localhost_with_port():
    request = HttpRequest(HttpMethod.GET, "localhost:8080", "/")
    assert resolve_target(request) == ("127.0.0.1", 8080, False)


def test_resolve_default_tls_port():
    request = HttpRequest(HttpMethod.GET, "localhost", "/", ssl=True)
    assert resolve_target(request) == ("127.0.0.1", 443, True)


def test_resolve_port_443_forces_tls():
    request = HttpRequest(HttpMethod.GET, "127.0.0.1:443", "/")
    assert resolve_target(request) == ("127.0.0.1", 443, True)


def test_resolve_bad_port():
    request = HttpRequest(HttpMethod.GET, "localhost:notaport", "/")
    with pytest.raises(HttpError, match="Unable to resolve domain"):
        resolve_target(request)


@pytest.mark.parametrize("host", ["127.0.0.1:0", "0.0.0.0:80"])
def test_resolve_rejects_unusable_address(host):
    request = HttpRequest(HttpMethod.GET, host, "/")
    with pytest.raises(HttpError, match="No valid address found"):
        resolve_target(request)


def test_brew_against_local_server():
    port, received, thread = _serve_once(
        b"HTTP/1.1 200 OK\r\nContent-Length: 5\r\nX-Test: yes\r\n\r\nhello"
    )
    request = HttpRequest(HttpMethod.GET, f"localhost:{port}", "/ping")
    request.headers["Accept"] = "*/*"
    response = brew(request)
    thread.join(timeout=5)
    assert response.status is HttpStatus.OK
    assert response.content == b"hello"
    assert response.headers["x-test"] == "yes"
    assert received[0].startswith(b"GET /ping HTTP/1.1\r\n")
    assert b"Accept: */*\r\n" in received[0]


def test_brew_parsed_request_sends_body():
    port, received, thread = _serve_once(b"HTTP/1.1 204 No Content\r\n\r\nx")
    request = HttpRequest.parse(f"POST localhost:{port}/submit\n\n{{\"a\":\"b\"}}")
    response = brew(request)
    thread.join(timeout=5)
    assert response.status is HttpStatus.NO_CONTENT
    assert received[0].startswith(b"POST /submit HTTP/1.1\r\n")


def test_brew_incomplete_response():
    port, _, thread = _serve_once(b"HTTP/1.1 200 OK\r\nContent-Length: 10\r\n\r\nabc")
    request = HttpRequest(HttpMethod.GET, f"localhost:{port}", "/")
    with pytest.raises(HttpError, match="Incomplete response"):
        brew(request)
    thread.join(timeout=5)


def test_brew_invalid_response():
    port, _, thread = _serve_once(b"garbage\r\n")
    request = HttpRequest(HttpMethod.GET, f"localhost:{port}", "/")
    with pytest.raises(HttpError, match="Invalid response"):
        brew(request)
    thread.join(timeout=5)


def test_brew_unreachable_server():
    request = HttpRequest(HttpMethod.GET, f"127.0.0.1:{_closed_port()}", "/")
    with pytest.raises(HttpError, match="Error connecting to server"):
        brew(request)