"""Sending requests over TCP, with optional TLS."""

from __future__ import annotations

import contextlib
import ipaddress
import socket
import ssl as _ssl

from siphttp.request import HttpRequest
from siphttp.response import HttpResponse, HttpResponseBuilder
from siphttp.status import HttpError

CONNECT_TIMEOUT = 5.0
READ_TIMEOUT = 20.0
_CHUNK_SIZE = 4096


def _is_unspecified(ip: str) -> bool:
    try:
        return ipaddress.ip_address(ip.split("%", 1)[0]).is_unspecified
    except ValueError:
        return False


def resolve_target(request: HttpRequest) -> tuple[str, int, bool]:
    """Resolve the request's host to (ip address, port, use TLS).

    Port 443 is used when TLS is requested and no port is given, port 80
    otherwise; a target on port 443 always uses TLS.
    """
    addr = request.host
    use_tls = request.ssl
    if addr.startswith("http://"):
        addr = addr[len("http://"):]
    elif addr.startswith("https://"):
        addr = addr[len("https://"):]
        use_tls = True

    if ":" not in addr:
        addr += ":443" if use_tls else ":80"
    addr = addr.split("/")[0]
    if addr.startswith("localhost"):
        addr = addr.replace("localhost", "127.0.0.1")

    host, _, port_text = addr.rpartition(":")
    if not port_text.isdigit() or int(port_text) > 0xFFFF:
        raise HttpError("Unable to resolve domain")
    try:
        infos = socket.getaddrinfo(host, int(port_text), type=socket.SOCK_STREAM)
    except (OSError, UnicodeError):
        raise HttpError("Unable to resolve domain") from None

    for *_, sockaddr in infos:
        ip, port = sockaddr[0], sockaddr[1]
        if port != 0 and not _is_unspecified(ip):
            return ip, port, use_tls or port == 443
    raise HttpError("No valid address found")


def brew(request: HttpRequest) -> HttpResponse:
    """Send the request and return the parsed response.

    Raises HttpError when the host cannot be reached or the reply is
    malformed or incomplete.
    """
    ip, port, use_tls = resolve_target(request)
    try:
        sock = socket.create_connection((ip, port), timeout=CONNECT_TIMEOUT)
    except OSError:
        raise HttpError("Error connecting to server") from None

    with contextlib.ExitStack() as stack:
        stack.enter_context(sock)
        sock.settimeout(READ_TIMEOUT)
        stream: socket.socket = sock
        if use_tls:
            hostname = request.host.split(":", 1)[0]
            try:
                context = _ssl.create_default_context()
                stream = context.wrap_socket(sock, server_hostname=hostname)
            except (OSError, ValueError):
                raise HttpError("SSL error") from None
            stack.enter_context(stream)

        with contextlib.suppress(OSError):
            stream.sendall(request.to_wire().encode("utf-8"))

        builder = HttpResponseBuilder()
        while True:
            try:
                chunk = stream.recv(_CHUNK_SIZE)
            except TimeoutError:
                break
            except OSError:
                raise HttpError("Error reading") from None
            if builder.append(chunk) or not chunk:
                break

    response = builder.get()
    if response is None:
        raise HttpError("Incomplete response")
    return response