"""HTTP request model, text parsing and wire serialisation."""

from __future__ import annotations

from dataclasses import dataclass, field

from siphttp.headers import HttpHeaders
from siphttp.methods import HttpMethod
from siphttp.status import HttpError


@dataclass
class HttpRequest:
    """An outgoing HTTP request."""

    method: HttpMethod
    host: str
    path: str
    ssl: bool = False
    args: dict[str, str] = field(default_factory=dict)
    headers: HttpHeaders = field(default_factory=HttpHeaders)
    body: bytes = b""

    @classmethod
    def parse(cls, raw: str) -> HttpRequest:
        """Parse a request written as text.

        The first line holds the method and target URL, header lines follow
        until the first line without a colon, and the remaining lines are
        joined, without separators, into the body.
        """
        lines = iter(raw.split("\n"))
        status_line = next(lines)
        raw_method, sep, target = status_line.partition(" ")
        if not sep:
            raise HttpError("Invalid status")
        raw_method = raw_method.strip()
        target = target.strip()

        ssl = target.startswith("https://")
        for scheme in ("http://", "https://"):
            if target.startswith(scheme):
                target = target[len(scheme):]
                break
        host, _, path = target.partition("/")
        path = "/" + path

        headers = HttpHeaders()
        for line in lines:
            if ":" not in line or len(line) <= 1:
                break
            key, _, value = line.partition(":")
            headers[key.strip().lower()] = value.strip()
        if "host" not in headers:
            headers["host"] = host

        body = "".join(lines).encode("utf-8")
        if "content-length" not in headers and body:
            headers["content-length"] = str(len(body))

        return cls(
            method=HttpMethod.from_str(raw_method),
            host=host,
            path=path,
            ssl=ssl,
            headers=headers,
            body=body,
        )

    def text(self) -> str | None:
        """The body decoded as UTF-8, or None if empty or not valid UTF-8."""
        if not self.body:
            return None
        try:
            return bytes(self.body).decode("utf-8")
        except UnicodeDecodeError:
            return None

    def to_wire(self) -> str:
        """Render the request as raw HTTP/1.1 text."""
        path = self.path
        if self.args:
            query = "&".join(f"{key}={value}" for key, value in self.args.items())
            path = f"{path}?{query}"
        if not path:
            path = "/"

        parts = [f"{self.method} {path} HTTP/1.1\r\n"]
        parts.extend(f"{key}: {value}\r\n" for key, value in self.headers.items())
        parts.append("\r\n")
        parts.append(self.text() or "")
        parts.append("\r\n")
        return "".join(parts)

    def copy(self) -> HttpRequest:
        """Return an independent copy."""
        return HttpRequest(
            method=self.method,
            host=self.host,
            path=self.path,
            ssl=self.ssl,
            args=dict(self.args),
            headers=self.headers.copy(),
            body=bytes(self.body),
        )