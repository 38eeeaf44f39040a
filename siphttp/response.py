"""HTTP responses and an incremental response parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto

from siphttp.headers import HttpHeaders
from siphttp.status import HttpError, HttpStatus

_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass
class HttpResponse:
    """A status, header fields and body."""

    status: HttpStatus
    content: bytes = b""
    headers: HttpHeaders = field(default_factory=HttpHeaders)

    def to_bytes(self) -> bytes:
        """The status line and header block, ending with the blank line."""
        header_text = "".join(f"{key}: {value}\r\n" for key, value in self.headers.items())
        head = f"HTTP/1.1 {int(self.status)} {self.status.phrase()}\r\n{header_text}\r\n"
        return head.encode("utf-8")


class ParseState(Enum):
    """Where a response parser is within the message."""

    INIT = auto()
    HEADERS = auto()
    BODY = auto()
    FINISH = auto()


def _parse_unsigned(text: str, limit: int | None = None) -> int | None:
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    if limit is not None and value > limit:
        return None
    return value


class HttpResponseBuilder:
    """Builds an HttpResponse from bytes as they arrive."""

    def __init__(self) -> None:
        self.status = HttpStatus.I_AM_A_TEAPOT
        self.headers = HttpHeaders()
        self.body = bytearray()
        self.state = ParseState.INIT
        self._buffer = bytearray()

    def _take_line(self) -> str | None:
        index = self._buffer.find(b"\r\n")
        if index < 0:
            return None
        line = bytes(self._buffer[:index])
        del self._buffer[: index + 2]
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def append(self, chunk: bytes) -> bool:
        """Feed bytes; return True once the response is complete.

        Raises HttpError on a malformed status line, header or length.
        """
        self._buffer.extend(chunk)

        while self._buffer:
            if self.state is ParseState.INIT:
                line = self._take_line()
                if line is None:
                    return False
                parts = line.split(" ")
                if len(parts) < 3:
                    raise HttpError("Invalid response")
                code = _parse_unsigned(parts[1], limit=0xFFFF)
                if code is None:
                    raise HttpError("Invalid status")
                try:
                    self.status = HttpStatus.from_code(code)
                except HttpError:
                    raise HttpError("Invalid status") from None
                self.state = ParseState.HEADERS
            elif self.state is ParseState.HEADERS:
                line = self._take_line()
                if line is None:
                    return False
                if not line:
                    self.state = ParseState.BODY
                    continue
                key, sep, value = line.partition(":")
                if not sep:
                    raise HttpError("Invalid header")
                self.headers[key.strip().lower()] = value.strip()
            elif self.state is ParseState.BODY:
                self.body.extend(self._buffer)
                self._buffer.clear()
                raw_length = self.headers.get("content-length")
                if raw_length is None:
                    self.state = ParseState.FINISH
                    return True
                length = _parse_unsigned(raw_length)
                if length is None:
                    raise HttpError("invalid content-length")
                if len(self.body) >= length:
                    self.state = ParseState.FINISH
                    return True
                return False
            else:
                return True

        return False

    def get(self) -> HttpResponse | None:
        """The finished response, or None while incomplete."""
        if self.state is not ParseState.FINISH:
            return None
        return HttpResponse(
            status=self.status,
            content=bytes(self.body),
            headers=self.headers.copy(),
        )