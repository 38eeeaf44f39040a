"""HTTP request methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_STANDARD = frozenset(
    {"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "TRACE", "CONNECT"}
)


@dataclass(frozen=True)
class HttpMethod:
    """An HTTP method; standard verbs are available as class attributes."""

    name: str

    GET: ClassVar[HttpMethod]
    POST: ClassVar[HttpMethod]
    PUT: ClassVar[HttpMethod]
    DELETE: ClassVar[HttpMethod]
    PATCH: ClassVar[HttpMethod]
    HEAD: ClassVar[HttpMethod]
    OPTIONS: ClassVar[HttpMethod]
    TRACE: ClassVar[HttpMethod]
    CONNECT: ClassVar[HttpMethod]

    @classmethod
    def from_str(cls, method: str) -> HttpMethod:
        """Build a method from text, upper-casing it."""
        return cls(method.upper())

    def is_standard(self) -> bool:
        """True for the nine standard HTTP/1.1 methods."""
        return self.name in _STANDARD

    def __str__(self) -> str:
        return self.name


for _verb in sorted(_STANDARD):
    setattr(HttpMethod, _verb, HttpMethod(_verb))
del _verb