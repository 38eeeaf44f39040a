"""A case-insensitive mapping of HTTP header fields."""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(key: str) -> str:
    if not isinstance(key, str):
        raise TypeError(f"header names must be str, not {type(key).__name__}")
    return key.translate(_ASCII_LOWER)


class HttpHeaders(MutableMapping):
    """Header fields keyed by name, compared ignoring ASCII case.

    Replacing a field keeps the spelling of the name first inserted.
    """

    def __init__(self, *args: Any, **kwargs: str) -> None:
        self._fields: dict[str, tuple[str, str]] = {}
        self.update(*args, **kwargs)

    def __getitem__(self, key: str) -> str:
        return self._fields[_fold(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = _fold(key)
        existing = self._fields.get(folded)
        name = existing[0] if existing is not None else key
        self._fields[folded] = (name, str(value))

    def __delitem__(self, key: str) -> None:
        del self._fields[_fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._fields

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HttpHeaders):
            other_headers = other
        elif isinstance(other, Mapping):
            try:
                other_headers = HttpHeaders(other)
            except TypeError:
                return False
        else:
            return NotImplemented
        return {k: v for k, (_, v) in self._fields.items()} == {
            k: v for k, (_, v) in other_headers._fields.items()
        }

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> HttpHeaders:
        """Return an independent copy."""
        return HttpHeaders(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"