"""Command-line interface: build a request from arguments, send it and show the reply."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from siphttp.client import brew
from siphttp.request import HttpRequest
from siphttp.response import HttpResponse
from siphttp.status import HttpError

VERSION = "0.1.0"
BINARY_THRESHOLD = 10 * 1024
UNPRINTABLE_BODY = "Error printing body"


@dataclass
class CommandLine:
    """Options given as flags, and the request text built from the rest."""

    options: dict[str, str] = field(default_factory=dict)
    request: str = ""


def parse_http_file(content: str) -> list[tuple[str, HttpRequest]]:
    """Parse a file of requests separated by ``###`` lines.

    Lines starting with ``@name = value`` define variables that replace
    ``{name}`` in the requests; other lines starting with ``#`` are comments.
    A request is only taken once a ``###`` line follows it, and requests that
    fail to parse are skipped.
    """
    requests: list[tuple[str, HttpRequest]] = []
    variables: dict[str, str] = {}
    pending: list[str] = []

    for line in content.split("\n"):
        if line.startswith("###") and pending:
            raw = "".join(pending)
            for name, value in variables.items():
                raw = raw.replace("{" + name + "}", value)
            try:
                requests.append(("", HttpRequest.parse(raw)))
            except HttpError:
                pass
            pending = []
            continue
        if line.startswith("#"):
            continue
        if line.startswith("@"):
            name, sep, value = line[1:].partition("=")
            if not sep:
                raise HttpError(f"Invalid variable definition: {line!r}")
            variables[name.strip()] = value.strip()
            continue
        pending.append(line + "\n")

    return requests


def parse_args(argv: Sequence[str]) -> CommandLine:
    """Split arguments into flag options and the request text.

    Leading ``-key value`` pairs become options. The first remaining argument
    and the next form the request line; later arguments become header lines,
    except ``name=value`` ones, which are gathered into a JSON object body.
    """
    args = list(argv)
    options: dict[str, str] = {}
    key = ""
    consumed = 0
    for arg in args:
        if arg.startswith("-"):
            key = arg[1:]
            if key.startswith("-"):
                key = key[1:]
            consumed += 1
        elif key:
            options[key] = arg
            key = ""
            consumed += 1
        else:
            break

    request = ""
    fields: list[str] = []
    for arg in args[consumed:]:
        started = bool(request)
        if started and "=" in arg:
            name, _, value = arg.partition("=")
            fields.append(f'"{name}":"{value}"')
            continue
        request += arg
        request += "\n" if started else " "

    if fields:
        request += "\r\n{" + ",".join(fields) + "}"

    return CommandLine(options=options, request=request)


def render_body(response: HttpResponse) -> str:
    """Text to show for a response body."""
    content = response.content
    if len(content) > BINARY_THRESHOLD:
        return f"<Binary {len(content)}>"
    try:
        return bytes(content).decode("utf-8")
    except UnicodeDecodeError:
        return UNPRINTABLE_BODY


def main(argv: Sequence[str] | None = None) -> int:
    """Send the request described by the arguments and print the response."""
    command = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        request = HttpRequest.parse(command.request)
    except HttpError as exc:
        print(f"Error: {exc}")
        return 1
    request.headers["User-Agent"] = f"Sip/{VERSION}"

    try:
        response = brew(request)
    except HttpError as exc:
        print(f"Error: {exc}")
        return 1

    print(f'"{response.status.phrase()}"')
    for name, value in response.headers.items():
        print(f"- {name}: {value}")
    print("\n")
    print(render_body(response))

    output = command.options.get("O")
    if response.status.is_ok() and output is not None:
        Path(output).write_bytes(response.content)
    return 0


if __name__ == "__main__":
    sys.exit(main())