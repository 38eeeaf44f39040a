# siphttp

`siphttp` is a small HTTP/1.1 client that you run from the command line. It builds the
request text itself and parses the response itself. It uses only the standard library
(`socket` and `ssl`).

## Installation

```
pip install .
```

## Command-line use

The `sip` command takes a method and a URL. Each argument after those becomes a header
line. Arguments of the form `name=value` are gathered into a JSON object, and that
object is sent as the request body. Every value is written as a JSON string and is not
escaped.

```
sip GET http://example.org/
sip POST http://localhost:8080/items "Accept: application/json" name=tea kind=green
```

Options go before the method, as `-key value` or `--key value` pairs. The only option
the command acts on is `-O <file>`. When the response status is in the 2xx range, it
writes the response body to that file:

```
sip -O page.html GET http://example.org/
```

Every request carries a `User-Agent: Sip/0.1.0` header. The command prints the
following, in order:

- the reason phrase of the status, in quotes
- each response header, as a `- name: value` line
- the body

A body larger than 10 KiB is shown as `<Binary N>` instead. A body that is not valid
UTF-8 is shown as `Error printing body`. If the request cannot be parsed or sent, the
command prints `Error: ...` and exits with status 1.

A URL that starts with `https://`, or a target on port 443, is sent over TLS and checked
against the system's trusted certificates. `localhost` is sent to `127.0.0.1`. The
connection times out after 5 seconds, and each read times out after 20 seconds.

## Library use

```python
from siphttp.request import HttpRequest
from siphttp.client import brew

request = HttpRequest.parse("GET http://example.org/\nAccept: */*\n")
response = brew(request)
print(response.status.phrase(), response.status.is_ok())
print(response.headers.get("content-type"))
print(response.content[:100])
```

Failures raise `siphttp.status.HttpError`, which is a subclass of `ValueError`. This
covers malformed input, unknown status codes, failed name resolution, connection
errors, TLS errors and incomplete responses.

The modules:

- `siphttp.request.HttpRequest`: a dataclass holding the method, host, path, query
  `args`, headers and body.
  - `parse()` reads a request written as text. The first line is the method and URL.
    Header lines follow, up to the first line without a colon. The remaining lines are
    joined into the body.
  - `to_wire()` renders the request as raw HTTP/1.1.
  - `text()` decodes the body as UTF-8.
  - `copy()` returns an independent copy.
- `siphttp.client`:
  - `resolve_target()` returns the IP address, port and TLS flag for a request.
  - `brew()` sends the request and returns the response.
- `siphttp.response`:
  - `HttpResponse` holds the status, headers and content. Its `to_bytes()` gives the
    status line and header block.
  - `HttpResponseBuilder` is an incremental parser. Feed it bytes with `append()`. It
    returns `True` once the response is complete, and `get()` then returns the
    `HttpResponse`. `ParseState` names the stage the parser has reached.
- `siphttp.headers.HttpHeaders`: a mutable mapping whose keys ignore ASCII case. It keeps
  the spelling of each name as first inserted.
- `siphttp.methods.HttpMethod`: the nine standard methods, available as class
  attributes. `HttpMethod.from_str()` upper-cases the text it is given and also accepts
  custom methods. `is_standard()` tells the two kinds apart.
- `siphttp.status.HttpStatus`: an `IntEnum` of known status codes. It has `phrase()`
  and `is_ok()`. `HttpStatus.from_code()` raises `HttpError` for an unknown code.
- `siphttp.cli`:
  - `parse_args()` splits a command line into options and request text.
  - `render_body()` produces the body text that the command shows.
  - `parse_http_file()` reads requests out of the text of a `.http` file. The file may
    define `@name = value` variables, and these replace `{name}` in the requests. Lines
    that start with `#` are comments. A request is taken only when a `###` line follows
    it, and requests that fail to parse are skipped.

## Limitations

- Chunked transfer encoding is not supported. If a response has no `Content-Length`,
  it is treated as complete as soon as the first body bytes arrive.
- Redirects are not followed.
- Bodies are shown as plain text. HTML and JSON are not reformatted.
- The `sip` command does not read `.http` files. `parse_http_file()` is available only
  as a function.

## Running the tests

```
pip install .[test]
pytest
```