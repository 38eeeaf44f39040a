import pytest

from siphttp.headers import HttpHeaders
from siphttp.methods import HttpMethod
from siphttp.request import HttpRequest
from siphttp.status import HttpError


def test_http_request_new():
    request = HttpRequest(HttpMethod.GET, "localhost", "/example")
    assert request.method == HttpMethod.GET
    assert request.path == "/example"
    assert len(request.args) == 0
    assert len(request.headers) == 0
    assert request.text() is None


def test_http_request_arg():
    request = HttpRequest(HttpMethod.POST, "localhost", "/submit")
    request.args["key"] = "value"
    assert request.args.get("key") == "value"


def test_http_request_header():
    request = HttpRequest(HttpMethod.GET, "localhost", "/data")
    request.headers["Content-Type"] = "application/json"
    assert request.headers.get("Content-Type") == "application/json"


def test_http_request_to_wire():
    request = HttpRequest(HttpMethod.POST, "localhost", "/resource")
    request.headers["Content-Type"] = "application/json"
    wire = request.to_wire()
    assert "POST /resource HTTP/1.1" in wire
    assert "Content-Type: application/json" in wire


def test_to_wire_with_args_and_body():
    request = HttpRequest(HttpMethod.POST, "localhost", "/resource")
    request.headers["Content-Type"] = "application/json"
    request.args["key"] = "value"
    request.body = b'{"data":"test"}'
    wire = request.to_wire()
    assert wire.startswith("POST /resource?key=value HTTP/1.1\r\n")
    assert "Content-Type: application/json\r\n" in wire
    assert wire.endswith('\r\n\r\n{"data":"test"}\r\n')


def test_to_wire_multiple_args_joined():
    request = HttpRequest(HttpMethod.GET, "localhost", "/q")
    request.args["a"] = "1"
    request.args["b"] = "2"
    first_line = request.to_wire().split("\r\n")[0]
    assert first_line == "GET /q?a=1&b=2 HTTP/1.1"


def test_to_wire_empty_path_becomes_root():
    request = HttpRequest(HttpMethod.GET, "localhost", "")
    assert request.to_wire() == "GET / HTTP/1.1\r\n\r\n\r\n"


def test_to_wire_omits_non_utf8_body():
    request = HttpRequest(HttpMethod.PUT, "localhost", "/bin", body=b"\xff\xfe")
    assert request.text() is None
    assert request.to_wire().endswith("\r\n\r\n\r\n")


def test_text_decodes_body():
    request = HttpRequest(HttpMethod.POST, "localhost", "/", body="héllo".encode())
    assert request.text() == "héllo"


def test_parse_full_request():
    request = HttpRequest.parse(
        "GET http://example.com/path/to\nAccept: */*\nX-Custom:  value \n\nbody"
    )
    assert request.method == HttpMethod.GET
    assert request.host == "example.com"
    assert request.path == "/path/to"
    assert request.ssl is False
    assert request.headers["accept"] == "*/*"
    assert request.headers["X-Custom"] == "value"
    assert request.headers["host"] == "example.com"
    assert request.headers["content-length"] == "4"
    assert request.body == b"body"


def test_parse_https_sets_ssl():
    request = HttpRequest.parse("GET https://example.com/")
    assert request.ssl is True
    assert request.host == "example.com"
    assert request.path == "/"


def test_parse_without_path():
    request = HttpRequest.parse("GET example.com:8080")
    assert request.host == "example.com:8080"
    assert request.path == "/"
    assert "content-length" not in request.headers
    assert request.body == b""


def test_parse_method_is_uppercased():
    request = HttpRequest.parse("post localhost/submit")
    assert request.method == HttpMethod.POST


def test_parse_body_lines_are_joined():
    request = HttpRequest.parse("POST localhost/x\n\nfirst\nsecond")
    assert request.body == b"firstsecond"
    assert request.headers["content-length"] == "11"


def test_parse_keeps_explicit_host_and_length():
    request = HttpRequest.parse(
        "POST localhost/x\nHost: other\nContent-Length: 99\n\nabc"
    )
    assert request.headers["host"] == "other"
    assert request.headers["content-length"] == "99"


def test_parse_without_space_fails():
    with pytest.raises(HttpError):
        HttpRequest.parse("GET")


def test_copy_is_independent():
    request = HttpRequest(
        HttpMethod.GET, "localhost", "/", headers=HttpHeaders({"A": "1"})
    )
    clone = request.copy()
    assert clone == request
    clone.headers["A"] = "2"
    clone.args["k"] = "v"
    assert request.headers["A"] == "1"
    assert request.args == {}