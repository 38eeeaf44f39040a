"""A small HTTP/1.1 client with its own request and response parsing, and the sip command."""

__version__ = "0.1.0"