"""
Error types raised by the client.

Transport failures (requests.RequestException, aiohttp.ClientError) are not
wrapped; they reach the caller as raised by the HTTP library.
"""

from __future__ import annotations

from http import HTTPStatus


class F3ClientError(Exception):
    """Base error for client failures."""


class F3HTTPError(F3ClientError):
    """
    Raised when the server answers with a status outside 200-299.
    """

    def __init__(self, code: int, text: str | None = None, body: str | None = None) -> None:
        self.code = code
        self.text = text or status_text(code)
        self.body = body
        super().__init__(f"HTTP Error: {self.code}, {self.text}")


class PayloadDecodeError(F3ClientError, ValueError):
    """Raised when a response body does not decode into the expected envelope."""


def status_text(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def check_status(code: int, text: str | None = None, body: str | None = None) -> None:
    """
    Raise F3HTTPError unless `code` is a 2xx status.
    """

    if not 200 <= code < 300:
        raise F3HTTPError(code, text, body)
