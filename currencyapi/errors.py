"""Exceptions raised by the :mod:`currencyapi` client."""

from __future__ import annotations

from typing import Optional


class CurrencyapiError(Exception):
    """Base class for every error raised by :class:`~currencyapi.Currencyapi`."""


class ClientConstructionError(CurrencyapiError):
    """The client could not be built (empty API key or an invalid header)."""


class UrlConstructionError(CurrencyapiError):
    """The request URL could not be built from the base address."""


class RequestError(CurrencyapiError):
    """The HTTP request failed before a response body could be read.

    The underlying :class:`requests.RequestException` is available as
    :attr:`source` and is also chained as ``__cause__``.
    """

    def __init__(self, message: str, *, source: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.source = source


class ResponseParsingError(CurrencyapiError):
    """The response body was not JSON of the expected shape.

    This usually means the API rejected the input (an error payload has no
    ``data`` key) or returned something unexpected.  The raw text is kept in
    :attr:`body` so it can be inspected.
    """

    def __init__(self, body: str, reason: str = "unexpected response body") -> None:
        super().__init__(f"Could not parse currencyapi response: {reason}")
        self.body = body
        self.reason = reason
