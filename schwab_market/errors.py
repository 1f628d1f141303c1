"""Exceptions raised by the package."""

from __future__ import annotations

from typing import Any


class SchwabError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(SchwabError, ValueError):
    """Raised when JSON data does not have the expected shape."""


class ResponseError(SchwabError):
    """Raised when the service answers with an error response."""

    def __init__(self, response: Any) -> None:
        super().__init__(f"ErrorResponse: {response!r}")
        self.response = response


class QuoteRequestError(SchwabError):
    """Raised when a quote request reports invalid symbols, CUSIPs or SSIDs."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"QuoteError: {error!r}")
        self.error = error