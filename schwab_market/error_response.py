"""Error payload returned by the market data service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .codec import Model, jfield


class StatusCode(IntEnum):
    """HTTP status codes the service reports in error payloads."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


@dataclass(kw_only=True)
class ErrorSource(Model):
    """What in the request triggered an error."""

    pointer: list[str] | None = jfield(codec=[str], default=None)
    parameter: str | None = jfield(codec=str, default=None)
    header: str | None = jfield(codec=str, default=None)


@dataclass(kw_only=True)
class ApiError(Model):
    """A single error entry."""

    id: str = jfield(codec=str)
    status: StatusCode = jfield(codec=StatusCode)
    title: str = jfield(codec=str)
    detail: str | None = jfield(codec=str, default=None)
    source: ErrorSource | None = jfield(codec=ErrorSource, default=None)


@dataclass(kw_only=True)
class ErrorResponse(Model):
    """A list of errors returned for a failed request."""

    errors: list[ApiError] = jfield(codec=[ApiError])