"""Market hours."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .codec import DATE, ISO_DATETIME, Model, jfield


class MarketType(str, Enum):
    """Kind of market."""

    BOND = "BOND"
    EQUITY = "EQUITY"
    ETF = "ETF"
    EXTENDED = "EXTENDED"
    FOREX = "FOREX"
    FUTURE = "FUTURE"
    FUTURE_OPTION = "FUTURE_OPTION"
    FUNDAMENTAL = "FUNDAMENTAL"
    INDEX = "INDEX"
    INDICATOR = "INDICATOR"
    MUTUAL_FUND = "MUTUAL_FUND"
    OPTION = "OPTION"
    UNKNOWN = "UNKNOWN"


@dataclass(kw_only=True)
class Interval(Model):
    """A trading session window."""

    start: dt.datetime = jfield(codec=ISO_DATETIME)
    end: dt.datetime = jfield(codec=ISO_DATETIME)


@dataclass(kw_only=True)
class Hours(Model):
    """Opening hours of one market product on one day."""

    date: dt.date = jfield(codec=DATE)
    market_type: MarketType = jfield(codec=MarketType)
    exchange: str | None = jfield(codec=str, omit_none=True, default=None)
    category: str | None = jfield(codec=str, omit_none=True, default=None)
    product: str = jfield(codec=str)
    product_name: str | None = jfield(codec=str, omit_none=True, default=None)
    is_open: bool = jfield(codec=bool)
    session_hours: dict[str, list[Interval]] | None = jfield(
        codec={str: [Interval]}, omit_none=True, default=None
    )


_MARKETS = Hours  # keeps the nested codec definition next to its users


def _markets_codec():
    from .codec import Codec  # local to avoid a public helper

    def decode_inner(value: Any) -> dict[str, Hours]:
        from .errors import DecodeError

        if not isinstance(value, dict):
            raise DecodeError(f"expected object, got {value!r}")
        return {product: Hours.from_dict(hours) for product, hours in value.items()}

    return Codec(
        decode_inner,
        lambda mapping: {product: hours.to_dict() for product, hours in mapping.items()},
        "markets",
    )


def parse_markets(data: Any) -> dict[str, dict[str, Hours]]:
    """Decode a market-name -> product -> hours mapping."""
    from .errors import DecodeError

    if not isinstance(data, dict):
        raise DecodeError(f"expected object, got {type(data).__name__}")
    inner = _markets_codec()
    return {market: inner.decode(products) for market, products in data.items()}


def dump_markets(markets: dict[str, dict[str, Hours]]) -> dict[str, Any]:
    """Encode a market-name -> product -> hours mapping as JSON data."""
    inner = _markets_codec()
    return {market: inner.encode(products) for market, products in markets.items()}