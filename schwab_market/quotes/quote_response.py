"""Quotes of any asset class, tagged by their main asset type."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ..errors import DecodeError
from .equity import EquityResponse
from .forex import ForexResponse
from .future import FutureResponse
from .future_option import FutureOptionResponse
from .index import IndexResponse
from .mutual_fund import MutualFundResponse
from .option import OptionResponse
from .quote_error import QuoteError

_TAG = "assetMainType"


class AssetMainType(str, Enum):
    """Main asset type that selects the shape of a quote."""

    BOND = "BOND"
    EQUITY = "EQUITY"
    FOREX = "FOREX"
    FUTURE = "FUTURE"
    FUTURE_OPTION = "FUTURE_OPTION"
    INDEX = "INDEX"
    MUTUAL_FUND = "MUTUAL_FUND"
    OPTION = "OPTION"


Payload = Union[
    EquityResponse,
    ForexResponse,
    FutureResponse,
    FutureOptionResponse,
    IndexResponse,
    MutualFundResponse,
    OptionResponse,
]

_PAYLOADS: dict[AssetMainType, type] = {
    AssetMainType.EQUITY: EquityResponse,
    AssetMainType.FOREX: ForexResponse,
    AssetMainType.FUTURE: FutureResponse,
    AssetMainType.FUTURE_OPTION: FutureOptionResponse,
    AssetMainType.INDEX: IndexResponse,
    AssetMainType.MUTUAL_FUND: MutualFundResponse,
    AssetMainType.OPTION: OptionResponse,
}

_A = AssetMainType
_WEEK52 = frozenset({_A.EQUITY, _A.FOREX, _A.INDEX, _A.MUTUAL_FUND})
_BOOK = frozenset({_A.EQUITY, _A.FOREX, _A.FUTURE, _A.FUTURE_OPTION, _A.OPTION})
_BOOK_TIME = frozenset({_A.EQUITY, _A.FUTURE})
_TRADED = frozenset(_PAYLOADS) - {_A.MUTUAL_FUND}
_QUOTED = _BOOK
_ALL = frozenset(_PAYLOADS)


@dataclass
class QuoteResponse:
    """A quote together with the asset type that determines its shape."""

    asset_main_type: AssetMainType
    payload: Payload

    def __post_init__(self) -> None:
        expected = _PAYLOADS.get(self.asset_main_type)
        if expected is None:
            raise ValueError(f"{self.asset_main_type.value} quotes are not supported")
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.asset_main_type.value} quote needs a {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    @classmethod
    def from_dict(cls, data: Any) -> QuoteResponse:
        if not isinstance(data, dict):
            raise DecodeError(f"QuoteResponse: expected object, got {type(data).__name__}")
        if _TAG not in data:
            raise DecodeError(f"QuoteResponse: missing field {_TAG}")
        tag = data[_TAG]
        try:
            kind = AssetMainType(tag)
        except ValueError as exc:
            raise DecodeError(f"QuoteResponse: unknown {_TAG} {tag!r}") from exc
        payload_cls = _PAYLOADS.get(kind)
        if payload_cls is None:
            raise DecodeError(f"QuoteResponse: {kind.value} quotes cannot be decoded")
        return cls(kind, payload_cls.from_dict(data))

    def to_dict(self) -> dict[str, Any]:
        return {_TAG: self.asset_main_type.value, **self.payload.to_dict()}

    def _quote(self, name: str, kinds: frozenset[AssetMainType]) -> Any:
        if self.asset_main_type in kinds:
            return getattr(self.payload.quote, name)
        return None

    def symbol(self) -> str:
        """Symbol of the quoted security."""
        return self.payload.symbol

    def n52week_high(self) -> float | None:
        """Highest price of the past 52 weeks."""
        return self._quote("n52week_high", _WEEK52)

    def n52week_low(self) -> float | None:
        """Lowest price of the past 52 weeks."""
        return self._quote("n52week_low", _WEEK52)

    def ask_price(self) -> float | None:
        """Current best ask price."""
        return self._quote("ask_price", _BOOK)

    def ask_size(self) -> int | None:
        """Number of shares for ask."""
        return self._quote("ask_size", _BOOK)

    def ask_time(self) -> dt.datetime | None:
        """Time of the last ask."""
        return self._quote("ask_time", _BOOK_TIME)

    def bid_price(self) -> float | None:
        """Current best bid price."""
        return self._quote("bid_price", _BOOK)

    def bid_size(self) -> int | None:
        """Number of shares for bid."""
        return self._quote("bid_size", _BOOK)

    def bid_time(self) -> dt.datetime | None:
        """Time of the last bid."""
        return self._quote("bid_time", _BOOK_TIME)

    def close_price(self) -> float:
        """Previous day's closing price."""
        return self._quote("close_price", _ALL)

    def high_price(self) -> float | None:
        """Day's high trade price."""
        return self._quote("high_price", _TRADED)

    def last_price(self) -> float | None:
        """Latest traded price."""
        return self._quote("last_price", _TRADED)

    def last_size(self) -> int | None:
        """Number of shares traded with the last trade."""
        return self._quote("last_size", _BOOK)

    def low_price(self) -> float | None:
        """Day's low trade price."""
        return self._quote("low_price", _TRADED)

    def net_change(self) -> float:
        """Difference between the last price and the previous close."""
        return self._quote("net_change", _ALL)

    def open_price(self) -> float | None:
        """Day's open trade price."""
        return self._quote("open_price", _TRADED)

    def quote_time(self) -> dt.datetime | None:
        """Time of the latest quote."""
        return self._quote("quote_time", _QUOTED)

    def trade_time(self) -> dt.datetime:
        """Time of the last trade."""
        return self._quote("trade_time", _ALL)

    def total_volume(self) -> int | None:
        """Total volume of the day including pre and post market."""
        return self._quote("total_volume", _ALL)


@dataclass
class QuoteResponseMap:
    """Quotes keyed by symbol, with any partial errors of the request."""

    responses: dict[str, QuoteResponse] = field(default_factory=dict)
    errors: QuoteError | None = None

    @classmethod
    def from_dict(cls, data: Any) -> QuoteResponseMap:
        if not isinstance(data, dict):
            raise DecodeError(f"QuoteResponseMap: expected object, got {type(data).__name__}")
        responses: dict[str, QuoteResponse] = {}
        errors: QuoteError | None = None
        for key, value in data.items():
            if key == "errors":
                if value is not None:
                    errors = QuoteError.from_dict(value)
            else:
                responses[key] = QuoteResponse.from_dict(value)
        return cls(responses=responses, errors=errors)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            symbol: response.to_dict() for symbol, response in self.responses.items()
        }
        if self.errors is not None:
            out["errors"] = self.errors.to_dict()
        return out