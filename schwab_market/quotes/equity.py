"""Quote of an equity, and the quote parts shared by other securities."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from ..codec import FLOAT, INT, ISO_DATETIME, MILLIS, UINT, Codec, Model, jfield
from ..errors import DecodeError


def _ranged_int(low: int, high: int, name: str) -> Codec:
    """A codec for integers limited to ``low..=high``."""

    def decode(value: Any) -> int:
        number = INT.decode(value)
        if not low <= number <= high:
            raise DecodeError(f"expected integer in {low}..={high}, got {value!r}")
        return number

    return Codec(decode, int, name)


I32 = _ranged_int(-(2**31), 2**31 - 1, "i32")


def _opt(codec):
    """A field that may be absent and is left out when empty."""
    return jfield(codec=codec, omit_none=True, default=None)


class EquityAssetSubType(str, Enum):
    """Sub type of an equity, where applicable."""

    COE = "COE"
    PRF = "PRF"
    ADR = "ADR"
    GDR = "GDR"
    CEF = "CEF"
    ETF = "ETF"
    ETN = "ETN"
    UIT = "UIT"
    WAR = "WAR"
    RGT = "RGT"


class QuoteType(str, Enum):
    """NBBO for realtime, NFL for a non-fee liable quote."""

    NBBO = "NBBO"
    NFL = "NFL"


class DivFrequency(IntEnum):
    """Dividend payments per year."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    SIX = 6
    ELEVEN = 11
    TWELVE = 12


class FundStrategy(str, Enum):
    """Strategy of a fund."""

    ACTIVE = "A"
    LEVERAGED = "L"
    PASSIVE = "P"
    QUANTITATIVE = "Q"
    SHORT = "S"


@dataclass(kw_only=True)
class _Trade(Model):
    """Last trade and the day's volume."""

    last_price: float = jfield(codec=FLOAT)
    total_volume: int = jfield(codec=UINT)
    trade_time: dt.datetime = jfield(codec=MILLIS)


@dataclass(kw_only=True)
class _Book(_Trade):
    """Best bid and ask alongside the last trade."""

    ask_price: float = jfield(codec=FLOAT)
    ask_size: int = jfield(codec=INT)
    bid_price: float = jfield(codec=FLOAT)
    bid_size: int = jfield(codec=INT)
    last_size: int = jfield(codec=INT)
    mark: float = jfield(codec=FLOAT)
    quote_time: dt.datetime = jfield(codec=MILLIS)


@dataclass(kw_only=True)
class _DayRange(Model):
    """Open, high, low and close of the day."""

    close_price: float = jfield(codec=FLOAT)
    high_price: float = jfield(codec=FLOAT)
    low_price: float = jfield(codec=FLOAT)
    open_price: float = jfield(codec=FLOAT)
    net_change: float = jfield(codec=FLOAT)


@dataclass(kw_only=True)
class _SessionQuote(_DayRange, _Trade):
    """Day range, last trade and trading status."""

    security_status: str = jfield(codec=str)


@dataclass(kw_only=True)
class _YearRange(Model):
    """52-week range and the day's percentage change."""

    n52week_high: float = jfield(key="52WeekHigh", codec=FLOAT)
    n52week_low: float = jfield(key="52WeekLow", codec=FLOAT)
    net_percent_change: float = jfield(codec=FLOAT)


@dataclass(kw_only=True)
class _Security(Model):
    """Identity of a quoted security."""

    ssid: int = jfield(codec=INT)
    symbol: str = jfield(codec=str)
    realtime: bool = jfield(codec=bool)


@dataclass(kw_only=True)
class _Listing(Model):
    """Description and exchange of a security."""

    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    exchange_name: str = jfield(codec=str)


@dataclass(kw_only=True)
class ExtendedMarket(_Book):
    """Quote data for extended hours."""


@dataclass(kw_only=True)
class Fundamental(Model):
    """Fundamentals of a security."""

    avg_10_days_volume: float = jfield(codec=FLOAT)
    avg_1_year_volume: float = jfield(codec=FLOAT)
    declaration_date: dt.datetime | None = _opt(ISO_DATETIME)
    div_amount: float = jfield(codec=FLOAT)
    div_ex_date: dt.datetime | None = _opt(ISO_DATETIME)
    div_freq: DivFrequency = jfield(codec=DivFrequency)
    div_pay_amount: float = jfield(codec=FLOAT)
    div_pay_date: dt.datetime | None = _opt(ISO_DATETIME)
    div_yield: float = jfield(codec=FLOAT)
    eps: float = jfield(codec=FLOAT)
    fund_leverage_factor: float = jfield(codec=FLOAT)
    fund_strategy: FundStrategy | None = _opt(FundStrategy)
    next_div_ex_date: dt.datetime | None = _opt(ISO_DATETIME)
    next_div_pay_date: dt.datetime | None = _opt(ISO_DATETIME)
    pe_ratio: float = jfield(codec=FLOAT)
    last_earnings_date: dt.datetime | None = _opt(ISO_DATETIME)


@dataclass(kw_only=True)
class QuoteEquity(_YearRange, _SessionQuote, _Book):
    """Quote data of an equity."""

    ask_micid: str | None = jfield(key="askMICId", codec=str, omit_none=True, default=None)
    ask_time: dt.datetime = jfield(codec=MILLIS)
    bid_micid: str | None = jfield(key="bidMICId", codec=str, omit_none=True, default=None)
    bid_time: dt.datetime = jfield(codec=MILLIS)
    last_micid: str | None = jfield(key="lastMICId", codec=str, omit_none=True, default=None)
    mark_change: float | None = _opt(FLOAT)
    mark_percent_change: float | None = _opt(FLOAT)
    net_percent_change: float | None = _opt(FLOAT)
    volatility: float | None = _opt(FLOAT)
    post_market_change: float | None = _opt(FLOAT)
    post_market_percent_change: float | None = _opt(FLOAT)


@dataclass(kw_only=True)
class ReferenceEquity(_Listing):
    """Reference data of an equity."""

    cusip: str = jfield(codec=str)
    fsi_desc: str | None = _opt(str)
    htb_quantity: int | None = _opt(I32)
    htb_rate: float | None = _opt(FLOAT)
    is_hard_to_borrow: bool | None = _opt(bool)
    is_shortable: bool | None = _opt(bool)
    otc_market_tier: str | None = _opt(str)


@dataclass(kw_only=True)
class RegularMarket(Model):
    """Regular session market data."""

    last_price: float = jfield(key="regularMarketLastPrice", codec=FLOAT)
    last_size: int = jfield(key="regularMarketLastSize", codec=INT)
    net_change: float = jfield(key="regularMarketNetChange", codec=FLOAT)
    percent_change: float | None = jfield(
        key="regularMarketPercentChange", codec=FLOAT, default=None
    )
    trade_time: dt.datetime = jfield(key="regularMarketTradeTime", codec=MILLIS)


@dataclass(kw_only=True)
class EquityResponse(_Security):
    """Quote info of an equity."""

    asset_sub_type: EquityAssetSubType | None = _opt(EquityAssetSubType)
    quote_type: QuoteType = jfield(codec=QuoteType)
    extended: ExtendedMarket | None = _opt(ExtendedMarket)
    fundamental: Fundamental | None = _opt(Fundamental)
    quote: QuoteEquity = jfield(codec=QuoteEquity)
    reference: ReferenceEquity = jfield(codec=ReferenceEquity)
    regular: RegularMarket | None = _opt(RegularMarket)