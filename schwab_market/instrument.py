"""Instrument search results and their fundamentals."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .codec import FLOAT, INT, Codec, Model, jfield
from .errors import DecodeError

_FUNDAMENTAL_DATE_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?$"
)


def parse_fundamental_date(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS[.fff]`` timestamp into a naive datetime."""
    if not isinstance(text, str):
        raise DecodeError(f"expected a date string, got {text!r}")
    match = _FUNDAMENTAL_DATE_RE.match(text)
    if match is None:
        raise DecodeError(f"invalid date: {text!r}")
    year, month, day, hour, minute, second, fraction = match.groups()
    micros = int((fraction or "")[:6].ljust(6, "0"))
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second), micros
        )
    except ValueError as exc:
        raise DecodeError(f"invalid date: {text!r}") from exc


def format_fundamental_date(value: datetime) -> str:
    """Format a naive datetime as ``YYYY-MM-DD HH:MM:SS`` plus any fraction."""
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond == 0:
        return text
    if value.microsecond % 1000 == 0:
        return f"{text}.{value.microsecond // 1000:03d}"
    return f"{text}.{value.microsecond:06d}"


FUNDAMENTAL_DATE = Codec(parse_fundamental_date, format_fundamental_date, "fundamental_date")


class InstrumentAssetType(str, Enum):
    """Asset class of an instrument."""

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


def _date_field():
    return jfield(codec=FUNDAMENTAL_DATE, omit_none=True, default=None)


_DATE_KEYS = (
    "dividendDate",
    "dividendPayDate",
    "declarationDate",
    "corpactionDate",
    "nextDividendPayDate",
    "nextDividendDate",
)


@dataclass(kw_only=True)
class FundamentalInst(Model):
    """Fundamental data of an instrument."""

    symbol: str = jfield(codec=str)
    high52: float = jfield(codec=FLOAT)
    low52: float = jfield(codec=FLOAT)
    dividend_amount: float = jfield(codec=FLOAT)
    dividend_yield: float = jfield(codec=FLOAT)
    dividend_date: datetime | None = _date_field()
    pe_ratio: float = jfield(codec=FLOAT)
    peg_ratio: float = jfield(codec=FLOAT)
    pb_ratio: float = jfield(codec=FLOAT)
    pr_ratio: float = jfield(codec=FLOAT)
    pcf_ratio: float = jfield(codec=FLOAT)
    gross_margin_ttm: float = jfield(key="grossMarginTTM", codec=FLOAT)
    gross_margin_mrq: float = jfield(key="grossMarginMRQ", codec=FLOAT)
    net_profit_margin_ttm: float = jfield(key="netProfitMarginTTM", codec=FLOAT)
    net_profit_margin_mrq: float = jfield(key="netProfitMarginMRQ", codec=FLOAT)
    operating_margin_ttm: float = jfield(key="operatingMarginTTM", codec=FLOAT)
    operating_margin_mrq: float = jfield(key="operatingMarginMRQ", codec=FLOAT)
    return_on_equity: float = jfield(codec=FLOAT)
    return_on_assets: float = jfield(codec=FLOAT)
    return_on_investment: float = jfield(codec=FLOAT)
    quick_ratio: float = jfield(codec=FLOAT)
    current_ratio: float = jfield(codec=FLOAT)
    interest_coverage: float = jfield(codec=FLOAT)
    total_debt_to_capital: float = jfield(codec=FLOAT)
    lt_debt_to_equity: float = jfield(codec=FLOAT)
    total_debt_to_equity: float = jfield(codec=FLOAT)
    eps_ttm: float = jfield(key="epsTTM", codec=FLOAT)
    eps_change_percent_ttm: float = jfield(key="epsChangePercentTTM", codec=FLOAT)
    eps_change_year: float = jfield(codec=FLOAT)
    eps_change: float = jfield(codec=FLOAT)
    rev_change_year: float = jfield(codec=FLOAT)
    rev_change_ttm: float = jfield(key="revChangeTTM", codec=FLOAT)
    rev_change_in: float = jfield(codec=FLOAT)
    shares_outstanding: float = jfield(codec=FLOAT)
    market_cap_float: float = jfield(codec=FLOAT)
    market_cap: float = jfield(codec=FLOAT)
    book_value_per_share: float = jfield(codec=FLOAT)
    short_int_to_float: float = jfield(codec=FLOAT)
    short_int_day_to_cover: float = jfield(codec=FLOAT)
    div_growth_rate3_year: float = jfield(codec=FLOAT)
    dividend_pay_amount: float = jfield(codec=FLOAT)
    dividend_pay_date: datetime | None = _date_field()
    beta: float = jfield(codec=FLOAT)
    vol1_day_avg: float = jfield(codec=FLOAT)
    vol10_day_avg: float = jfield(codec=FLOAT)
    vol3_month_avg: float = jfield(codec=FLOAT)
    avg10_days_volume: float = jfield(codec=FLOAT)
    avg1_day_volume: float = jfield(codec=FLOAT)
    avg3_month_volume: float = jfield(codec=FLOAT)
    declaration_date: datetime | None = _date_field()
    dividend_freq: int = jfield(codec=INT)
    eps: float = jfield(codec=FLOAT)
    corpaction_date: datetime | None = _date_field()
    dtn_volume: float = jfield(codec=FLOAT)
    next_dividend_pay_date: datetime | None = _date_field()
    next_dividend_date: datetime | None = _date_field()
    fund_leverage_factor: float = jfield(codec=FLOAT)
    fund_strategy: str | None = jfield(codec=str, omit_none=True, default=None)

    @classmethod
    def from_dict(cls, data: Any) -> FundamentalInst:
        # Date fields may be absent, but an explicit null is not a date.
        if isinstance(data, dict):
            for key in _DATE_KEYS:
                if key in data and data[key] is None:
                    raise DecodeError(f"{cls.__name__}.{key}: expected a date string, got null")
        return super().from_dict(data)


@dataclass(kw_only=True)
class Instrument(Model):
    """Basic description of an instrument."""

    cusip: str = jfield(codec=str)
    symbol: str = jfield(codec=str)
    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    asset_type: InstrumentAssetType = jfield(codec=InstrumentAssetType)
    type_: InstrumentAssetType | None = jfield(
        key="type", codec=InstrumentAssetType, default=None
    )


@dataclass(kw_only=True)
class Bond(Model):
    """Description of a bond instrument."""

    cusip: str = jfield(codec=str)
    symbol: str = jfield(codec=str)
    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    asset_type: InstrumentAssetType = jfield(codec=InstrumentAssetType)
    bond_factor: str = jfield(codec=str)
    bond_multiplier: str = jfield(codec=str)
    bond_price: float = jfield(codec=FLOAT)
    type_: InstrumentAssetType | None = jfield(
        key="type", codec=InstrumentAssetType, default=None
    )


@dataclass(kw_only=True)
class InstrumentResponse(Model):
    """An instrument found by a search, with optional detail."""

    cusip: str = jfield(codec=str)
    symbol: str = jfield(codec=str)
    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    asset_type: InstrumentAssetType = jfield(codec=InstrumentAssetType)
    bond_factor: str | None = jfield(codec=str, omit_none=True, default=None)
    bond_multiplier: str | None = jfield(codec=str, omit_none=True, default=None)
    bond_price: float | None = jfield(codec=FLOAT, omit_none=True, default=None)
    fundamental: FundamentalInst | None = jfield(
        codec=FundamentalInst, omit_none=True, default=None
    )
    instrument_info: Instrument | None = jfield(
        codec=Instrument, omit_none=True, default=None
    )
    bond_instrument_info: Bond | None = jfield(codec=Bond, omit_none=True, default=None)
    type_: InstrumentAssetType | None = jfield(
        key="type", codec=InstrumentAssetType, omit_none=True, default=None
    )


@dataclass(kw_only=True)
class Instruments(Model):
    """Result of an instrument search."""

    instruments: list[InstrumentResponse] = jfield(codec=[InstrumentResponse])