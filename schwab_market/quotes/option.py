"""Quote of an option contract."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum

from ..codec import FLOAT, INT, MILLIS, Model, jfield
from .equity import (
    _Book,
    _Listing,
    _opt,
    _ranged_int,
    _Security,
    _SessionQuote,
    _YearRange,
)

U8 = _ranged_int(0, 255, "u8")


class ContractType(str, Enum):
    """Call or put."""

    PUT = "P"
    CALL = "C"


class ExerciseType(str, Enum):
    """American or European exercise."""

    AMERICA = "A"
    EUROPEAN = "E"


class ExpirationType(str, Enum):
    """Expiration calendar cycle of an option."""

    MONTH = "M"
    QUARTERLY = "Q"
    WEEKLY = "W"
    THIRD_FRIDAY = "S"


class SettlementType(str, Enum):
    """Settlement at the morning or afternoon session."""

    AM = "A"
    PM = "P"


@dataclass(kw_only=True)
class _OptionMetrics(Model):
    """Greeks, valuation and mark movement of an option."""

    delta: float = jfield(codec=FLOAT)
    gamma: float = jfield(codec=FLOAT)
    theta: float = jfield(codec=FLOAT)
    vega: float = jfield(codec=FLOAT)
    rho: float = jfield(codec=FLOAT)
    volatility: float = jfield(codec=FLOAT)
    time_value: float = jfield(codec=FLOAT)
    theoretical_option_value: float = jfield(codec=FLOAT)
    mark_change: float = jfield(codec=FLOAT)
    mark_percent_change: float = jfield(codec=FLOAT)


@dataclass(kw_only=True)
class QuoteOption(_YearRange, _SessionQuote, _Book, _OptionMetrics):
    """Quote data of an option."""

    n52week_high: float | None = jfield(key="52WeekHigh", codec=FLOAT, default=None)
    n52week_low: float | None = jfield(key="52WeekLow", codec=FLOAT, default=None)
    ind_ask_price: float = jfield(codec=FLOAT)
    ind_bid_price: float = jfield(codec=FLOAT)
    ind_quote_time: dt.datetime = jfield(codec=MILLIS)
    implied_yield: float = jfield(codec=FLOAT)
    money_intrinsic_value: float = jfield(codec=FLOAT)
    open_interest: float = jfield(codec=FLOAT)
    underlying_price: float = jfield(codec=FLOAT)


@dataclass(kw_only=True)
class ReferenceOption(_Listing):
    """Reference data of an option."""

    contract_type: ContractType = jfield(codec=ContractType)
    cusip: str | None = _opt(str)
    days_to_expiration: int = jfield(codec=INT)
    deliverables: str | None = _opt(str)
    exercise_type: ExerciseType | None = _opt(ExerciseType)
    expiration_day: int = jfield(codec=U8)
    expiration_month: int = jfield(codec=U8)
    expiration_type: ExpirationType | None = _opt(ExpirationType)
    expiration_year: int = jfield(codec=INT)
    is_penny_pilot: bool = jfield(codec=bool)
    last_trading_day: dt.datetime = jfield(codec=MILLIS)
    multiplier: float = jfield(codec=FLOAT)
    settlement_type: SettlementType = jfield(codec=SettlementType)
    strike_price: float = jfield(codec=FLOAT)
    underlying: str = jfield(codec=str)
    uv_expiration_type: str | None = _opt(str)


@dataclass(kw_only=True)
class OptionResponse(_Security):
    """Quote info of an option."""

    quote: QuoteOption = jfield(codec=QuoteOption)
    reference: ReferenceOption = jfield(codec=ReferenceOption)