"""Option chain of an underlying."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum

from .codec import FLOAT, INT, ISO_DATETIME, MILLIS, UINT, Model, jfield
from .quotes.equity import _DayRange, _opt
from .quotes.option import ExerciseType, ExpirationType, SettlementType, _OptionMetrics


class Strategy(str, Enum):
    """Strategy used to build the chain."""

    SINGLE = "SINGLE"
    ANALYTICAL = "ANALYTICAL"
    COVERED = "COVERED"
    VERTICAL = "VERTICAL"
    CALENDAR = "CALENDAR"
    STRANGLE = "STRANGLE"
    STRADDLE = "STRADDLE"
    BUTTERFLY = "BUTTERFLY"
    CONDOR = "CONDOR"
    DIAGONAL = "DIAGONAL"
    COLLAR = "COLLAR"
    ROLL = "ROLL"


class ExchangeName(str, Enum):
    """Exchange of the underlying."""

    IND = "IND"
    ASE = "ASE"
    NYS = "NYS"
    NAS = "NAS"
    NAP = "NAP"
    PAC = "PAC"
    OPR = "OPR"
    BATS = "BATS"


class PutCall(str, Enum):
    """Put or call."""

    PUT = "PUT"
    CALL = "CALL"


@dataclass(kw_only=True)
class Underlying(Model):
    """Quote of the underlying security."""

    ask: int = jfield(codec=INT)
    ask_size: int = jfield(codec=INT)
    bid: int = jfield(codec=INT)
    bid_size: int = jfield(codec=INT)
    change: int = jfield(codec=INT)
    close: int = jfield(codec=INT)
    delayed: bool = jfield(codec=bool)
    description: str = jfield(codec=str)
    exchange_name: ExchangeName = jfield(codec=ExchangeName)
    fifty_two_week_high: int = jfield(codec=INT)
    fifty_two_week_low: int = jfield(codec=INT)
    high_price: float = jfield(codec=FLOAT)
    last: int = jfield(codec=INT)
    low_price: float = jfield(codec=FLOAT)
    mark: int = jfield(codec=INT)
    mark_change: float = jfield(codec=FLOAT)
    mark_percent_change: float = jfield(codec=FLOAT)
    open_price: float = jfield(codec=FLOAT)
    percent_change: float = jfield(codec=FLOAT)
    quote_time: int = jfield(codec=INT)
    symbol: str = jfield(codec=str)
    total_volume: int = jfield(codec=UINT)
    trade_time: dt.datetime = jfield(codec=MILLIS)


@dataclass(kw_only=True)
class OptionDeliverable(Model):
    """What one contract delivers."""

    symbol: str = jfield(codec=str)
    asset_type: str = jfield(codec=str)
    deliverable_units: float = jfield(codec=FLOAT)
    currency_type: str | None = _opt(str)


@dataclass(kw_only=True)
class OptionContract(_DayRange, _OptionMetrics):
    """One contract in an option chain."""

    put_call: PutCall = jfield(codec=PutCall)
    symbol: str = jfield(codec=str)
    description: str = jfield(codec=str)
    exchange_name: str = jfield(codec=str)
    bid_price: float | None = _opt(FLOAT)
    ask_price: float | None = _opt(FLOAT)
    last_price: float | None = _opt(FLOAT)
    mark_price: float | None = _opt(FLOAT)
    bid_size: int = jfield(codec=INT)
    ask_size: int = jfield(codec=INT)
    last_size: int = jfield(codec=INT)
    total_volume: int = jfield(codec=UINT)
    trade_date: dt.datetime | None = _opt(MILLIS)
    quote_time_in_long: dt.datetime = jfield(codec=MILLIS)
    trade_time_in_long: dt.datetime = jfield(codec=MILLIS)
    open_interest: int = jfield(codec=INT)
    is_in_the_money: bool | None = _opt(bool)
    theoretical_volatility: float = jfield(codec=FLOAT)
    is_mini: bool | None = _opt(bool)
    is_non_standard: bool | None = _opt(bool)
    option_deliverables_list: list[OptionDeliverable] = jfield(codec=[OptionDeliverable])
    strike_price: float = jfield(codec=FLOAT)
    expiration_date: dt.datetime = jfield(codec=ISO_DATETIME)
    days_to_expiration: int = jfield(codec=INT)
    expiration_type: ExpirationType = jfield(codec=ExpirationType)
    last_trading_day: dt.datetime = jfield(codec=MILLIS)
    multiplier: float = jfield(codec=FLOAT)
    settlement_type: SettlementType = jfield(codec=SettlementType)
    deliverable_note: str = jfield(codec=str)
    is_index_option: bool | None = _opt(bool)
    percent_change: float = jfield(codec=FLOAT)
    is_penny_pilot: bool | None = _opt(bool)
    intrinsic_value: float = jfield(codec=FLOAT)
    option_root: str = jfield(codec=str)
    bid: float | None = _opt(FLOAT)
    ask: float | None = _opt(FLOAT)
    last: float | None = _opt(FLOAT)
    mark: float | None = _opt(FLOAT)
    bid_ask_size: str | None = _opt(str)
    exercise_type: ExerciseType | None = _opt(ExerciseType)
    high_52_week: float | None = _opt(FLOAT)
    low_52_week: float | None = _opt(FLOAT)
    extrinsic_value: float | None = _opt(FLOAT)
    in_the_money: bool | None = _opt(bool)
    mini: bool | None = _opt(bool)
    non_standard: bool | None = _opt(bool)
    penny_pilot: bool | None = _opt(bool)


_EXP_DATE_MAP = {str: {str: [OptionContract]}}


@dataclass(kw_only=True)
class OptionChain(Model):
    """Calls and puts of an underlying, keyed by expiration and strike."""

    symbol: str = jfield(codec=str)
    status: str = jfield(codec=str)
    underlying: Underlying | None = _opt(Underlying)
    strategy: Strategy = jfield(codec=Strategy)
    interval: float = jfield(codec=FLOAT)
    is_delayed: bool = jfield(codec=bool)
    is_index: bool = jfield(codec=bool)
    days_to_expiration: float = jfield(codec=FLOAT)
    interest_rate: float = jfield(codec=FLOAT)
    underlying_price: float = jfield(codec=FLOAT)
    volatility: float = jfield(codec=FLOAT)
    call_exp_date_map: dict[str, dict[str, list[OptionContract]]] = jfield(
        codec=_EXP_DATE_MAP
    )
    put_exp_date_map: dict[str, dict[str, list[OptionContract]]] = jfield(
        codec=_EXP_DATE_MAP
    )
    number_of_contracts: int | None = jfield(codec=INT, default=None)
    asset_main_type: str | None = jfield(codec=str, default=None)
    asset_sub_type: str | None = jfield(codec=str, default=None)
    is_chain_truncated: bool | None = jfield(codec=bool, default=None)