"""Quote of a future option."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from ..codec import FLOAT, INT, MILLIS, UINT, Model, jfield
from .option import ContractType


@dataclass(kw_only=True)
class QuoteFutureOption(Model):
    """Quote data of a future option."""

    ask_micid: str = jfield(key="askMICId", codec=str)
    ask_price: float = jfield(codec=FLOAT)
    ask_size: int = jfield(codec=INT)
    bid_micid: str = jfield(key="bidMICId", codec=str)
    bid_price: float = jfield(codec=FLOAT)
    bid_size: int = jfield(codec=INT)
    close_price: float = jfield(codec=FLOAT)
    high_price: float = jfield(codec=FLOAT)
    last_micid: str = jfield(key="lastMICId", codec=str)
    last_price: float = jfield(codec=FLOAT)
    last_size: int = jfield(codec=INT)
    low_price: float = jfield(codec=FLOAT)
    mark: int = jfield(codec=INT)
    mark_change: float = jfield(codec=FLOAT)
    net_change: float = jfield(codec=FLOAT)
    net_percent_change: float = jfield(codec=FLOAT)
    open_interest: int = jfield(codec=INT)
    open_price: float = jfield(codec=FLOAT)
    quote_time: dt.datetime = jfield(codec=MILLIS)
    security_status: str = jfield(codec=str)
    settlemet_price: float = jfield(codec=FLOAT)
    tick: float = jfield(codec=FLOAT)
    tick_amount: float = jfield(codec=FLOAT)
    total_volume: int = jfield(codec=UINT)
    trade_time: dt.datetime = jfield(codec=MILLIS)


@dataclass(kw_only=True)
class ReferenceFutureOption(Model):
    """Reference data of a future option."""

    contract_type: ContractType = jfield(codec=ContractType)
    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    exchange_name: str = jfield(codec=str)
    multiplier: float = jfield(codec=FLOAT)
    expiration_date: dt.datetime = jfield(codec=MILLIS)
    expiration_style: str = jfield(codec=str)
    stricke_price: float = jfield(codec=FLOAT)
    underlying: str = jfield(codec=str)


@dataclass(kw_only=True)
class FutureOptionResponse(Model):
    """Quote info of a future option."""

    ssid: int = jfield(codec=INT)
    symbol: str = jfield(codec=str)
    realtime: bool = jfield(codec=bool)
    quote: QuoteFutureOption = jfield(codec=QuoteFutureOption)
    reference: ReferenceFutureOption = jfield(codec=ReferenceFutureOption)