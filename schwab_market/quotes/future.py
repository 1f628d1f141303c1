"""Quote of a future."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from ..codec import FLOAT, INT, MILLIS, UINT, Model, jfield


@dataclass(kw_only=True)
class QuoteFuture(Model):
    """Quote data of a future."""

    ask_micid: str | None = jfield(key="askMICId", codec=str, omit_none=True, default=None)
    ask_price: float = jfield(codec=FLOAT)
    ask_size: int = jfield(codec=INT)
    ask_time: dt.datetime = jfield(codec=MILLIS)
    bid_micid: str | None = jfield(key="bidMICId", codec=str, omit_none=True, default=None)
    bid_price: float = jfield(codec=FLOAT)
    bid_size: int = jfield(codec=INT)
    bid_time: dt.datetime = jfield(codec=MILLIS)
    close_price: float = jfield(codec=FLOAT)
    future_percent_change: float = jfield(codec=FLOAT)
    high_price: float = jfield(codec=FLOAT)
    last_micid: str | None = jfield(key="lastMICId", codec=str, omit_none=True, default=None)
    last_price: float = jfield(codec=FLOAT)
    last_size: int = jfield(codec=INT)
    low_price: float = jfield(codec=FLOAT)
    mark: float = jfield(codec=FLOAT)
    net_change: float = jfield(codec=FLOAT)
    open_interest: int = jfield(codec=INT)
    open_price: float = jfield(codec=FLOAT)
    quote_time: dt.datetime = jfield(codec=MILLIS)
    quoted_in_session: bool | None = jfield(codec=bool, omit_none=True, default=None)
    security_status: str = jfield(codec=str)
    settle_time: dt.datetime = jfield(codec=MILLIS)
    tick: float = jfield(codec=FLOAT)
    tick_amount: float = jfield(codec=FLOAT)
    total_volume: int = jfield(codec=UINT)
    trade_time: dt.datetime = jfield(codec=MILLIS)


@dataclass(kw_only=True)
class ReferenceFuture(Model):
    """Reference data of a future."""

    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    exchange_name: str = jfield(codec=str)
    future_active_symbol: str | None = jfield(codec=str, omit_none=True, default=None)
    future_expiration_date: dt.datetime = jfield(codec=MILLIS)
    future_is_active: bool = jfield(codec=bool)
    future_multiplier: float = jfield(codec=FLOAT)
    future_price_format: str = jfield(codec=str)
    future_settlement_price: float = jfield(codec=FLOAT)
    future_trading_hours: str = jfield(codec=str)
    product: str = jfield(codec=str)
    future_is_tradable: bool | None = jfield(codec=bool, omit_none=True, default=None)


@dataclass(kw_only=True)
class FutureResponse(Model):
    """Quote info of a future."""

    ssid: int = jfield(codec=INT)
    symbol: str = jfield(codec=str)
    realtime: bool = jfield(codec=bool)
    quote: QuoteFuture = jfield(codec=QuoteFuture)
    reference: ReferenceFuture = jfield(codec=ReferenceFuture)