"""Price history candles."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .codec import FLOAT, ISO_DATETIME, MILLIS, UINT, Model, jfield


@dataclass(kw_only=True)
class Candle(Model):
    """One OHLCV bar."""

    close: float = jfield(codec=FLOAT)
    datetime: dt.datetime = jfield(codec=MILLIS)
    datetime_iso8601: dt.datetime | None = jfield(
        key="dateTimeISO8601", codec=ISO_DATETIME, omit_none=True, default=None
    )
    high: float = jfield(codec=FLOAT)
    low: float = jfield(codec=FLOAT)
    open: float = jfield(codec=FLOAT)
    volume: int = jfield(codec=UINT)


@dataclass(kw_only=True)
class CandleList(Model):
    """Price history for one symbol."""

    candles: list[Candle] = jfield(codec=[Candle])
    empty: bool | None = jfield(codec=bool, omit_none=True, default=None)
    previous_close: float | None = jfield(codec=FLOAT, omit_none=True, default=None)
    previous_close_date: dt.datetime | None = jfield(
        codec=MILLIS, omit_none=True, default=None
    )
    previous_close_date_iso8601: dt.datetime | None = jfield(
        key="previousCloseDateISO8601", codec=ISO_DATETIME, omit_none=True, default=None
    )
    symbol: str = jfield(codec=str)