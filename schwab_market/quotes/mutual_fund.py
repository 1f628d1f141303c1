"""Quote of a mutual fund."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum

from ..codec import FLOAT, INT, MILLIS, UINT, Model, jfield
from .equity import Fundamental


class MutualFundAssetSubType(str, Enum):
    """Sub type of a mutual fund, where applicable."""

    OEF = "OEF"
    CEF = "CEF"
    MMF = "MMF"


@dataclass(kw_only=True)
class QuoteMutualFund(Model):
    """Quote data of a mutual fund."""

    n52week_high: float = jfield(key="52WeekHigh", codec=FLOAT)
    n52week_low: float = jfield(key="52WeekLow", codec=FLOAT)
    close_price: float = jfield(codec=FLOAT)
    n_av: float = jfield(key="nAV", codec=FLOAT)
    net_change: float = jfield(codec=FLOAT)
    net_percent_change: float = jfield(codec=FLOAT)
    security_status: str = jfield(codec=str)
    total_volume: int | None = jfield(codec=UINT, omit_none=True, default=None)
    trade_time: dt.datetime = jfield(codec=MILLIS)
    last_price: float | None = jfield(codec=FLOAT, default=None)


@dataclass(kw_only=True)
class ReferenceMutualFund(Model):
    """Reference data of a mutual fund."""

    cusip: str = jfield(codec=str)
    description: str = jfield(codec=str)
    exchange: str = jfield(codec=str)
    exchange_name: str = jfield(codec=str)


@dataclass(kw_only=True)
class MutualFundResponse(Model):
    """Quote info of a mutual fund."""

    asset_sub_type: MutualFundAssetSubType | None = jfield(
        codec=MutualFundAssetSubType, default=None
    )
    ssid: int = jfield(codec=INT)
    symbol: str = jfield(codec=str)
    realtime: bool = jfield(codec=bool)
    fundamental: Fundamental | None = jfield(codec=Fundamental, default=None)
    quote: QuoteMutualFund = jfield(codec=QuoteMutualFund)
    reference: ReferenceMutualFund = jfield(codec=ReferenceMutualFund)