"""Quote of a forex pair."""

from __future__ import annotations

from dataclasses import dataclass

from ..codec import FLOAT, INT, Model, jfield
from .equity import _Book, _Listing, _opt, _Security, _SessionQuote, _YearRange


@dataclass(kw_only=True)
class QuoteForex(_YearRange, _SessionQuote, _Book):
    """Quote data of a forex pair."""

    tick: float = jfield(codec=FLOAT)
    tick_amount: float = jfield(codec=FLOAT)


@dataclass(kw_only=True)
class ReferenceForex(_Listing):
    """Reference data of a forex pair."""

    is_tradable: bool = jfield(codec=bool)
    market_maker: str | None = _opt(str)
    product: str | None = _opt(str)
    trading_hours: str | None = _opt(str)


@dataclass(kw_only=True)
class ForexResponse(_Security):
    """Quote info of a forex pair."""

    ssid: int | None = _opt(INT)
    quote: QuoteForex = jfield(codec=QuoteForex)
    reference: ReferenceForex = jfield(codec=ReferenceForex)


__all__ = ["ForexResponse", "QuoteForex", "ReferenceForex", "Model"]