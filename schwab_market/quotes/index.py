"""Quote of an index."""

from __future__ import annotations

from dataclasses import dataclass

from ..codec import jfield
from .equity import Fundamental, _Listing, _Security, _SessionQuote, _YearRange


@dataclass(kw_only=True)
class QuoteIndex(_YearRange, _SessionQuote):
    """Quote data of an index."""


@dataclass(kw_only=True)
class ReferenceIndex(_Listing):
    """Reference data of an index."""


@dataclass(kw_only=True)
class IndexResponse(_Security):
    """Quote info of an index."""

    quote: QuoteIndex = jfield(codec=QuoteIndex)
    reference: ReferenceIndex = jfield(codec=ReferenceIndex)
    fundamental: Fundamental | None = jfield(codec=Fundamental, default=None)