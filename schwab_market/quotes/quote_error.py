"""Partial errors reported alongside a quote response."""

from __future__ import annotations

from dataclasses import dataclass

from ..codec import Model, jfield


@dataclass(kw_only=True)
class QuoteError(Model):
    """Symbols, CUSIPs or SSIDs of a quote request that could not be resolved."""

    invalid_cusips: list[str] | None = jfield(codec=[str], default=None)
    invalid_ssids: list[str] | None = jfield(key="invalidSSIDs", codec=[str], default=None)
    invalid_symbols: list[str] | None = jfield(codec=[str], default=None)