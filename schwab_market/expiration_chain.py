"""Option expiration chain."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .codec import DATE, INT, Model, jfield
from .quotes.option import ExpirationType, SettlementType


@dataclass(kw_only=True)
class Expiration(Model):
    """One expiration date of an option series."""

    days_to_expiration: int = jfield(codec=INT)
    expiration: str | None = jfield(codec=str, omit_none=True, default=None)
    expiration_type: ExpirationType = jfield(codec=ExpirationType)
    standard: bool = jfield(codec=bool)
    settlement_type: SettlementType | None = jfield(codec=SettlementType, default=None)
    option_roots: str | None = jfield(codec=str, default=None)
    expiration_date: dt.date = jfield(codec=DATE)


@dataclass(kw_only=True)
class ExpirationChain(Model):
    """All expirations available for an underlying."""

    status: str | None = jfield(codec=str, omit_none=True, default=None)
    expiration_list: list[Expiration] = jfield(codec=[Expiration])