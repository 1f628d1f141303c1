"""Top movers within an index."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .codec import FLOAT, INT, UINT, Model, jfield


class Direction(str, Enum):
    """Direction of a move."""

    UP = "up"
    DOWN = "down"


def _maybe(codec):
    """A field that may be absent and is left out when empty."""
    return jfield(codec=codec, omit_none=True, default=None)


@dataclass(kw_only=True)
class Screener(Model):
    """A security that moved most within an index."""

    change: float | None = _maybe(FLOAT)
    description: str = jfield(codec=str)
    direction: Direction | None = _maybe(Direction)
    last: float | None = _maybe(FLOAT)
    symbol: str = jfield(codec=str)
    total_volume: int = jfield(codec=UINT)
    volume: int | None = _maybe(UINT)
    last_price: float | None = _maybe(FLOAT)
    net_change: float | None = _maybe(FLOAT)
    market_share: float | None = _maybe(FLOAT)
    trades: int | None = _maybe(INT)
    net_percent_change: float | None = _maybe(FLOAT)


@dataclass(kw_only=True)
class Mover(Model):
    """Movers of an index."""

    screeners: list[Screener] = jfield(codec=[Screener])