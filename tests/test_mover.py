import pytest

from schwab_market.errors import DecodeError
from schwab_market.mover import Direction, Mover

SCHEMA_SAMPLE = {
    "screeners": [
        {
            "change": 10,
            "description": "Dow jones",
            "direction": "up",
            "last": 100,
            "symbol": "$DJI",
            "totalVolume": 100,
        }
    ]
}

REAL = {
    "screeners": [
        {
            "description": "NVIDIA CORP",
            "volume": 31043271,
            "lastPrice": 924.79,
            "netChange": -22.99,
            "marketShare": 8.21,
            "totalVolume": 378139412,
            "trades": 560834,
            "netPercentChange": -0.0243,
            "symbol": "NVDA",
        },
        {
            "description": "TESLA INC",
            "volume": 20561932,
            "lastPrice": 177.46,
            "netChange": 3.62,
            "marketShare": 5.44,
            "totalVolume": 378139412,
            "trades": 332011,
            "netPercentChange": 0.0208,
            "symbol": "TSLA",
        },
    ]
}


def test_de():
    val = Mover.from_dict(SCHEMA_SAMPLE)
    screener = val.screeners[0]
    assert screener.direction is Direction.UP
    assert screener.change == 10.0
    assert screener.symbol == "$DJI"


def test_serde_real():
    val = Mover.from_dict(REAL)
    assert val.screeners[0].trades == 560834
    assert val.to_dict() == REAL


def test_bad_direction():
    bad = {"screeners": [dict(SCHEMA_SAMPLE["screeners"][0], direction="sideways")]}
    with pytest.raises(DecodeError):
        Mover.from_dict(bad)


def test_missing_total_volume():
    entry = {k: v for k, v in SCHEMA_SAMPLE["screeners"][0].items() if k != "totalVolume"}
    with pytest.raises(DecodeError):
        Mover.from_dict({"screeners": [entry]})