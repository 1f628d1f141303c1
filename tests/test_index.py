import copy

import pytest

from schwab_market.codec import datetime_to_millis
from schwab_market.errors import DecodeError
from schwab_market.quotes.equity import DivFrequency
from schwab_market.quotes.index import IndexResponse, QuoteIndex

SAMPLE = {
    "ssid": 1234567890,
    "symbol": "$DJI",
    "realtime": True,
    "quote": {
        "52WeekHigh": 145.09,
        "52WeekLow": 77.581,
        "closePrice": 126.27,
        "highPrice": 126.99,
        "lastPrice": 122.3,
        "lowPrice": 52.74,
        "netChange": -0.04,
        "netPercentChange": -0.0756,
        "openPrice": 52.8,
        "securityStatus": "Normal",
        "totalVolume": 20171188,
        "tradeTime": 1621376731304,
    },
    "reference": {
        "description": "DOW JONES 30 INDUSTRIALS",
        "exchange": "q",
        "exchangeName": "Index",
    },
    "fundamental": None,
}

FUNDAMENTAL = {
    "avg10DaysVolume": 1.0,
    "avg1YearVolume": 2.0,
    "divAmount": 0.88,
    "divFreq": 4,
    "divPayAmount": 0.22,
    "divYield": 0.7,
    "eps": 4.45645,
    "fundLeverageFactor": -1,
    "peRatio": 28.599,
}


@pytest.fixture
def sample():
    return copy.deepcopy(SAMPLE)


def test_decode_map_of_responses(sample):
    parsed = {k: IndexResponse.from_dict(v) for k, v in {"$DJI": sample}.items()}
    resp = parsed["$DJI"]
    assert resp.symbol == "$DJI"
    assert resp.quote.n52week_low == pytest.approx(77.581)
    assert resp.reference.description == "DOW JONES 30 INDUSTRIALS"
    assert datetime_to_millis(resp.quote.trade_time) == 1621376731304
    assert resp.fundamental is None


def test_round_trip_keeps_null_fundamental(sample):
    resp = IndexResponse.from_dict(sample)
    out = resp.to_dict()
    assert out == sample
    assert out["fundamental"] is None


def test_absent_fundamental_serialises_as_null(sample):
    del sample["fundamental"]
    out = IndexResponse.from_dict(sample).to_dict()
    assert "fundamental" in out and out["fundamental"] is None


def test_fundamental_decoded(sample):
    sample["fundamental"] = copy.deepcopy(FUNDAMENTAL)
    resp = IndexResponse.from_dict(sample)
    assert resp.fundamental.div_freq is DivFrequency.FOUR
    assert IndexResponse.from_json(resp.to_json()) == resp


def test_missing_quote_field_raises(sample):
    del sample["quote"]["securityStatus"]
    with pytest.raises(DecodeError):
        QuoteIndex.from_dict(sample["quote"])