from datetime import datetime, timezone

import pytest

from schwab_market.errors import DecodeError
from schwab_market.option_chain import (
    ExchangeName,
    OptionChain,
    OptionContract,
    PutCall,
    Strategy,
    Underlying,
)
from schwab_market.quotes.option import ExerciseType, ExpirationType, SettlementType


def _contract(put_call="CALL"):
    return {
        "putCall": put_call,
        "symbol": "AAPL  240524C00100000",
        "description": "AAPL 05/24/2024 100.00 C",
        "exchangeName": "OPR",
        "bid": 89.5,
        "ask": 90.65,
        "last": 89.23,
        "mark": 90.08,
        "bidSize": 10,
        "askSize": 10,
        "bidAskSize": "10X10",
        "lastSize": 0,
        "highPrice": 0.0,
        "lowPrice": 0.0,
        "openPrice": 0.0,
        "closePrice": 89.89,
        "totalVolume": 0,
        "tradeDate": 1716206400000,
        "quoteTimeInLong": 1716235199959,
        "tradeTimeInLong": 1716221830779,
        "netChange": -0.66,
        "volatility": 154.247,
        "delta": 1.0,
        "gamma": 0.0,
        "theta": -0.01,
        "vega": 0.0,
        "rho": 0.0,
        "timeValue": -0.66,
        "openInterest": 2,
        "isInTheMoney": True,
        "theoreticalOptionValue": 89.89,
        "theoreticalVolatility": 29.0,
        "isMini": False,
        "isNonStandard": False,
        "optionDeliverablesList": [
            {"symbol": "AAPL", "assetType": "STOCK", "deliverableUnits": 100.0}
        ],
        "strikePrice": 100.0,
        "expirationDate": "2024-05-24T20:00:00Z",
        "daysToExpiration": 4,
        "expirationType": "W",
        "lastTradingDay": 1716595200000,
        "multiplier": 100.0,
        "settlementType": "P",
        "deliverableNote": "100 AAPL",
        "percentChange": -0.73,
        "markChange": 0.19,
        "markPercentChange": 0.21,
        "intrinsicValue": 89.89,
        "extrinsicValue": -0.66,
        "optionRoot": "AAPL",
        "exerciseType": "A",
        "high52Week": 99.5,
        "low52Week": 70.1,
        "isPennyPilot": True,
    }


def _sample():
    return {
        "symbol": "AAPL",
        "status": "SUCCESS",
        "strategy": "SINGLE",
        "interval": 0.0,
        "isDelayed": False,
        "isIndex": False,
        "interestRate": 5.278,
        "underlyingPrice": 189.94,
        "volatility": 29.0,
        "daysToExpiration": 0.0,
        "numberOfContracts": 2,
        "assetMainType": "EQUITY",
        "assetSubType": "COE",
        "isChainTruncated": False,
        "callExpDateMap": {"2024-05-24:4": {"100.0": [_contract("CALL")]}},
        "putExpDateMap": {"2024-05-24:4": {"100.0": [_contract("PUT")]}},
    }


def _underlying():
    return {
        "ask": 190,
        "askSize": 1,
        "bid": 189,
        "bidSize": 6,
        "change": 0,
        "close": 189,
        "delayed": False,
        "description": "Apple Inc",
        "exchangeName": "NAS",
        "fiftyTwoWeekHigh": 199,
        "fiftyTwoWeekLow": 164,
        "highPrice": 190.81,
        "last": 189,
        "lowPrice": 189.18,
        "mark": 189,
        "markChange": 0.06,
        "markPercentChange": 0.03,
        "openPrice": 189.51,
        "percentChange": 0.03,
        "quoteTime": 1715990363904,
        "symbol": "AAPL",
        "totalVolume": 41282925,
        "tradeTime": 1715990395834,
    }


def test_round_trip_matches_input():
    data = _sample()
    assert OptionChain.from_dict(data).to_dict() == data


def test_decoded_values():
    chain = OptionChain.from_dict(_sample())
    assert chain.strategy is Strategy.SINGLE
    assert chain.underlying is None
    contract = chain.call_exp_date_map["2024-05-24:4"]["100.0"][0]
    assert contract.put_call is PutCall.CALL
    assert contract.expiration_type is ExpirationType.WEEKLY
    assert contract.settlement_type is SettlementType.PM
    assert contract.exercise_type is ExerciseType.AMERICA
    assert contract.expiration_date == datetime(2024, 5, 24, 20, tzinfo=timezone.utc)
    assert contract.high_52_week == 99.5
    assert contract.option_deliverables_list[0].deliverable_units == 100.0
    put = chain.put_exp_date_map["2024-05-24:4"]["100.0"][0]
    assert put.put_call is PutCall.PUT


def test_expiration_date_with_offset_is_parsed():
    data = _contract()
    data["expirationDate"] = "2024-05-24T20:00:00.000+00:00"
    contract = OptionContract.from_dict(data)
    assert contract.expiration_date == datetime(2024, 5, 24, 20, tzinfo=timezone.utc)
    assert contract.to_dict()["expirationDate"] == "2024-05-24T20:00:00Z"


def test_missing_not_in_schema_fields_serialize_as_null():
    data = _sample()
    for key in ("numberOfContracts", "assetMainType", "assetSubType", "isChainTruncated"):
        del data[key]
    out = OptionChain.from_dict(data).to_dict()
    assert out["numberOfContracts"] is None
    assert out["isChainTruncated"] is None
    assert "underlying" not in out


def test_missing_optional_contract_fields_are_omitted():
    data = _contract()
    for key in ("bid", "tradeDate", "isMini", "exerciseType"):
        del data[key]
    out = OptionContract.from_dict(data).to_dict()
    assert "bid" not in out
    assert "tradeDate" not in out
    assert "isMini" not in out
    assert "exerciseType" not in out
    assert out["ask"] == 90.65


def test_underlying_round_trip():
    data = _sample()
    data["underlying"] = _underlying()
    chain = OptionChain.from_dict(data)
    assert chain.underlying.exchange_name is ExchangeName.NAS
    assert chain.underlying.total_volume == 41282925
    assert chain.to_dict() == data


def test_underlying_integer_field_rejects_float():
    data = _underlying()
    data["ask"] = 189.5
    with pytest.raises(DecodeError):
        Underlying.from_dict(data)


def test_invalid_strategy_raises():
    data = _sample()
    data["strategy"] = "IRON"
    with pytest.raises(DecodeError):
        OptionChain.from_dict(data)


def test_negative_volume_raises():
    data = _contract()
    data["totalVolume"] = -1
    with pytest.raises(DecodeError):
        OptionContract.from_dict(data)


@pytest.mark.parametrize(
    "enum_cls, raw, member",
    [
        (Strategy, "BUTTERFLY", Strategy.BUTTERFLY),
        (Strategy, "ROLL", Strategy.ROLL),
        (ExchangeName, "BATS", ExchangeName.BATS),
        (ExchangeName, "IND", ExchangeName.IND),
        (PutCall, "PUT", PutCall.PUT),
    ],
)
def test_enum_values(enum_cls, raw, member):
    assert enum_cls(raw) is member