import json

import pytest

from schwab_market.errors import DecodeError
from schwab_market.quotes.quote_error import QuoteError


def _sample():
    return {
        "errors": {
            "invalidCusips": ["123456789"],
            "invalidSSIDs": ["1111", "2222"],
            "invalidSymbols": ["FOO", "BAR"],
        }
    }


def test_de():
    parsed = {key: QuoteError.from_dict(value) for key, value in _sample().items()}
    error = parsed["errors"]
    assert error.invalid_cusips == ["123456789"]
    assert error.invalid_ssids == ["1111", "2222"]
    assert error.invalid_symbols == ["FOO", "BAR"]


def test_round_trip():
    data = _sample()["errors"]
    assert QuoteError.from_dict(data).to_dict() == data


def test_missing_lists_are_none_and_serialized_as_null():
    error = QuoteError.from_dict({"invalidSymbols": ["XYZ"]})
    assert error.invalid_cusips is None
    assert error.invalid_ssids is None
    assert error.to_dict() == {
        "invalidCusips": None,
        "invalidSSIDs": None,
        "invalidSymbols": ["XYZ"],
    }


def test_json_round_trip():
    error = QuoteError(invalid_symbols=["ABC"])
    assert QuoteError.from_json(error.to_json()) == error


def test_rejects_non_string_entries():
    with pytest.raises(DecodeError):
        QuoteError.from_dict({"invalidSymbols": [1, 2]})


def test_from_json_rejects_garbage():
    with pytest.raises(DecodeError):
        QuoteError.from_json(json.dumps([1, 2, 3]))