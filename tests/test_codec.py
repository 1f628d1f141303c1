from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

import pytest

from schwab_market.codec import (
    MILLIS,
    Codec,
    Model,
    datetime_to_millis,
    format_iso_datetime,
    jfield,
    millis_to_datetime,
    parse_iso_datetime,
)
from schwab_market.errors import DecodeError


class Colour(str, Enum):
    RED = "RED"
    BLUE = "BLUE"


@dataclass(kw_only=True)
class Point(Model):
    x: float = jfield(codec=float)
    label: str | None = jfield(key="name", codec=str, omit_none=True, default=None)


@dataclass(kw_only=True)
class Shape(Model):
    shape_id: int = jfield(codec=int)
    colour: Colour = jfield(codec=Colour)
    points: list = jfield(codec=[Point])
    created: datetime = jfield(codec=MILLIS)
    tags: dict | None = jfield(codec={str: [str]}, default=None)
    note: str | None = jfield(codec=str, default=None)


@dataclass(kw_only=True)
class Broken(Model):
    value: int = jfield(codec=object())


SHAPE = {
    "shapeId": 7,
    "colour": "BLUE",
    "points": [{"x": 1.5, "name": "a"}, {"x": 2.0}],
    "created": 1_715_990_363_904,
    "tags": {"k": ["v1", "v2"]},
    "note": None,
}


def test_millis_round_trip():
    value = millis_to_datetime(1_715_990_363_904)
    assert value.tzinfo == timezone.utc
    assert datetime_to_millis(value) == 1_715_990_363_904


def test_millis_epoch():
    assert millis_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", ["1", True, 1.5])
def test_millis_rejects_non_integers(raw):
    with pytest.raises(DecodeError):
        millis_to_datetime(raw)


def test_parse_offset_equivalence():
    assert parse_iso_datetime("2024-05-17T09:30:00-04:00") == parse_iso_datetime(
        "2024-05-17T13:30:00Z"
    )


@pytest.mark.parametrize(
    "text",
    ["2024-05-17T13:30:00Z", "2024-05-17T13:30:00.123Z", "2024-05-17T13:30:00.123456Z"],
)
def test_iso_round_trip(text):
    assert format_iso_datetime(parse_iso_datetime(text)) == text


def test_parse_truncates_nanoseconds():
    assert parse_iso_datetime("2024-05-17T13:30:00.123456789Z") == parse_iso_datetime(
        "2024-05-17T13:30:00.123456Z"
    )


@pytest.mark.parametrize(
    "text", ["2024-05-17", "2024-05-17T13:30:00", "2024-13-01T00:00:00Z", 42]
)
def test_parse_invalid(text):
    with pytest.raises(DecodeError):
        parse_iso_datetime(text)


def test_format_naive_rejected():
    with pytest.raises(ValueError):
        format_iso_datetime(datetime(2024, 5, 17))


def test_custom_codec_round_trip():
    codec = Codec(str.upper, str.lower)
    assert codec.encode(codec.decode("abc")) == "abc"


def test_model_round_trip():
    shape = Shape.from_dict(SHAPE)
    assert shape.colour is Colour.BLUE
    assert shape.points[0].label == "a"
    assert shape.points[1].label is None
    assert shape.created == millis_to_datetime(1_715_990_363_904)
    assert shape.to_dict() == SHAPE


def test_omit_none_and_keys():
    shape = Model.from_dict.__func__(Shape, SHAPE)
    out = Model.to_dict(shape)
    assert "name" not in out["points"][1]
    assert out["note"] is None
    assert out["shapeId"] == 7


def test_unknown_keys_ignored():
    data = dict(SHAPE, extra=123)
    shape = Model.from_dict.__func__(Shape, data)
    assert Model.to_dict(shape) == SHAPE


@pytest.mark.parametrize(
    "change",
    [
        {"shapeId": None},
        {"colour": "GREEN"},
        {"shapeId": "seven"},
        {"shapeId": True},
        {"points": {"x": 1}},
        {"created": "yesterday"},
    ],
)
def test_invalid_fields(change):
    with pytest.raises(DecodeError):
        Model.from_dict.__func__(Shape, dict(SHAPE, **change))


def test_missing_required():
    data = {k: v for k, v in SHAPE.items() if k != "colour"}
    with pytest.raises(DecodeError, match="missing field"):
        Model.from_dict.__func__(Shape, data)


def test_json_round_trip():
    shape = Model.from_dict.__func__(Shape, SHAPE)
    text = Model.to_json(shape)
    assert Model.from_json.__func__(Shape, text) == shape


@pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
def test_from_json_invalid(text):
    with pytest.raises(DecodeError):
        Model.from_json.__func__(Shape, text)


def test_bad_codec_spec():
    with pytest.raises(TypeError):
        Model.from_dict.__func__(Broken, {"value": 1})