"""JSON field codecs and the dataclass base shared by the response models."""

from __future__ import annotations

import dataclasses
import functools
import json
import re
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, NamedTuple

from .errors import DecodeError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)
_META = "schwab_market.json"

_ISO_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?(Z|z|[+-]\d{2}:?\d{2})$"
)
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def millis_to_datetime(ms: int) -> datetime:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime."""
    if isinstance(ms, bool) or not isinstance(ms, int):
        raise DecodeError(f"expected integer milliseconds, got {ms!r}")
    try:
        return _EPOCH + ms * _MILLISECOND
    except OverflowError as exc:
        raise DecodeError(f"timestamp out of range: {ms}") from exc


def datetime_to_millis(dt: datetime) -> int:
    """Convert an aware datetime to milliseconds since the Unix epoch."""
    if dt.tzinfo is None:
        raise ValueError("datetime must carry a timezone")
    return (dt - _EPOCH) // _MILLISECOND


def parse_iso_datetime(text: str) -> datetime:
    """Parse an RFC 3339 timestamp with an offset into an aware UTC datetime."""
    if not isinstance(text, str):
        raise DecodeError(f"expected an RFC 3339 string, got {text!r}")
    match = _ISO_RE.match(text)
    if match is None:
        raise DecodeError(f"invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    micros = int((fraction or "")[:6].ljust(6, "0"))
    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        digits = offset[1:].replace(":", "")
        delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
        try:
            tz = timezone(sign * delta)
        except ValueError as exc:
            raise DecodeError(f"invalid offset in {text!r}") from exc
    try:
        value = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micros, tzinfo=tz,
        )
    except ValueError as exc:
        raise DecodeError(f"invalid RFC 3339 timestamp: {text!r}") from exc
    return value.astimezone(timezone.utc)


def format_iso_datetime(dt: datetime) -> str:
    """Format an aware datetime as a UTC RFC 3339 string ending in ``Z``."""
    if dt.tzinfo is None:
        raise ValueError("datetime must carry a timezone")
    utc = dt.astimezone(timezone.utc)
    text = utc.strftime("%Y-%m-%dT%H:%M:%S")
    if utc.microsecond == 0:
        fraction = ""
    elif utc.microsecond % 1000 == 0:
        fraction = f".{utc.microsecond // 1000:03d}"
    else:
        fraction = f".{utc.microsecond:06d}"
    return f"{text}{fraction}Z"


class Codec:
    """A pair of functions converting a JSON value to and from its Python form."""

    def __init__(
        self,
        decode: Callable[[Any], Any],
        encode: Callable[[Any], Any],
        name: str = "value",
    ) -> None:
        self._decode = decode
        self._encode = encode
        self.name = name

    def decode(self, value: Any) -> Any:
        return self._decode(value)

    def encode(self, value: Any) -> Any:
        return self._encode(value)

    def __repr__(self) -> str:
        return f"Codec({self.name})"


def _checked(kind: type | tuple[type, ...], label: str, convert: Callable[[Any], Any]):
    def decode(value: Any) -> Any:
        if isinstance(value, bool) and bool not in (kind if isinstance(kind, tuple) else (kind,)):
            raise DecodeError(f"expected {label}, got {value!r}")
        if not isinstance(value, kind):
            raise DecodeError(f"expected {label}, got {value!r}")
        return convert(value)

    return decode


def _decode_uint(value: Any) -> int:
    number = _checked(int, "integer", int)(value)
    if number < 0:
        raise DecodeError(f"expected unsigned integer, got {value!r}")
    return number


def _decode_date(value: Any) -> date:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise DecodeError(f"expected YYYY-MM-DD date, got {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise DecodeError(f"invalid date: {value!r}") from exc


ANY = Codec(lambda v: v, lambda v: v, "any")
STR = Codec(_checked(str, "string", str), str, "str")
BOOL = Codec(_checked(bool, "boolean", bool), bool, "bool")
INT = Codec(_checked(int, "integer", int), int, "int")
UINT = Codec(_decode_uint, int, "uint")
FLOAT = Codec(_checked((int, float), "number", float), float, "float")
MILLIS = Codec(millis_to_datetime, datetime_to_millis, "millis")
ISO_DATETIME = Codec(parse_iso_datetime, format_iso_datetime, "iso_datetime")
DATE = Codec(_decode_date, lambda d: d.isoformat(), "date")

_BUILTINS = {str: STR, bool: BOOL, int: INT, float: FLOAT}


def _enum_codec(enum_cls: type[Enum]) -> Codec:
    def decode(value: Any) -> Enum:
        if isinstance(value, bool):
            raise DecodeError(f"invalid {enum_cls.__name__}: {value!r}")
        try:
            return enum_cls(value)
        except ValueError as exc:
            raise DecodeError(f"invalid {enum_cls.__name__}: {value!r}") from exc

    return Codec(decode, lambda member: member.value, enum_cls.__name__)


def _list_codec(inner: Codec) -> Codec:
    def decode(value: Any) -> list:
        if not isinstance(value, list):
            raise DecodeError(f"expected array, got {value!r}")
        return [inner.decode(item) for item in value]

    return Codec(decode, lambda items: [inner.encode(item) for item in items], f"list[{inner.name}]")


def _map_codec(inner: Codec) -> Codec:
    def decode(value: Any) -> dict:
        if not isinstance(value, dict):
            raise DecodeError(f"expected object, got {value!r}")
        return {key: inner.decode(item) for key, item in value.items()}

    return Codec(
        decode,
        lambda mapping: {key: inner.encode(item) for key, item in mapping.items()},
        f"dict[str, {inner.name}]",
    )


def _resolve(spec: Any) -> Codec:
    if spec is None:
        return ANY
    if isinstance(spec, Codec):
        return spec
    if isinstance(spec, type):
        if issubclass(spec, Model):
            return Codec(spec.from_dict, lambda model: model.to_dict(), spec.__name__)
        if issubclass(spec, Enum):
            return _enum_codec(spec)
        if spec in _BUILTINS:
            return _BUILTINS[spec]
    if isinstance(spec, list) and len(spec) == 1:
        return _list_codec(_resolve(spec[0]))
    if isinstance(spec, dict) and len(spec) == 1:
        (key_type, value_spec), = spec.items()
        if key_type is str:
            return _map_codec(_resolve(value_spec))
    raise TypeError(f"unsupported codec spec: {spec!r}")


def jfield(*, key=None, codec=None, omit_none=False, default=dataclasses.MISSING):
    """Declare a model field with its JSON key, codec and null handling.

    ``codec`` may be a Codec, a Model or Enum subclass, a builtin scalar type,
    ``[spec]`` for a list or ``{str: spec}`` for a string-keyed map.
    """
    meta = {"key": key, "codec": codec, "omit_none": omit_none}
    return dataclasses.field(default=default, metadata={_META: meta})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class _FieldSpec(NamedTuple):
    name: str
    key: str
    codec: Codec
    omit_none: bool
    required: bool


@functools.lru_cache(maxsize=None)
def _specs(cls: type) -> tuple[_FieldSpec, ...]:
    specs = []
    for f in dataclasses.fields(cls):
        meta = f.metadata.get(_META, {})
        specs.append(
            _FieldSpec(
                name=f.name,
                key=meta.get("key") or _camel(f.name),
                codec=_resolve(meta.get("codec")),
                omit_none=meta.get("omit_none", False),
                required=f.default is dataclasses.MISSING
                and f.default_factory is dataclasses.MISSING,
            )
        )
    return tuple(specs)


class Model:
    """Base for dataclass models that map to and from JSON objects."""

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise DecodeError(f"{cls.__name__}: expected object, got {type(data).__name__}")
        kwargs = {}
        for spec in _specs(cls):
            raw = data.get(spec.key)
            if raw is not None:
                try:
                    kwargs[spec.name] = spec.codec.decode(raw)
                except (TypeError, ValueError) as exc:
                    raise DecodeError(f"{cls.__name__}.{spec.key}: {exc}") from exc
            elif spec.required:
                problem = "must not be null" if spec.key in data else "missing field"
                raise DecodeError(f"{cls.__name__}.{spec.key}: {problem}")
        return cls(**kwargs)

    def to_dict(self):
        out: dict[str, Any] = {}
        for spec in _specs(type(self)):
            value = getattr(self, spec.name)
            if value is None:
                if not spec.omit_none:
                    out[spec.key] = None
            else:
                out[spec.key] = spec.codec.encode(value)
        return out

    @classmethod
    def from_json(cls, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)

    def to_json(self):
        return json.dumps(self.to_dict())