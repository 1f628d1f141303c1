# schwab_market

Typed Python models for the JSON documents returned by the Schwab market data
API. It covers quotes, price history candles, option chains, expiration
chains, instruments, market hours, movers and error responses.

Every model decodes from the plain dictionaries that `json.loads` produces.
It encodes back to the same shape and keeps the API's camelCase keys,
millisecond timestamps and ISO-8601 dates. The package needs only the Python
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `schwab_market.codec` | `Model` base class, `Codec`, `jfield`, timestamp helpers |
| `schwab_market.errors` | `SchwabError`, `DecodeError`, `ResponseError`, `QuoteRequestError` |
| `schwab_market.error_response` | `ErrorResponse`, `ApiError`, `ErrorSource`, `StatusCode` |
| `schwab_market.candle_list` | `CandleList`, `Candle` |
| `schwab_market.mover` | `Mover`, `Screener`, `Direction` |
| `schwab_market.market` | `Hours`, `Interval`, `MarketType`, `parse_markets`, `dump_markets` |
| `schwab_market.instrument` | `Instruments`, `InstrumentResponse`, `FundamentalInst`, `Instrument`, `Bond`, `InstrumentAssetType` |
| `schwab_market.expiration_chain` | `ExpirationChain`, `Expiration` |
| `schwab_market.option_chain` | `OptionChain`, `OptionContract`, `Underlying`, `OptionDeliverable`, `Strategy`, `ExchangeName`, `PutCall` |
| `schwab_market.quotes.quote_response` | `QuoteResponse`, `QuoteResponseMap`, `AssetMainType` |
| `schwab_market.quotes.equity`, `.forex`, `.future`, `.future_option`, `.index`, `.mutual_fund`, `.option` | Quote payloads for each asset class |
| `schwab_market.quotes.quote_error` | `QuoteError` |

## Decoding responses

Models derive from `schwab_market.codec.Model`. It provides the class
methods `from_dict` and `from_json` and the methods `to_dict` and `to_json`.

```python
from schwab_market.candle_list import CandleList

history = CandleList.from_json(response_text)
for candle in history.candles:
    print(candle.datetime, candle.open, candle.close, candle.volume)

# Encoding returns the API's own layout.
payload = history.to_dict()
```

Millisecond timestamps decode to timezone-aware UTC `datetime` objects.
Use `millis_to_datetime`, `datetime_to_millis`, `parse_iso_datetime` and
`format_iso_datetime` in `schwab_market.codec` to do these conversions
yourself.

### Quotes

A quote response maps each symbol to a quote of one asset class. The
`assetMainType` key of each quote selects the asset class. `QuoteResponseMap`
holds the quotes and any partial errors reported for the request:

```python
import json
from schwab_market.quotes.quote_response import QuoteResponseMap

quotes = QuoteResponseMap.from_dict(json.loads(response_text))
aapl = quotes.responses["AAPL"]
print(aapl.symbol(), aapl.last_price(), aapl.bid_price(), aapl.ask_price())
print(aapl.trade_time())
if quotes.errors is not None:
    print("invalid symbols:", quotes.errors.invalid_symbols)
```

`QuoteResponse` offers one set of accessors for equities, forex, futures,
future options, indices, mutual funds and options. The payload is in its
`payload` attribute and the asset class is in `asset_main_type`. An accessor
returns `None` where the asset class has no such value. For example,
`ask_time()` returns `None` for an index, and `high_price()` returns `None`
for a mutual fund.

`AssetMainType.BOND` is recognised but cannot be decoded. A bond quote
raises `DecodeError`.

### Market hours

Market hours form a nested mapping from market name to product to `Hours`.
The module therefore has helper functions in place of a model class:

```python
from schwab_market.market import parse_markets, dump_markets

markets = parse_markets(json.loads(response_text))
hours = markets["equity"]["EQ"]
print(hours.date, hours.is_open)
data = dump_markets(markets)
```

### Instruments

`FundamentalInst` date fields use the `YYYY-MM-DD HH:MM:SS[.fff]` format.
They decode to naive `datetime` objects through
`schwab_market.instrument.parse_fundamental_date`, and
`format_fundamental_date` encodes them again. The JSON `type` key appears as
the attribute `type_`.

## Errors

Every decoding failure raises `schwab_market.errors.DecodeError`, which is a
subclass of both `SchwabError` and `ValueError`. This covers malformed JSON,
missing or null required fields, values of the wrong type and unknown enum
values.

`ResponseError` carries an error response as its `response` attribute.
`QuoteRequestError` carries a `QuoteError` as its `error` attribute. The
package defines both classes for callers to raise and never raises them
itself.

The API's structured error body decodes into
`schwab_market.error_response.ErrorResponse`.

## What this package does not do

The package only describes and converts response data. It has none of the
following:

- an HTTP client
- OAuth token handling
- a local callback server
- rate limiting
- models for accounts, orders, transactions or user preferences

Fetch the JSON with any client you like and pass it to the models.