# cepweather

A small HTTP service that takes a Brazilian zipcode (CEP), finds its city
through the ViaCEP API and returns the current temperature there, as reported
by WeatherAPI, in Celsius, Fahrenheit and Kelvin. It has no dependencies
beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

## Running the server

The service needs a WeatherAPI key in the `WEATHER_API_KEY` environment
variable; without it the command exits with an error. It listens on all
interfaces, on the port given by `PORT`, or 8080 when that is unset.

```
WEATHER_API_KEY=placeholder PORT=8080 cepweather
```

The command takes no options other than `--help`. `python -m cepweather.server`
does the same. Requests are served in threads by the standard library's WSGI
server; stop it with Ctrl-C.

## The endpoint

`GET /address-info?cep=<zipcode>`

Every answer is a single line of compact JSON followed by a newline. Any other
path answers `404` with the plain text `404 page not found`.

A successful lookup answers `200` (`Content-Type: application/json`) with the
temperatures rounded to two decimals, halves away from zero. Whole numbers are
written without a decimal part:

```json
{"data":{"temp_c":25,"temp_f":77,"temp_k":298}}
```

Fahrenheit is `C * 1.8 + 32` and Kelvin is `C + 273`.

Errors (sent with `Content-Type: text/plain; charset=utf-8`):

- `422` with the JSON string `"invalid zipcode"` when `cep` is missing or is
  not exactly 8 bytes long. The zipcode is otherwise not checked.
- `404` with `{"error":{"message":"can not find zipcode","status":404}}` when
  the zipcode lookup returns no city, or with the message `weather not found`
  when the weather client returns nothing.
- `500` with the same shape and the error's message for any other failure,
  for instance `ERROR_GETTING_ADDRESS` or `ERROR_GETTING_WEATHER` when an
  upstream API answers with a status other than 200, or
  `context deadline exceeded` when a request times out.

## Using it as a library

```python
from cepweather.server import build_app

app = build_app(api_key="placeholder")  # a WSGI application
```

The pieces can also be assembled by hand, for example with stub clients:

- `cepweather.api_clients` — `ViaCepApiClient`, `WeatherApiClient`,
  `ClientsContainer`, `ClientsConfig` and `new_clients_container`, which wires
  both clients to the public endpoints. Any object with
  `get(path, query_params)` returning a `cepweather.http_client.Response` can
  stand in for the HTTP client.
- `cepweather.http_client.HttpClient(base_url, timeout)` — a GET client that
  sends `Accept: application/json` and returns every HTTP status rather than
  raising; a timeout raises `RequestTimeoutError`.
- `cepweather.services` — `CepService`, `WeatherService` and
  `new_services_container(clients)`.
- `cepweather.handlers` — `CepHandler`, whose `get_address_info(cep)` returns
  the status and payload and which is itself a WSGI application;
  `new_handler_container(services)` and `round_to(x, decimals)`.
- `cepweather.server.create_app(handlers)` — routes `/address-info` to the
  handler.
- `cepweather.models` — the dataclasses passed between layers, including
  `Weather.from_celsius`.
- `cepweather.errors` — `CepWeatherError` and its subclasses
  `ZipcodeNotFoundError`, `WeatherNotFoundError`, `AddressLookupError`,
  `WeatherLookupError` and `RequestTimeoutError`.

## What it does not do

There is no caching of lookups, no retrying of failed requests and no
configuration beyond the two environment variables. The outgoing clients built
by `new_clients_container` use no timeout.

## Running the tests

```
pip install .[test]
pytest
```