"""Exceptions raised while resolving a zipcode into weather information."""

from __future__ import annotations


class CepWeatherError(Exception):
    """Base class for every error raised by this package."""

    default_message = "cep weather error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    @property
    def message(self) -> str:
        return str(self)


class ZipcodeNotFoundError(CepWeatherError):
    """The zipcode lookup returned no city."""

    default_message = "can not find zipcode"


class WeatherNotFoundError(CepWeatherError):
    """The weather service returned nothing for a city."""

    default_message = "weather not found"


class AddressLookupError(CepWeatherError):
    """The address service answered with a non-success status."""

    default_message = "ERROR_GETTING_ADDRESS"


class WeatherLookupError(CepWeatherError):
    """The weather service answered with a non-success status."""

    default_message = "ERROR_GETTING_WEATHER"


class RequestTimeoutError(CepWeatherError):
    """An outgoing request did not finish before its deadline."""

    default_message = "context deadline exceeded"