"""Clients for the address (ViaCep) and weather APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .errors import AddressLookupError, WeatherLookupError
from .http_client import HttpClient, HttpGetter
from .models import AddressResponse, ViaCepAddressResponse, WeatherResponse

VIA_CEP_BASE_URL = "http://viacep.com.br/ws"
WEATHER_API_BASE_URL = "http://api.weatherapi.com/v1"


class ViaCepApi(Protocol):
    def get_address(self, cep: str) -> AddressResponse:
        ...


class WeatherApi(Protocol):
    def get_weather(self, city: str) -> WeatherResponse | None:
        ...


class ViaCepApiClient:
    """Looks up a Brazilian zipcode."""

    def __init__(self, http_client: HttpGetter) -> None:
        self.http_client = http_client

    def get_address(self, cep: str) -> AddressResponse:
        response = self.http_client.get(f"/{cep}/json", None)
        parsed = ViaCepAddressResponse.from_dict(response.json())
        if response.status_code == 200:
            return parsed.to_address_response()
        raise AddressLookupError()


class WeatherApiClient:
    """Fetches the current weather of a city."""

    def __init__(self, http_client: HttpGetter, api_key: str) -> None:
        self.http_client = http_client
        self.api_key = api_key

    def get_weather(self, city: str) -> WeatherResponse:
        params = {"key": self.api_key, "q": city}
        response = self.http_client.get("/current.json", params)
        if response.status_code != 200:
            raise WeatherLookupError()
        return WeatherResponse.from_dict(response.json())


@dataclass(frozen=True)
class ClientsConfig:
    weather_api_key: str


@dataclass
class ClientsContainer:
    via_cep_api: ViaCepApi | None = None
    weather_api: WeatherApi | None = None


def new_clients_container(config: ClientsConfig) -> ClientsContainer:
    """Wire both API clients to their public endpoints."""
    return ClientsContainer(
        via_cep_api=ViaCepApiClient(HttpClient(VIA_CEP_BASE_URL, None)),
        weather_api=WeatherApiClient(
            HttpClient(WEATHER_API_BASE_URL, None), config.weather_api_key
        ),
    )