"""Services that turn a zipcode into the current weather of its city."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .api_clients import ClientsContainer
from .errors import WeatherNotFoundError, ZipcodeNotFoundError
from .models import AddressResponse, Weather


class _CepServiceLike(Protocol):
    def get_address(self, cep: str) -> AddressResponse:
        ...

    def get_cep_weather_info(self, cep: str) -> Weather:
        ...


class _WeatherServiceLike(Protocol):
    def get_weather(self, city: str) -> Weather:
        ...


@dataclass
class ServicesContainer:
    """Holds the services so that they can reach one another."""

    cep_service: _CepServiceLike | None = None
    weather_service: _WeatherServiceLike | None = None


class CepService:
    """Resolves zipcodes and the weather at their address."""

    def __init__(self, clients: ClientsContainer, services: ServicesContainer) -> None:
        self.clients = clients
        self.services = services

    def get_address(self, cep: str) -> AddressResponse:
        return self.clients.via_cep_api.get_address(cep)

    def get_cep_weather_info(self, cep: str) -> Weather:
        """Return the weather of the zipcode's city.

        Raises ZipcodeNotFoundError when the zipcode has no city.
        """
        address = self.get_address(cep)
        city = address.address.city
        if not city:
            raise ZipcodeNotFoundError()
        return self.services.weather_service.get_weather(city)


class WeatherService:
    """Fetches current weather and expresses it in three scales."""

    def __init__(self, clients: ClientsContainer, services: ServicesContainer) -> None:
        self.clients = clients
        self.services = services

    def get_weather(self, city: str) -> Weather:
        """Return the city's temperature; raises WeatherNotFoundError on no answer."""
        response = self.clients.weather_api.get_weather(city)
        if response is None:
            raise WeatherNotFoundError()
        return Weather.from_celsius(response.current.temp_c)


def new_services_container(clients: ClientsContainer) -> ServicesContainer:
    """Build every service over ``clients`` and link them through one container."""
    container = ServicesContainer()
    container.weather_service = WeatherService(clients, container)
    container.cep_service = CepService(clients, container)
    return container