"""Data carried between the external APIs, the services and the HTTP layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CepOrigin(str, Enum):
    """Where an address came from."""

    VIA_CEP = "Via Cep API"


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _number_field(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


@dataclass(frozen=True)
class Address:
    cep: str = ""
    state: str = ""
    city: str = ""
    neighborhood: str = ""
    street: str = ""


@dataclass(frozen=True)
class AddressResponse:
    address: Address
    origin: CepOrigin


@dataclass(frozen=True)
class ViaCepAddressResponse:
    """An address as the ViaCep API describes it."""

    cep: str = ""
    street: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    estado: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ViaCepAddressResponse:
        """Build from a decoded ViaCep JSON object; missing fields become empty."""
        data = _require_mapping(data, "address")
        return cls(
            cep=_string_field(data, "cep"),
            street=_string_field(data, "logradouro"),
            neighborhood=_string_field(data, "bairro"),
            city=_string_field(data, "localidade"),
            state=_string_field(data, "uf"),
            estado=_string_field(data, "estado"),
        )

    def to_address_response(self) -> AddressResponse:
        return AddressResponse(
            address=Address(
                cep=self.cep,
                state=self.state,
                city=self.city,
                neighborhood=self.neighborhood,
                street=self.street,
            ),
            origin=CepOrigin.VIA_CEP,
        )


@dataclass(frozen=True)
class CurrentWeather:
    temp_c: float = 0.0


@dataclass(frozen=True)
class WeatherResponse:
    """Current conditions as returned by the weather API."""

    current: CurrentWeather = field(default_factory=CurrentWeather)

    @classmethod
    def from_dict(cls, data: Any) -> WeatherResponse:
        data = _require_mapping(data, "weather")
        current = data.get("current")
        if current is None:
            return cls()
        current = _require_mapping(current, "current")
        return cls(current=CurrentWeather(temp_c=_number_field(current, "temp_c")))


@dataclass(frozen=True)
class Weather:
    """A temperature in Celsius, Fahrenheit and Kelvin."""

    temp_c: float
    temp_f: float
    temp_k: float

    @classmethod
    def from_celsius(cls, temp_c: float) -> Weather:
        return cls(temp_c=temp_c, temp_f=(temp_c * 1.8) + 32, temp_k=temp_c + 273)


def _serialise(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


@dataclass(frozen=True)
class HttpErrorResponse:
    message: str
    status: int

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "status": self.status}


@dataclass(frozen=True)
class HttpResponse:
    """Envelope for every JSON answer; empty members are left out."""

    data: Any = None
    error: Any = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.data is not None:
            result["data"] = _serialise(self.data)
        if self.error is not None:
            result["error"] = _serialise(self.error)
        return result