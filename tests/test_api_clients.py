import json

import pytest

from cepweather.api_clients import (
    ClientsConfig,
    ViaCepApiClient,
    WeatherApiClient,
    new_clients_container,
)
from cepweather.errors import AddressLookupError, RequestTimeoutError, WeatherLookupError
from cepweather.http_client import Response
from cepweather.models import CepOrigin, WeatherResponse


class FakeHttp:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, path, query_params=None):
        self.calls.append((path, query_params))
        if self.error is not None:
            raise self.error
        return self.response


def _json_response(status, payload):
    return Response(status, json.dumps(payload).encode())


ADDRESS_PAYLOAD = {
    "cep": "12345678",
    "logradouro": "Test Street",
    "bairro": "Test Neighborhood",
    "localidade": "Test City",
    "uf": "TS",
}


def test_get_address_requests_cep_path():
    http = FakeHttp(_json_response(200, ADDRESS_PAYLOAD))
    ViaCepApiClient(http).get_address("12345678")
    assert http.calls == [("/12345678/json", None)]


def test_get_address_converts_response():
    http = FakeHttp(_json_response(200, ADDRESS_PAYLOAD))
    result = ViaCepApiClient(http).get_address("12345678")
    assert result.address.city == "Test City"
    assert result.address.street == "Test Street"
    assert result.origin is CepOrigin.VIA_CEP


def test_get_address_non_success_raises():
    http = FakeHttp(_json_response(400, {}))
    with pytest.raises(AddressLookupError):
        ViaCepApiClient(http).get_address("12345678")


def test_get_address_invalid_json_raises_value_error():
    http = FakeHttp(Response(400, b"<html>bad request</html>"))
    with pytest.raises(ValueError):
        ViaCepApiClient(http).get_address("12345678")


def test_get_address_propagates_transport_errors():
    http = FakeHttp(error=RequestTimeoutError())
    with pytest.raises(RequestTimeoutError):
        ViaCepApiClient(http).get_address("12345678")


def test_get_weather_sends_key_and_city():
    api_key = "placeholder"
    http = FakeHttp(_json_response(200, {"current": {"temp_c": 25.0}}))
    WeatherApiClient(http, api_key).get_weather("Test City")
    assert http.calls == [("/current.json", {"key": api_key, "q": "Test City"})]


def test_get_weather_parses_temperature():
    http = FakeHttp(_json_response(200, {"current": {"temp_c": 25.0}}))
    result = WeatherApiClient(http, "placeholder").get_weather("Test City")
    assert result == WeatherResponse.from_dict({"current": {"temp_c": 25.0}})
    assert result.current.temp_c == 25.0


def test_get_weather_non_success_raises_before_parsing():
    http = FakeHttp(Response(403, b"not json"))
    with pytest.raises(WeatherLookupError):
        WeatherApiClient(http, "placeholder").get_weather("Test City")


def test_new_clients_container_wires_clients():
    api_key = "placeholder"
    container = new_clients_container(ClientsConfig(weather_api_key=api_key))
    assert container.weather_api.api_key == api_key
    assert container.via_cep_api.http_client.base_url == "http://viacep.com.br/ws"
    assert container.weather_api.http_client.base_url == "http://api.weatherapi.com/v1"
    assert container.weather_api.http_client.timeout is None