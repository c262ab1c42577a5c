import json
from http import HTTPStatus

import pytest

from cepweather.handlers import CepHandler, HandlerContainer
from cepweather.models import Weather
from cepweather.server import build_app, create_app, main
from cepweather.services import ServicesContainer


class _FakeCepService:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def get_cep_weather_info(self, cep):
        self.calls.append(cep)
        return self.result


def _call(app, path, query=""):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app({"PATH_INFO": path, "QUERY_STRING": query}, start_response))
    return captured["status"], captured["headers"], body


def _app(weather):
    service = _FakeCepService(weather)
    handlers = HandlerContainer(cep_handler=CepHandler(ServicesContainer(cep_service=service)))
    return create_app(handlers), service


def test_address_info_route_reaches_handler():
    app, service = _app(Weather(temp_c=25.0, temp_f=77.0, temp_k=298.0))

    status, _, body = _call(app, "/address-info", "cep=12345678")

    assert status.split()[0] == str(HTTPStatus.OK.value)
    assert json.loads(body) == {"data": {"temp_c": 25.0, "temp_f": 77.0, "temp_k": 298.0}}
    assert service.calls == ["12345678"]


@pytest.mark.parametrize("path", ["/", "/address-info/", "/other", ""])
def test_unknown_paths_are_not_found(path):
    app, service = _app(Weather.from_celsius(25.0))

    status, headers, body = _call(app, path, "cep=12345678")

    assert status.split()[0] == str(HTTPStatus.NOT_FOUND.value)
    assert body == b"404 page not found\n"
    assert headers["Content-Length"] == str(len(body))
    assert service.calls == []


def test_build_app_rejects_invalid_zipcode_without_network():
    app = build_app("placeholder")

    status, _, body = _call(app, "/address-info", "cep=123")

    assert status.split()[0] == str(HTTPStatus.UNPROCESSABLE_ENTITY.value)
    assert json.loads(body) == "invalid zipcode"


def test_main_requires_api_key(monkeypatch):
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == "WEATHER_API_KEY environment variable is not set"


def test_main_rejects_invalid_port(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "placeholder")
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert "not-a-port" in str(excinfo.value.code)


def test_main_rejects_unknown_arguments(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "placeholder")

    with pytest.raises(SystemExit) as excinfo:
        main(["--unknown"])
    assert excinfo.value.code == 2