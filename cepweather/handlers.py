"""HTTP handlers answering zipcode weather queries as WSGI applications."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from http import HTTPStatus
from typing import Any, Callable, Iterable
from urllib.parse import parse_qs

from .errors import WeatherNotFoundError, ZipcodeNotFoundError
from .models import HttpErrorResponse, HttpResponse
from .services import ServicesContainer

INVALID_ZIPCODE = "invalid zipcode"
ZIPCODE_LENGTH = 8

_JSON_TYPE = "application/json"
_TEXT_TYPE = "text/plain; charset=utf-8"
_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}


def round_to(x: float, decimals: int) -> float:
    """Round ``x`` to ``decimals`` places, halves away from zero."""
    factor = math.pow(10, decimals)
    scaled = x * factor
    if not math.isfinite(scaled):
        return scaled / factor
    rounded = Decimal(scaled).to_integral_value(rounding=ROUND_HALF_UP)
    return float(rounded) / factor


def _compact_numbers(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {key: _compact_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_compact_numbers(item) for item in value]
    return value


def _encode(payload: Any) -> bytes:
    text = json.dumps(
        _compact_numbers(payload), separators=(",", ":"), ensure_ascii=False
    )
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return (text + "\n").encode("utf-8")


def _error_payload(message: str, status: HTTPStatus) -> dict[str, Any]:
    return HttpResponse(
        data=None, error=HttpErrorResponse(message=message, status=int(status))
    ).to_dict()


class CepHandler:
    """Answers ``?cep=`` queries with the temperature at that zipcode."""

    def __init__(self, services: ServicesContainer) -> None:
        self.cep_service = services.cep_service

    def get_address_info(self, cep: str) -> tuple[HTTPStatus, Any]:
        """Return the status and the JSON-ready payload for ``cep``."""
        if len(cep.encode("utf-8")) != ZIPCODE_LENGTH:
            return HTTPStatus.UNPROCESSABLE_ENTITY, INVALID_ZIPCODE
        try:
            weather = self.cep_service.get_cep_weather_info(cep)
        except (ZipcodeNotFoundError, WeatherNotFoundError) as exc:
            return HTTPStatus.NOT_FOUND, _error_payload(
                str(exc), HTTPStatus.NOT_FOUND
            )
        except Exception as exc:  # any failure upstream becomes a 500 answer
            return HTTPStatus.INTERNAL_SERVER_ERROR, _error_payload(
                str(exc), HTTPStatus.INTERNAL_SERVER_ERROR
            )
        data = {
            "temp_c": round_to(weather.temp_c, 2),
            "temp_f": round_to(weather.temp_f, 2),
            "temp_k": round_to(weather.temp_k, 2),
        }
        return HTTPStatus.OK, HttpResponse(data=data, error=None).to_dict()

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        query = parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)
        cep = query.get("cep", [""])[0]
        status, payload = self.get_address_info(cep)
        body = _encode(payload)
        content_type = _JSON_TYPE if status is HTTPStatus.OK else _TEXT_TYPE
        start_response(
            f"{status.value} {status.phrase}",
            [("Content-Type", content_type), ("Content-Length", str(len(body)))],
        )
        return [body]


@dataclass(frozen=True)
class HandlerContainer:
    cep_handler: CepHandler


def new_handler_container(services: ServicesContainer) -> HandlerContainer:
    return HandlerContainer(cep_handler=CepHandler(services))