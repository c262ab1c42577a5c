"""A small JSON-accepting HTTP GET client bound to a base URL."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol
from urllib.error import HTTPError, URLError
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit
from urllib.request import Request, urlopen

from .errors import RequestTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    """Status, body and headers of a finished request."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        return json.loads(self.body)


class HttpGetter(Protocol):
    def get(self, path: str, query_params: Mapping[str, str] | None = None) -> Response:
        ...


class HttpClient:
    """Issues GET requests below ``base_url``, optionally with a timeout in seconds."""

    def __init__(self, base_url: str, timeout: float | None = None) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def _build_url(self, path: str, query_params: Mapping[str, str] | None) -> str:
        parts = urlsplit(self.base_url + path)
        pairs = parse_qsl(parts.query, keep_blank_values=True)
        pairs.extend((query_params or {}).items())
        pairs.sort(key=lambda pair: pair[0])
        return urlunsplit(parts._replace(query=urlencode(pairs)))

    def _fetch(self, request: Request) -> Response:
        options = {} if self.timeout is None else {"timeout": self.timeout}
        try:
            with urlopen(request, **options) as raw:
                return Response(raw.status, raw.read(), dict(raw.headers.items()))
        except HTTPError as exc:
            try:
                headers = dict(exc.headers.items()) if exc.headers else {}
                return Response(exc.code, exc.read(), headers)
            finally:
                exc.close()

    def get(self, path: str, query_params: Mapping[str, str] | None = None) -> Response:
        """Send a GET request; any HTTP status is returned, not raised."""
        request = Request(
            self._build_url(path, query_params),
            headers={"Accept": "application/json"},
            method="GET",
        )
        try:
            response = self._fetch(request)
        except TimeoutError as exc:
            raise RequestTimeoutError() from exc
        except URLError as exc:
            if isinstance(exc.reason, TimeoutError):
                raise RequestTimeoutError() from exc
            raise
        if response.status_code == 408:
            logger.warning("erro: request finished with timeout")
        return response