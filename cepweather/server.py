"""Command that serves the zipcode weather endpoint over HTTP."""

from __future__ import annotations

import argparse
import logging
import os
from socketserver import ThreadingMixIn
from typing import Any, Callable, Iterable
from wsgiref.simple_server import WSGIServer, make_server

from .api_clients import ClientsConfig, new_clients_container
from .handlers import HandlerContainer, new_handler_container
from .services import new_services_container

logger = logging.getLogger(__name__)

ADDRESS_INFO_PATH = "/address-info"
DEFAULT_PORT = "8080"

WsgiApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


def create_app(handlers: HandlerContainer) -> WsgiApp:
    """Route requests for the address-info path to the zipcode handler."""
    routes = {ADDRESS_INFO_PATH: handlers.cep_handler}

    def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        handler = routes.get(environ.get("PATH_INFO", ""))
        if handler is not None:
            return handler(environ, start_response)
        body = b"404 page not found\n"
        start_response(
            "404 Not Found",
            [
                ("Content-Type", "text/plain; charset=utf-8"),
                ("X-Content-Type-Options", "nosniff"),
                ("Content-Length", str(len(body))),
            ],
        )
        return [body]

    return app


def build_app(api_key: str) -> WsgiApp:
    """Wire clients, services and handlers into a WSGI application."""
    clients = new_clients_container(ClientsConfig(weather_api_key=api_key))
    services = new_services_container(clients)
    return create_app(new_handler_container(services))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cepweather",
        description="Serve the current temperature for a Brazilian zipcode. "
        "Reads WEATHER_API_KEY and PORT from the environment.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    api_key = os.environ.get("WEATHER_API_KEY", "")
    if not api_key:
        raise SystemExit("WEATHER_API_KEY environment variable is not set")

    port_text = os.environ.get("PORT") or DEFAULT_PORT
    try:
        port = int(port_text)
    except ValueError:
        raise SystemExit(f"invalid PORT: {port_text!r}") from None

    app = build_app(api_key)
    logger.info("Starting server on port %s", port_text)
    try:
        server = make_server("", port, app, server_class=_ThreadingWSGIServer)
    except OSError as exc:
        logger.error("cannot listen on port %s: %s", port_text, exc)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())