"""The JSON-RPC HTTP front end of the simulator."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlsplit

from hivemimic.api.services.account_history import AccountHistoryApi
from hivemimic.api.services.base import ServiceHandler
from hivemimic.api.services.block_api import BlockApi
from hivemimic.api.services.condenser import Condenser
from hivemimic.api.services.rc import RcApi

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
BANNER = b"hivemimic v1.0.0; Hive blockchain end to end simulation."

_TEXT_PLAIN = "text/plain; charset=utf-8"
_JSON_WHITESPACE = " \t\n\r"
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Response:
    """An HTTP reply produced by ``ApiServer.handle``."""

    status: int
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


def _error(message: str, status: int) -> Response:
    return Response(
        status,
        (message + "\n").encode("utf-8"),
        {"Content-Type": _TEXT_PLAIN, "X-Content-Type-Options": "nosniff"},
    )


def _encode_json(value: Any) -> bytes:
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return (text + "\n").encode("utf-8")


RpcHandler = Callable[[Any], Any]


class ApiServer:
    """Routes JSON-RPC calls of the form ``service.method`` to registered services."""

    def __init__(self) -> None:
        self.rpc_routes: Dict[str, RpcHandler] = {}
        self.services: Dict[str, ServiceHandler] = {}
        self._routes: Optional[Dict[str, Dict[str, Callable[[bytes], Response]]]] = None

    def register_method(self, alias: str, method_name: str, service: Any) -> RpcHandler:
        """Return the bound method ``method_name`` of ``service``."""
        handler = getattr(service, method_name, None)
        if method_name.startswith("_") or not callable(handler):
            raise AttributeError(f"method not found: {method_name}")
        logger.info("Method registered. methodName=%s alias=%s", method_name, alias)
        return handler

    def register_service(self, service: ServiceHandler, name: str) -> None:
        """Expose every method ``service`` offers under ``name.<alias>``."""

        def _register(alias: str, method_name: str) -> None:
            self.rpc_routes[f"{name}.{alias}"] = self.register_method(
                alias, method_name, service
            )
            self.services[name] = service

        service.expose(_register)

    def register_default_services(self) -> None:
        """Register the condenser, rc, block and account history services."""
        self.register_service(Condenser(), "condenser_api")
        self.register_service(RcApi(), "rc_api")
        self.register_service(BlockApi(), "block_api")
        self.register_service(AccountHistoryApi(), "account_history_api")

    def init(self) -> None:
        """Set up the HTTP routes."""
        self._routes = {
            "/": {"GET": self._index, "POST": self._rpc},
            "/health": {"GET": self._health},
        }

    def handle(self, method: str, path: str, body: bytes = b"") -> Response:
        """Answer one HTTP request."""
        if self._routes is None:
            raise RuntimeError("server routes are not initialised; call init() first")
        route = self._routes.get(urlsplit(path).path or "/")
        if route is None:
            return _error("404 page not found", 404)
        handler = route.get(method.upper())
        if handler is None:
            return Response(405)
        return handler(body)

    def _index(self, body: bytes) -> Response:
        return Response(200, BANNER, {"Content-Type": _TEXT_PLAIN})

    def _health(self, body: bytes) -> Response:
        return Response(200)

    def _rpc(self, body: bytes) -> Response:
        text = body.decode("utf-8", errors="replace").lstrip(_JSON_WHITESPACE)
        try:
            request, _ = json.JSONDecoder().raw_decode(text)
        except ValueError:
            return _error("invalid request", 400)
        if request is None:
            request = {}
        if not isinstance(request, dict):
            return _error("invalid request", 400)

        method = request.get("method")
        if not isinstance(method, str):
            return _error("invalid method", 400)

        handler = self.rpc_routes.get(method)
        if handler is None:
            return _error("method not found", 404)

        try:
            result = handler(request.get("params"))
        except ValueError as exc:
            logger.info("Failed to decode params. method=%s error=%s", method, exc)
            return _error("failed to decode params", 400)
        except Exception:
            logger.exception("RPC method failed. method=%s", method)
            return _error("internal server error", 500)

        envelope = {"id": request.get("id"), "jsonrpc": "2.0", "result": result}
        return Response(200, _encode_json(envelope), {"Content-Type": "application/json"})

    def make_server(self, host: str = "", port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
        """Return an HTTP server bound to ``host:port`` that serves this API."""
        if self._routes is None:
            raise RuntimeError("server routes are not initialised; call init() first")
        api = self

        class _Handler(BaseHTTPRequestHandler):
            def _dispatch(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length > 0 else b""
                reply = api.handle(self.command, self.path, body)
                self.send_response(reply.status)
                for name, value in reply.headers.items():
                    self.send_header(name, value)
                self.send_header("Content-Length", str(len(reply.body)))
                self.end_headers()
                self.wfile.write(reply.body)

            do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _dispatch

            def log_message(self, format: str, *args: Any) -> None:
                logger.debug(format, *args)

        return ThreadingHTTPServer((host, port), _Handler)

    def start(self, port: int = DEFAULT_PORT) -> None:
        """Register the default services and serve requests until interrupted."""
        self.register_default_services()
        server = self.make_server("", port)
        logger.info("APIServer accepting requests. port=%d", server.server_address[1])
        try:
            server.serve_forever()
        finally:
            server.server_close()