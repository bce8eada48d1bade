"""Ordered route registry with request-order verification.

Routes are registered in the order requests are expected to arrive.
Each dispatched request is matched against the first unvisited route
with the same method and path, and any deviation from the script is
recorded as a diagnostic instead of failing the request.

Usage::

    router = Router()
    router.register_resp("GET", "/foo", 200, "Hello")
    router.register_resp("GET", "/bar", 200, "Bonjour")

    with httpx.Client(transport=router.transport(), base_url="http://test") as client:
        client.get("/foo")
        client.get("/bar")

    assert router.verify(RecordingReporter())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ordermux._internal.asgi import Receive, Scope, Send, read_body
from ordermux._internal.types import Handler, Reporter
from ordermux.config import RouterConfig
from ordermux.diagnostics import Diagnostic, out_of_order, unexpected, unvisited
from ordermux.errors import ConfigurationError
from ordermux.http.request import Request
from ordermux.http.response import Response
from ordermux.http.writer import ResponseWriter
from ordermux.routing.handlers import not_found, static_response
from ordermux.routing.route import Route

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    import httpx

logger = logging.getLogger("ordermux.router")


class Router:
    """Registry of expected requests, matched in registration order.

    Not safe for concurrent dispatch: requests must arrive one at a
    time, which is the only way an expected order means anything.
    Hosts that may overlap requests need a lock around ``serve``.
    """

    __slots__ = ("_diagnostics", "_index", "_routes", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig()
        self._routes: list[Route] = []
        self._index = 0
        self._diagnostics: list[Diagnostic] = []

    def __repr__(self) -> str:
        return (
            f"Router(routes={len(self._routes)}, index={self._index}, "
            f"errors={len(self._diagnostics)})"
        )

    def __len__(self) -> int:
        return len(self._routes)

    # -- Registration --

    def register_func(self, method: str, path: str, handler: Handler) -> Route:
        """Register a handler for the given request method and path."""
        if not callable(handler):
            msg = f"Handler for {method} {path} is not callable: {handler!r}"
            raise ConfigurationError(msg)
        route = Route(method=self._method(method), path=path, handler=handler)
        self._routes.append(route)
        logger.debug("registered #%d %s", len(self._routes) - 1, route)
        return route

    def register_resp(self, method: str, path: str, status: int, body: str = "") -> Route:
        """Register a static status code and body for the given method and path.

        The body is written followed by a single newline.
        """
        return self.register_func(method, path, static_response(status, body))

    def route(self, method: str, path: str) -> Callable[[Handler], Handler]:
        """Decorator form of ``register_func``::

            @router.route("POST", "/items")
            def create(w, request):
                w.write_header(201)
        """

        def decorator(handler: Handler) -> Handler:
            self.register_func(method, path, handler)
            return handler

        return decorator

    def _method(self, method: str) -> str:
        return method.upper() if self.config.normalize_methods else method

    # -- Dispatch --

    def serve(self, w: ResponseWriter, request: Request) -> None:
        """Dispatch one request and track whether it arrived in order.

        Always writes a response: the matched route's, or a 404.
        """
        method, path = self._method(request.method), request.path
        try:
            position, route = self._match(method, path)
            if route is not None:
                route.execute(w, request)
                if position != self._index:
                    self._record(out_of_order(method, path))
                else:
                    logger.debug("#%d %s %s matched in order", self._index, method, path)
            else:
                not_found(w, self.config.not_found_body, status=self.config.not_found_status)
                self._record(unexpected(method, path))
        finally:
            self._index += 1

    def dispatch(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        query_string: bytes = b"",
        body: bytes = b"",
    ) -> Response:
        """Serve a request built in-process and return what was written."""
        request = Request.build(method, path, headers=headers, query_string=query_string, body=body)
        w = self.new_writer()
        self.serve(w, request)
        return w.result()

    def new_writer(self) -> ResponseWriter:
        """A fresh writer using this router's default content type."""
        return ResponseWriter(default_content_type=self.config.default_content_type)

    def _match(self, method: str, path: str) -> tuple[int, Route | None]:
        """Return the first unvisited route for ``method path`` and its position."""
        for i, route in enumerate(self._routes):
            if route.matches(method, path):
                return i, route
        return -1, None

    def _record(self, diagnostic: Diagnostic) -> None:
        logger.info("#%d %s", self._index, diagnostic)
        self._diagnostics.append(diagnostic)

    # -- Verification --

    def verify(self, reporter: Reporter) -> bool:
        """Report every recorded problem and return whether there were none.

        Problems include requests received out of order, requests for
        unregistered routes, and routes registered but never requested.
        Unvisited routes are collected on each call, so call this once
        per scenario.
        """
        for route in self._routes:
            if not route.visited:
                self._record(unvisited(route.method, route.path))

        for message in self.errors:
            reporter.error(message)

        return not self._diagnostics

    assert_visited = verify

    # -- Introspection --

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes, in registration order."""
        return tuple(self._routes)

    @property
    def unvisited(self) -> tuple[Route, ...]:
        return tuple(r for r in self._routes if not r.visited)

    @property
    def index(self) -> int:
        """Number of requests dispatched so far."""
        return self._index

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def errors(self) -> list[str]:
        """Recorded diagnostics as reporter messages."""
        return [str(d) for d in self._diagnostics]

    # -- Transports --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Acknowledges lifespan events, serves HTTP scopes, ignores the rest.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        from ordermux.server.sender import send_response

        body = await read_body(receive)
        w = self.new_writer()
        self.serve(w, Request.from_asgi(scope, body))
        await send_response(w.result(), send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def transport(self) -> httpx.MockTransport:
        """An httpx transport that dispatches through this router.

        Works for both ``httpx.Client`` and ``httpx.AsyncClient``.
        """
        from ordermux.transport import mock_transport

        return mock_transport(self)
