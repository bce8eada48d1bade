"""Immutable HTTP request handed to route handlers.

Unlike a server-side request, the body is read eagerly: handlers run
synchronously inside dispatch and must not await anything.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

from ordermux._internal.asgi import Scope
from ordermux.http.headers import Headers

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` and ``path`` are what the router matches on. Everything
    else is metadata for handlers that want to inspect what the client sent.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: bytes = b""
    body: bytes = b""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def query(self) -> dict[str, list[str]]:
        """Parsed query string (name -> all values)."""
        return parse_qs(self.query_string.decode("latin-1"), keep_blank_values=True)

    @property
    def url(self) -> str:
        """Path plus query string, as the client requested it."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Parse the body as JSON."""
        import json as json_module

        return json_module.loads(self.body)

    # -- Factories --

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        query_string: bytes = b"",
        body: bytes = b"",
    ) -> Request:
        """Create a Request directly, without a transport."""
        if headers is None:
            pairs: Iterable[tuple[str, str]] = ()
        elif isinstance(headers, Mapping):
            pairs = headers.items()
        else:
            pairs = headers
        return cls(
            method=method,
            path=path,
            headers=Headers(pairs),
            query_string=query_string,
            body=body,
        )

    @classmethod
    def from_asgi(cls, scope: Scope, body: bytes = b"") -> Request:
        """Create a Request from an ASGI HTTP scope and its drained body."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers.from_raw(scope.get("headers", ())),
            query_string=scope.get("query_string", b""),
            body=body,
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )

    @classmethod
    def from_httpx(cls, request: httpx.Request) -> Request:
        """Create a Request from an ``httpx.Request`` whose body was read."""
        return cls(
            method=request.method,
            path=request.url.path,
            headers=Headers(request.headers.multi_items()),
            query_string=request.url.query,
            body=request.content,
        )
