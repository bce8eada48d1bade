"""Handler builders for static and not-found responses."""

from ordermux._internal.types import Handler
from ordermux.http.request import Request
from ordermux.http.writer import ResponseWriter


def static_response(status: int, body: str) -> Handler:
    """Build a handler that writes *status*, then *body* plus one newline.

    Register a full handler instead when the exact body bytes matter.
    """

    def handler(w: ResponseWriter, request: Request) -> None:
        w.write_header(status)
        w.write(body + "\n")

    handler.__qualname__ = f"static_response({status})"
    return handler


def not_found(w: ResponseWriter, body: str, *, status: int = 404) -> None:
    """Write the response for a request no route accepted."""
    w.headers.append(("content-type", "text/plain; charset=utf-8"))
    w.headers.append(("x-content-type-options", "nosniff"))
    w.write_header(status)
    w.write(body)
