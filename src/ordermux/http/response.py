"""Immutable snapshot of a response written by a handler."""

from dataclasses import dataclass


def body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response as recorded by a ``ResponseWriter``.

    Transports translate this into their own response type; tests assert
    on it directly.
    """

    body: bytes = b""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8")

    @property
    def wire_body(self) -> bytes:
        """Body as a transport sends it: empty for no-body statuses."""
        return self.body if body_allowed(self.status) else b""

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None
