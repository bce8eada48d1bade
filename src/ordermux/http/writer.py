"""Response writer handed to route handlers.

Mirrors the usual "set status, then write body" handler contract:
the status line is committed by the first ``write_header`` or ``write``
call, and later status changes are ignored.
"""

import logging

from ordermux.http.response import Response

logger = logging.getLogger("ordermux.server")


class ResponseWriter:
    """Collects status, headers, and body bytes for one response.

    Usage::

        def handler(w: ResponseWriter, request: Request) -> None:
            w.headers.append(("content-type", "application/json"))
            w.write_header(201)
            w.write('{"ok": true}')
    """

    __slots__ = ("_chunks", "_status", "default_content_type", "headers")

    def __init__(self, *, default_content_type: str = "text/plain; charset=utf-8") -> None:
        self.headers: list[tuple[str, str]] = []
        self.default_content_type = default_content_type
        self._status: int | None = None
        self._chunks: list[bytes] = []

    @property
    def status(self) -> int:
        """Committed status code, or 200 if nothing was written yet."""
        return self._status if self._status is not None else 200

    @property
    def committed(self) -> bool:
        return self._status is not None

    def write_header(self, status: int) -> None:
        """Commit the status code. Only the first call takes effect."""
        if self._status is not None:
            logger.warning("superfluous write_header(%d), status already %d", status, self._status)
            return
        self._status = status

    def write(self, data: str | bytes) -> int:
        """Append body data, committing status 200 if not yet set."""
        if self._status is None:
            self._status = 200
        chunk = data.encode("utf-8") if isinstance(data, str) else data
        self._chunks.append(chunk)
        return len(chunk)

    @property
    def body(self) -> bytes:
        return b"".join(self._chunks)

    def result(self) -> Response:
        """Snapshot the written response.

        The ``content-type`` header, if set, is lifted into
        ``Response.content_type``; all other headers are kept in order.
        """
        content_type = self.default_content_type
        extra: list[tuple[str, str]] = []
        for name, value in self.headers:
            if name.lower() == "content-type":
                content_type = value
            else:
                extra.append((name, value))
        return Response(
            body=self.body,
            status=self.status,
            content_type=content_type,
            headers=tuple(extra),
        )
