"""ASGI response sending — translates an ordermux Response to ASGI messages."""

import logging

from ordermux._internal.asgi import Send
from ordermux.http.response import Response

logger = logging.getLogger("ordermux.server")


async def send_response(response: Response, send: Send) -> None:
    """Translate a recorded Response into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        if name.lower() == "content-length":
            continue
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.wire_body
    if len(body) != len(response.body):
        logger.debug("dropping %d-byte body for status %d", len(response.body), response.status)

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
