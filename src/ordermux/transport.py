"""httpx transport adapter.

Lets any ``httpx.Client`` or ``httpx.AsyncClient`` talk to a Router
in-process, with no sockets involved::

    client = httpx.Client(transport=router.transport(), base_url="http://test")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ordermux.http.request import Request

if TYPE_CHECKING:
    from ordermux.routing.router import Router


def mock_transport(router: Router) -> httpx.MockTransport:
    """Build an ``httpx.MockTransport`` that dispatches through *router*."""

    def handle(request: httpx.Request) -> httpx.Response:
        w = router.new_writer()
        router.serve(w, Request.from_httpx(request))
        response = w.result()
        return httpx.Response(
            status_code=response.status,
            headers=[("content-type", response.content_type), *response.headers],
            content=response.wire_body,
            request=request,
        )

    return httpx.MockTransport(handle)
