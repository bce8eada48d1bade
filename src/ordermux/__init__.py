"""ordermux — verify that an HTTP client sends requests in the expected order.

Register the requests a client should make, point the client at the
router, then verify::

    from ordermux import Router
    from ordermux.testing import RaisingReporter

    router = Router()
    router.register_resp("GET", "/foo", 200, "Hello")
    router.register_resp("GET", "/bar", 200, "Bonjour")

    client = httpx.Client(transport=router.transport(), base_url="http://test")
    client.get("/foo")
    client.get("/bar")

    reporter = RaisingReporter()
    router.verify(reporter)
    reporter.raise_if_failed()

Verification fails for requests received out of order, requests for
unregistered routes, and routes registered but never requested.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticKind",
    "OrderMuxError",
    "Request",
    "Response",
    "ResponseWriter",
    "Route",
    "Router",
    "RouterConfig",
    "VerificationError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import ordermux`` cheap for the pytest plugin entry point.
    """
    if name in ("Router", "Route"):
        from ordermux import routing as _routing

        return getattr(_routing, name)

    if name == "RouterConfig":
        from ordermux.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from ordermux.http.request import Request

        return Request

    if name == "Response":
        from ordermux.http.response import Response

        return Response

    if name == "ResponseWriter":
        from ordermux.http.writer import ResponseWriter

        return ResponseWriter

    if name in ("Diagnostic", "DiagnosticKind"):
        from ordermux import diagnostics as _diagnostics

        return getattr(_diagnostics, name)

    if name in ("ConfigurationError", "OrderMuxError", "VerificationError"):
        from ordermux import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
