"""ordermux exception hierarchy.

Diagnostics about request order are never raised; these exceptions cover
invalid registrations and failed verification only.
"""


class OrderMuxError(Exception):
    """Base for all ordermux-specific errors."""


class ConfigurationError(OrderMuxError):
    """Raised when a route registration is invalid.

    Detected eagerly in ``Router.register_*`` so a broken scenario fails
    before the first request is sent.
    """


class VerificationError(OrderMuxError, AssertionError):
    """Raised when a verified scenario recorded diagnostics.

    Subclasses ``AssertionError`` so test runners report it as a failure
    rather than an error.
    """

    def __init__(self, messages: list[str] | tuple[str, ...]) -> None:
        self.messages = tuple(messages)
        lines = "\n".join(f"  - {m}" for m in self.messages)
        super().__init__(f"{len(self.messages)} request-order problem(s):\n{lines}")
