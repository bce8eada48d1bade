"""Route record tracked by the router."""

from dataclasses import dataclass

from ordermux._internal.types import Handler
from ordermux.http.request import Request
from ordermux.http.writer import ResponseWriter


@dataclass(slots=True)
class Route:
    """A registered ``(method, path)`` expectation and its handler.

    ``visited`` flips to True exactly once, on the first dispatch that
    matches this route, and never flips back.
    """

    method: str
    path: str
    handler: Handler
    visited: bool = False

    def matches(self, method: str, path: str) -> bool:
        """True if this route is still available for ``method path``."""
        return not self.visited and self.method == method and self.path == path

    def execute(self, writer: ResponseWriter, request: Request) -> None:
        """Run the handler, then mark the route visited."""
        self.handler(writer, request)
        self.visited = True

    def __str__(self) -> str:
        return f"{self.method} {self.path}"
