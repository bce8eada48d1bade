"""Typed diagnostics recorded while dispatching requests.

Each diagnostic renders to the exact message text handed to a failure
reporter, so ``str(diagnostic)`` is the public contract.
"""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    OUT_OF_ORDER = "Request out of order"
    UNEXPECTED = "Unexpected request"
    UNVISITED = "Unvisited route"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A deviation from the registered request script."""

    kind: DiagnosticKind
    method: str
    path: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.method} {self.path}"


def out_of_order(method: str, path: str) -> Diagnostic:
    """Matched a route, but not the one the cursor expected."""
    return Diagnostic(DiagnosticKind.OUT_OF_ORDER, method, path)


def unexpected(method: str, path: str) -> Diagnostic:
    """No unvisited route matches the request."""
    return Diagnostic(DiagnosticKind.UNEXPECTED, method, path)


def unvisited(method: str, path: str) -> Diagnostic:
    """A registered route was never requested."""
    return Diagnostic(DiagnosticKind.UNVISITED, method, path)
