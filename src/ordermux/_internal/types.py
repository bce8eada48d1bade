"""Shared type aliases used across ordermux modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from ordermux.http.request import Request
    from ordermux.http.writer import ResponseWriter

# Route handler — writes a response for one request
Handler: TypeAlias = "Callable[[ResponseWriter, Request], None]"


class Reporter(Protocol):
    """Anything that can record a test failure message."""

    def error(self, message: str) -> None: ...
