"""Test utilities for ordermux routers.

Provides failure reporters for ``Router.verify`` and an async ASGI
test client::

    from ordermux.testing import RaisingReporter, TestClient
"""

from ordermux._internal.types import Reporter
from ordermux.testing.client import TestClient
from ordermux.testing.reporter import RaisingReporter, RecordingReporter

__all__ = [
    "RaisingReporter",
    "RecordingReporter",
    "Reporter",
    "TestClient",
]
