"""pytest plugin — a per-test Router verified at teardown.

Registered through the ``pytest11`` entry point, so installing ordermux
makes the fixture available everywhere::

    def test_client_calls_in_order(ordermux_router):
        ordermux_router.register_resp("GET", "/foo", 200, "Hello")
        Client(transport=ordermux_router.transport()).fetch_foo()

Mark a test with ``@pytest.mark.ordermux_no_verify`` to inspect the
router yourself instead.
"""

from collections.abc import Iterator

import pytest

from ordermux.routing.router import Router
from ordermux.testing.reporter import RecordingReporter


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "ordermux_no_verify: skip the automatic ordermux_router verification at teardown",
    )


@pytest.fixture
def ordermux_router(request: pytest.FixtureRequest) -> Iterator[Router]:
    """A fresh Router whose diagnostics fail the test at teardown."""
    router = Router()
    yield router

    if request.node.get_closest_marker("ordermux_no_verify") is not None:
        return

    reporter = RecordingReporter()
    if not router.verify(reporter):
        pytest.fail("\n".join(reporter.messages), pytrace=False)
