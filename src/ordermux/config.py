"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(not_found_body="nope\\n")
    """

    # Response for requests that match no unvisited route
    not_found_status: int = 404
    not_found_body: str = "404 page not found\n"

    # Content type sent when a handler does not set one
    default_content_type: str = "text/plain; charset=utf-8"

    # Upper-case methods on both registration and dispatch ("get" -> "GET")
    normalize_methods: bool = False
