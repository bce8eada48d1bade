"""Ordered route registry and matcher."""

from ordermux.routing.route import Route
from ordermux.routing.router import Router

__all__ = ["Route", "Router"]
