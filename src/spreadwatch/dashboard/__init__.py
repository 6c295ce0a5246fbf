"""Dashboard module for web-based monitoring."""

from spreadwatch.dashboard.server import create_app


__all__ = [
    "create_app",
]
