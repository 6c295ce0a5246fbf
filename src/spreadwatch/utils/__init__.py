"""Utility functions for the dashboard."""

from spreadwatch.utils.memory import parse_ram_limit
from spreadwatch.utils.time import get_timestamp_ms


__all__ = [
    "get_timestamp_ms",
    "parse_ram_limit",
]
