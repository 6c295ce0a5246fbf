"""Telemetry module for logging and system sampling."""

from spreadwatch.telemetry.logger import AsyncLogger, setup_logging
from spreadwatch.telemetry.system import SystemSampler


__all__ = [
    "AsyncLogger",
    "SystemSampler",
    "setup_logging",
]
