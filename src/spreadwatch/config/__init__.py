"""Configuration module for the dashboard."""

from spreadwatch.config.constants import (
    DEFAULT_SYMBOL,
    EXCHANGES,
    HOME_EXCHANGE,
    PRICE_WIDTH,
)
from spreadwatch.config.settings import Settings, get_settings


__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_SYMBOL",
    "EXCHANGES",
    "HOME_EXCHANGE",
    "PRICE_WIDTH",
]
