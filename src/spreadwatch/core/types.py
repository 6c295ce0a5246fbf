"""
Type definitions for the dashboard.

This module contains the request-scoped dataclasses and enums used
throughout the application. Nothing here outlives a single request.
Using slots=True for memory efficiency and faster attribute access.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# Enums
# =============================================================================


class ResolveErrorKind(str, Enum):
    """Why a token could not be resolved."""

    API_ERROR = "API error"
    NOT_FOUND = "not found"


# =============================================================================
# Market Data Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class ExchangeQuote:
    """
    Last traded price on one exchange.

    A price of 0 means the exchange did not answer.
    """

    exchange: str
    price: float

    @property
    def available(self) -> bool:
        """Check whether the quote carries a real price."""
        return self.price > 0


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    """Instantaneous host load and process memory, normalized to limits."""

    ip: str
    cpu_percent: float
    ram_percent: float

    def to_dict(self) -> dict[str, Any]:
        return {"ip": self.ip, "cpu": self.cpu_percent, "ram": self.ram_percent}


@dataclass(slots=True)
class AggregateResult:
    """
    Combined snapshot returned by the aggregation endpoint.

    Built fresh per request and discarded after serialization.
    """

    symbol: str
    home_price: float
    quotes: dict[str, ExchangeQuote]
    home_formatted: str
    formatted: dict[str, str]
    spreads: dict[str, float | None]
    best: str | None
    deposit_open: bool
    system: SystemSnapshot
    timestamp_ms: int

    @property
    def prices(self) -> dict[str, float]:
        """Raw price per exchange."""
        return {name: quote.price for name, quote in self.quotes.items()}

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the field names the dashboard page expects."""
        return {
            "ok": True,
            "symbol": self.symbol,
            "mexc": self.home_price,
            "prices": self.prices,
            "mexcFormatted": self.home_formatted,
            "pricesFormatted": self.formatted,
            "spreads": self.spreads,
            "best": self.best,
            "depositOpen": self.deposit_open,
            "sys": self.system.to_dict(),
            "timestamp": self.timestamp_ms,
        }


# =============================================================================
# Token Resolution Types
# =============================================================================


@dataclass(slots=True)
class ResolveResult:
    """
    Canonical on-chain reference for a token.

    `found` and `deposit_open` are independent: a token may have open
    deposits and still no DEX pair.
    """

    found: bool
    deposit_open: bool
    chain: str | None = None
    address: str | None = None
    url: str | None = None
    price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        if not self.found:
            return {"ok": False, "error": "no pairs", "depositOpen": self.deposit_open}
        return {
            "ok": True,
            "chain": self.chain,
            "addr": self.address,
            "url": self.url,
            "price": self.price,
            "depositOpen": self.deposit_open,
        }
