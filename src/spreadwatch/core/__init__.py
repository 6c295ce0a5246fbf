"""Core types and formatting shared by the API and the dashboard."""

from spreadwatch.core.formatting import calculate_spread, format_price, pick_best
from spreadwatch.core.types import (
    AggregateResult,
    ExchangeQuote,
    ResolveErrorKind,
    ResolveResult,
    SystemSnapshot,
)


__all__ = [
    "AggregateResult",
    "ExchangeQuote",
    "ResolveErrorKind",
    "ResolveResult",
    "SystemSnapshot",
    "calculate_spread",
    "format_price",
    "pick_best",
]
