"""
Price display formatting.

The dashboard renders prices server-side only; the page shows these
strings verbatim so the rounding rules live in exactly one place.
"""

import math

from spreadwatch.config.constants import (
    PRICE_PRECISION_BUCKETS,
    PRICE_PRECISION_FLOOR,
    PRICE_WIDTH,
    SPREAD_PRECISION,
)


def price_precision(price: float) -> int:
    """
    Choose the number of decimals for a price by magnitude.

    Args:
        price: Non-zero price.

    Returns:
        Decimal places (2 for large prices up to 8 for micro-caps).
    """
    for lower_bound, decimals in PRICE_PRECISION_BUCKETS:
        if price >= lower_bound:
            return decimals
    return PRICE_PRECISION_FLOOR


def format_price(price: float | None) -> str:
    """
    Format a price as a fixed-width display string.

    Zero, None, NaN, infinities and negative values all render as a
    right-aligned "0".

    Args:
        price: Raw price.

    Returns:
        String left-padded with spaces to PRICE_WIDTH characters.

    Examples:
        >>> format_price(1234.5)
        '        1234.50'
        >>> format_price(0)
        '              0'
    """
    if price is None or not math.isfinite(price) or price <= 0:
        return "0".rjust(PRICE_WIDTH)

    decimals = price_precision(price)
    return f"{price:.{decimals}f}".rjust(PRICE_WIDTH)


def calculate_spread(price: float, reference: float) -> float | None:
    """
    Percentage difference of a price against the reference price.

    Returns:
        Spread in percent rounded to SPREAD_PRECISION, or None if
        either price is unavailable.
    """
    if price <= 0 or reference <= 0:
        return None
    return round((price - reference) / reference * 100, SPREAD_PRECISION)


def pick_best(spreads: dict[str, float | None]) -> str | None:
    """Return the exchange with the widest absolute spread (first wins ties)."""
    best: str | None = None
    best_abs = 0.0

    for exchange, spread in spreads.items():
        if spread is None:
            continue
        if best is None or abs(spread) > best_abs:
            best = exchange
            best_abs = abs(spread)

    return best
