"""Market data orchestration: aggregation, deposit status, token resolution."""

from spreadwatch.market.aggregator import PriceAggregator, normalize_symbol
from spreadwatch.market.deposit import DepositChecker, is_deposit_open
from spreadwatch.market.resolver import ResolveError, TokenResolver, select_best_pair


__all__ = [
    "DepositChecker",
    "PriceAggregator",
    "ResolveError",
    "TokenResolver",
    "is_deposit_open",
    "normalize_symbol",
    "select_best_pair",
]
