"""
Per-request price aggregation.

One call fans out to the MEXC reference price, the deposit check, the
seven exchange tickers and the system sampler, then formats the lot.
All branches run in a single TaskGroup, so cancelling the aggregation
cancels every outstanding upstream request.
"""

import asyncio
import logging
import re

from spreadwatch.config.constants import SYMBOL_PATTERN
from spreadwatch.core.formatting import calculate_spread, format_price, pick_best
from spreadwatch.core.types import AggregateResult
from spreadwatch.exchange.mexc import MexcClient
from spreadwatch.exchange.tickers import TickerClient
from spreadwatch.market.deposit import DepositChecker
from spreadwatch.telemetry.system import SystemSampler
from spreadwatch.utils.time import get_timestamp_ms


logger = logging.getLogger(__name__)

_SYMBOL_RE = re.compile(SYMBOL_PATTERN)


def normalize_symbol(symbol: str | None) -> str:
    """
    Strip and upper-case a user-supplied symbol.

    Returns:
        The ticker, or '' if missing or not alphanumeric.
    """
    candidate = (symbol or "").strip().upper()
    return candidate if _SYMBOL_RE.fullmatch(candidate) else ""


class PriceAggregator:
    """Builds the AggregateResult behind `/api/all`."""

    def __init__(
        self,
        tickers: TickerClient,
        mexc: MexcClient,
        deposits: DepositChecker,
        sampler: SystemSampler,
    ) -> None:
        self._tickers = tickers
        self._mexc = mexc
        self._deposits = deposits
        self._sampler = sampler

    async def aggregate(self, symbol: str) -> AggregateResult:
        """
        Collect and format every price for a symbol.

        Args:
            symbol: Normalized, non-empty symbol.

        Returns:
            Fresh result; unavailable prices are 0, never errors.
        """
        async with asyncio.TaskGroup() as tg:
            home_task = tg.create_task(self._mexc.get_contract_price(symbol))
            deposit_task = tg.create_task(self._deposits.check(symbol))
            quotes_task = tg.create_task(self._tickers.fetch_all(symbol))
            system_task = tg.create_task(asyncio.to_thread(self._sampler.sample))

        home_price = home_task.result()
        quotes = quotes_task.result()

        spreads = {
            name: calculate_spread(quote.price, home_price) for name, quote in quotes.items()
        }

        available = sum(1 for q in quotes.values() if q.available)
        logger.debug(f"{symbol}: MEXC={home_price} with {available}/{len(quotes)} exchanges")

        return AggregateResult(
            symbol=symbol,
            home_price=home_price,
            quotes=quotes,
            home_formatted=format_price(home_price),
            formatted={name: format_price(quote.price) for name, quote in quotes.items()},
            spreads=spreads,
            best=pick_best(spreads),
            deposit_open=deposit_task.result(),
            system=system_task.result(),
            timestamp_ms=get_timestamp_ms(),
        )
