"""
Futures last-price fetchers for the exchange roster.

Each exchange has its own URL shape and response schema; both are
described once in TICKER_SOURCES. Fetching never raises: any failure
becomes a price of 0, which the dashboard treats as "unavailable".
"""

import asyncio
import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from spreadwatch.config.constants import (
    BINANCE_TICKER_URL,
    BINGX_TICKER_URL,
    BITGET_TICKER_URL,
    BYBIT_TICKER_URL,
    EXCHANGE_BINANCE,
    EXCHANGE_BINGX,
    EXCHANGE_BITGET,
    EXCHANGE_BYBIT,
    EXCHANGE_GATE,
    EXCHANGE_KUCOIN,
    EXCHANGE_OKX,
    EXCHANGES,
    GATE_TICKER_URL,
    KUCOIN_SYMBOL_ALIASES,
    KUCOIN_TICKER_URL,
    OKX_TICKER_URL,
    QUOTE_ASSET,
)
from spreadwatch.core.types import ExchangeQuote
from spreadwatch.exchange.client import ExchangeClientError, HttpClient, UnknownExchangeError


logger = logging.getLogger(__name__)


def to_price(value: Any) -> float:
    """
    Convert an upstream price field to a float.

    Raises:
        ValueError: If the value is missing, not numeric, or negative.
    """
    if value is None or value == "":
        raise ValueError("empty price")

    price = float(value)
    if not math.isfinite(price) or price < 0:
        raise ValueError(f"invalid price {value!r}")
    return price


def _parse_gate(data: Any) -> float:
    # Gate answers with a list when filtering by contract
    if isinstance(data, list):
        return to_price(data[0]["last"])
    return to_price(data["last"])


@dataclass(slots=True, frozen=True)
class TickerSource:
    """URL template and price extractor for one exchange."""

    exchange: str
    url: str
    params: Callable[[str], dict[str, str]]
    parse: Callable[[Any], float]


TICKER_SOURCES: dict[str, TickerSource] = {
    source.exchange: source
    for source in (
        TickerSource(
            exchange=EXCHANGE_BINANCE,
            url=BINANCE_TICKER_URL,
            params=lambda s: {"symbol": f"{s}{QUOTE_ASSET}"},
            parse=lambda d: to_price(d["price"]),
        ),
        TickerSource(
            exchange=EXCHANGE_KUCOIN,
            url=KUCOIN_TICKER_URL,
            params=lambda s: {"symbol": f"{KUCOIN_SYMBOL_ALIASES.get(s, s)}{QUOTE_ASSET}M"},
            parse=lambda d: to_price(d["data"]["price"]),
        ),
        TickerSource(
            exchange=EXCHANGE_BINGX,
            url=BINGX_TICKER_URL,
            params=lambda s: {"symbol": f"{s}-{QUOTE_ASSET}"},
            parse=lambda d: to_price(d["data"]["lastPrice"]),
        ),
        TickerSource(
            exchange=EXCHANGE_BYBIT,
            url=BYBIT_TICKER_URL,
            params=lambda s: {"category": "linear", "symbol": f"{s}{QUOTE_ASSET}"},
            parse=lambda d: to_price(d["result"]["list"][0]["lastPrice"]),
        ),
        TickerSource(
            exchange=EXCHANGE_BITGET,
            url=BITGET_TICKER_URL,
            params=lambda s: {"symbol": f"{s}{QUOTE_ASSET}", "productType": "USDT-FUTURES"},
            parse=lambda d: to_price(d["data"][0]["lastPr"]),
        ),
        TickerSource(
            exchange=EXCHANGE_OKX,
            url=OKX_TICKER_URL,
            params=lambda s: {"instId": f"{s}-{QUOTE_ASSET}-SWAP"},
            parse=lambda d: to_price(d["data"][0]["last"]),
        ),
        TickerSource(
            exchange=EXCHANGE_GATE,
            url=GATE_TICKER_URL,
            params=lambda s: {"contract": f"{s}_{QUOTE_ASSET}"},
            parse=_parse_gate,
        ),
    )
}

# Anything a drifting upstream schema can throw at a parser
PARSE_ERRORS = (KeyError, IndexError, TypeError, ValueError, ValidationError)


def get_source(exchange: str) -> TickerSource:
    """
    Look up the ticker source for an exchange.

    Raises:
        UnknownExchangeError: If the exchange is not in the roster.
    """
    try:
        return TICKER_SOURCES[exchange]
    except KeyError:
        raise UnknownExchangeError(f"Unknown exchange: {exchange}") from None


class TickerClient(HttpClient):
    """Public, unauthenticated futures ticker client for the whole roster."""

    async def fetch_price(self, exchange: str, symbol: str) -> float:
        """
        Fetch the last traded price of `symbol`/USDT on one exchange.

        Args:
            exchange: Roster identifier, e.g. "Binance".
            symbol: Upper-case base asset.

        Returns:
            Last price, or 0 if the exchange could not be read.

        Raises:
            UnknownExchangeError: If the exchange is not in the roster.
        """
        source = get_source(exchange)

        try:
            data = await self.get_json(source.url, params=source.params(symbol))
            return source.parse(data)
        except ExchangeClientError as e:
            logger.debug(f"{exchange} error: {e}")
        except PARSE_ERRORS as e:
            logger.debug(f"{exchange} unexpected response for {symbol}: {e!r}")

        return 0.0

    async def fetch_all(
        self,
        symbol: str,
        exchanges: Iterable[str] = EXCHANGES,
    ) -> dict[str, ExchangeQuote]:
        """
        Fetch every exchange concurrently.

        Returns:
            Quote per exchange, in roster order.
        """
        names = list(exchanges)
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(self.fetch_price(name, symbol)) for name in names]

        return {
            name: ExchangeQuote(exchange=name, price=task.result())
            for name, task in zip(names, tasks, strict=True)
        }
