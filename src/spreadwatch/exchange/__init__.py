"""Upstream integrations: exchange tickers, MEXC and DexScreener."""

from spreadwatch.exchange.client import (
    ExchangeAPIError,
    ExchangeClientError,
    HttpClient,
    UnknownExchangeError,
)
from spreadwatch.exchange.dex import DexScreenerClient
from spreadwatch.exchange.mexc import MexcClient
from spreadwatch.exchange.models import AssetConfig, DexPair, NetworkInfo, TokenInfo
from spreadwatch.exchange.signer import RequestSigner
from spreadwatch.exchange.tickers import TICKER_SOURCES, TickerClient


__all__ = [
    "AssetConfig",
    "DexPair",
    "DexScreenerClient",
    "ExchangeAPIError",
    "ExchangeClientError",
    "HttpClient",
    "MexcClient",
    "NetworkInfo",
    "RequestSigner",
    "TICKER_SOURCES",
    "TickerClient",
    "TokenInfo",
    "UnknownExchangeError",
]
