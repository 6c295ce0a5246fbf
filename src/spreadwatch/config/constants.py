"""
Upstream endpoints and display constants.

This module contains all hardcoded values used throughout the dashboard.
Values are organized by category for easy maintenance and auditing.
"""

from typing import Final


# =============================================================================
# Exchange Roster
# =============================================================================

EXCHANGE_BINANCE: Final[str] = "Binance"
EXCHANGE_KUCOIN: Final[str] = "Kucoin"
EXCHANGE_BINGX: Final[str] = "BingX"
EXCHANGE_BYBIT: Final[str] = "Bybit"
EXCHANGE_BITGET: Final[str] = "Bitget"
EXCHANGE_OKX: Final[str] = "OKX"
EXCHANGE_GATE: Final[str] = "Gate"

# Display order on the dashboard
EXCHANGES: Final[tuple[str, ...]] = (
    EXCHANGE_BINANCE,
    EXCHANGE_KUCOIN,
    EXCHANGE_BINGX,
    EXCHANGE_BYBIT,
    EXCHANGE_BITGET,
    EXCHANGE_OKX,
    EXCHANGE_GATE,
)

QUOTE_ASSET: Final[str] = "USDT"

# Kucoin futures list bitcoin under its ISO-style code
KUCOIN_SYMBOL_ALIASES: Final[dict[str, str]] = {"BTC": "XBT"}


# =============================================================================
# Futures Ticker Endpoints
# =============================================================================

BINANCE_TICKER_URL: Final[str] = "https://fapi.binance.com/fapi/v1/ticker/price"
KUCOIN_TICKER_URL: Final[str] = "https://api-futures.kucoin.com/api/v1/ticker"
BINGX_TICKER_URL: Final[str] = "https://open-api.bingx.com/openApi/swap/v2/quote/ticker"
BYBIT_TICKER_URL: Final[str] = "https://api.bybit.com/v5/market/tickers"
BITGET_TICKER_URL: Final[str] = "https://api.bitget.com/api/v2/mix/market/ticker"
OKX_TICKER_URL: Final[str] = "https://www.okx.com/api/v5/market/ticker"
GATE_TICKER_URL: Final[str] = "https://api.gateio.ws/api/v4/futures/usdt/tickers"


# =============================================================================
# Home Exchange (MEXC)
# =============================================================================

HOME_EXCHANGE: Final[str] = "MEXC"

MEXC_CONTRACT_URL: Final[str] = "https://contract.mexc.com"
MEXC_SPOT_URL: Final[str] = "https://api.mexc.com"

ENDPOINT_CONTRACT_TICKER: Final[str] = "/api/v1/contract/ticker"
ENDPOINT_CAPITAL_CONFIG: Final[str] = "/api/v3/capital/config/getall"

MEXC_API_KEY_HEADER: Final[str] = "X-MEXC-APIKEY"


# =============================================================================
# DEX Aggregator (DexScreener)
# =============================================================================

DEXSCREENER_URL: Final[str] = "https://api.dexscreener.com"

ENDPOINT_DEX_TOKENS: Final[str] = "/latest/dex/tokens"
ENDPOINT_DEX_PAIRS: Final[str] = "/latest/dex/pairs"


# =============================================================================
# HTTP Client
# =============================================================================

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
    ),
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
}

CONNECTOR_LIMIT: Final[int] = 100
CONNECTOR_LIMIT_PER_HOST: Final[int] = 20
KEEPALIVE_TIMEOUT: Final[float] = 30.0  # seconds


# =============================================================================
# Precision & Formatting
# =============================================================================

PRICE_WIDTH: Final[int] = 15

# (lower bound, decimals), checked top to bottom
PRICE_PRECISION_BUCKETS: Final[tuple[tuple[float, int], ...]] = (
    (1000.0, 2),
    (1.0, 4),
    (0.1, 5),
    (0.01, 6),
    (0.001, 7),
)
PRICE_PRECISION_FLOOR: Final[int] = 8

SPREAD_PRECISION: Final[int] = 2


# =============================================================================
# Dashboard
# =============================================================================

DEFAULT_SYMBOL: Final[str] = "BTC"

# Base assets are upper-case alphanumeric tickers
SYMBOL_PATTERN: Final[str] = r"[A-Z0-9]{1,20}"

# How often a handler checks whether its client went away (seconds)
DISCONNECT_POLL_INTERVAL: Final[float] = 0.1


# =============================================================================
# Logging & Telemetry
# =============================================================================

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Maximum log queue size
MAX_LOG_QUEUE_SIZE: Final[int] = 10_000
