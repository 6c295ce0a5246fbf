"""
Mock upstream clients for testing.

Stand-ins for TickerClient, MexcClient and DexScreenerClient that
answer from in-memory data and record every call, so tests can assert
that no upstream was touched.
"""

from spreadwatch.config.constants import EXCHANGES
from spreadwatch.core.types import ExchangeQuote
from spreadwatch.exchange.models import AssetConfig, DexPair


class MockTickerClient:
    """Mock ticker client returning fixed prices per exchange."""

    def __init__(self, prices: dict[str, float] | None = None) -> None:
        self._prices = prices if prices is not None else {ex: 0.0 for ex in EXCHANGES}
        self.calls: list[tuple[str, str]] = []

    async def fetch_price(self, exchange: str, symbol: str) -> float:
        self.calls.append((exchange, symbol))
        return self._prices.get(exchange, 0.0)

    async def fetch_all(self, symbol: str) -> dict[str, ExchangeQuote]:
        return {
            ex: ExchangeQuote(exchange=ex, price=await self.fetch_price(ex, symbol))
            for ex in EXCHANGES
        }

    async def close(self) -> None:
        pass


class MockMexcClient:
    """
    Mock MEXC client.

    `asset_config` may be an AssetConfig, None (no credentials) or an
    exception instance to raise.
    """

    def __init__(
        self,
        price: float = 0.0,
        asset_config: AssetConfig | Exception | None = None,
        has_credentials: bool = True,
    ) -> None:
        self._price = price
        self._asset_config = asset_config
        self.has_credentials = has_credentials
        self.price_calls: list[str] = []
        self.config_calls = 0

    async def get_contract_price(self, symbol: str) -> float:
        self.price_calls.append(symbol)
        return self._price

    async def get_asset_config(self) -> AssetConfig | None:
        self.config_calls += 1
        if isinstance(self._asset_config, Exception):
            raise self._asset_config
        if not self.has_credentials:
            return None
        return self._asset_config

    async def close(self) -> None:
        pass


class MockDexClient:
    """Mock DexScreener client keyed by token contract address."""

    def __init__(
        self,
        pairs_by_address: dict[str, list[DexPair] | Exception] | None = None,
        pair: DexPair | None = None,
    ) -> None:
        self._pairs_by_address = pairs_by_address or {}
        self._pair = pair
        self.lookups: list[str] = []

    async def get_token_pairs(self, address: str) -> list[DexPair]:
        self.lookups.append(address)
        result = self._pairs_by_address.get(address, [])
        if isinstance(result, Exception):
            raise result
        return result

    async def get_pair(self, chain: str, pair_address: str) -> DexPair | None:
        self.lookups.append(f"{chain}/{pair_address}")
        return self._pair

    async def close(self) -> None:
        pass


def make_pair(chain: str, address: str, volume: float | None, price: str = "1.0") -> DexPair:
    """Build a DexPair the way DexScreener serializes it."""
    return DexPair.model_validate(
        {
            "chainId": chain,
            "pairAddress": address,
            "url": f"https://dexscreener.com/{chain}/{address}",
            "priceUsd": price,
            "volume": {"h24": volume} if volume is not None else {},
        }
    )

