"""
DexScreener client.

Looks up on-chain trading pairs by token contract address and fetches
live pair data by chain and pair address.
"""

import logging

from pydantic import ValidationError

from spreadwatch.config.constants import DEXSCREENER_URL, ENDPOINT_DEX_PAIRS, ENDPOINT_DEX_TOKENS
from spreadwatch.exchange.client import ExchangeClientError, HttpClient
from spreadwatch.exchange.models import DexPair, DexPairsResponse


logger = logging.getLogger(__name__)


class DexScreenerClient(HttpClient):
    """Async DexScreener REST client."""

    def __init__(self) -> None:
        super().__init__(base_url=DEXSCREENER_URL)

    async def get_token_pairs(self, address: str) -> list[DexPair]:
        """
        Get every pair trading a token contract.

        Args:
            address: Token contract address.

        Returns:
            Pairs in the order DexScreener returns them.

        Raises:
            ExchangeClientError: On network, HTTP or schema errors.
        """
        data = await self.get_json(f"{ENDPOINT_DEX_TOKENS}/{address}")

        try:
            return DexPairsResponse.model_validate(data).all_pairs
        except ValidationError as e:
            raise ExchangeClientError(f"Invalid pairs response: {e.error_count()} errors") from e

    async def get_pair(self, chain: str, pair_address: str) -> DexPair | None:
        """
        Get live data for a single pair.

        Returns:
            The pair, or None if unknown or unreachable.
        """
        try:
            data = await self.get_json(f"{ENDPOINT_DEX_PAIRS}/{chain}/{pair_address}")
            pairs = DexPairsResponse.model_validate(data).all_pairs
        except ExchangeClientError as e:
            logger.debug(f"DexScreener error for {chain}/{pair_address}: {e}")
            return None
        except ValidationError as e:
            logger.debug(f"DexScreener unexpected response for {chain}/{pair_address}: {e}")
            return None

        return pairs[0] if pairs else None
