"""
Token contract resolution.

Maps a MEXC-listed symbol to its most liquid on-chain pair: every
network contract MEXC knows about is looked up on DexScreener and the
pair with the highest 24h volume wins.
"""

import asyncio
import logging

from spreadwatch.core.types import ResolveErrorKind, ResolveResult
from spreadwatch.exchange.client import ExchangeClientError
from spreadwatch.exchange.dex import DexScreenerClient
from spreadwatch.exchange.mexc import MexcClient
from spreadwatch.exchange.models import DexPair, NetworkInfo
from spreadwatch.market.deposit import is_deposit_open


logger = logging.getLogger(__name__)


class ResolveError(Exception):
    """Token resolution failed before any DEX lookup could run."""

    def __init__(self, kind: ResolveErrorKind, detail: str = "") -> None:
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
        self.kind = kind
        self.detail = detail

    def to_dict(self) -> dict[str, object]:
        return {"ok": False, "error": self.kind.value}


def select_best_pair(pairs: list[DexPair]) -> DexPair | None:
    """
    Pick the pair with the strictly greatest 24h volume.

    Ties keep the earliest pair, so the result depends on network
    order and on DexScreener's ordering.
    """
    best: DexPair | None = None
    for pair in pairs:
        if best is None or pair.volume_24h > best.volume_24h:
            best = pair
    return best


class TokenResolver:
    """Resolves symbols to their canonical DEX pair."""

    def __init__(self, mexc: MexcClient, dex: DexScreenerClient) -> None:
        self._mexc = mexc
        self._dex = dex

    async def _pairs_for(self, network: NetworkInfo) -> list[DexPair]:
        """DEX pairs for one network; failures yield no pairs."""
        try:
            return await self._dex.get_token_pairs((network.contract or "").strip())
        except ExchangeClientError as e:
            logger.debug(f"DEX lookup failed on {network.name}: {e}")
            return []

    async def resolve(self, symbol: str) -> ResolveResult:
        """
        Resolve a symbol to its highest-volume on-chain pair.

        Returns:
            Result with found=False when no network yields a pair;
            deposit_open is reported either way.

        Raises:
            ResolveError: API_ERROR if the asset configuration is
                unavailable, NOT_FOUND if MEXC does not list the symbol
                or lists no networks for it.
        """
        try:
            config = await self._mexc.get_asset_config()
        except ExchangeClientError as e:
            raise ResolveError(ResolveErrorKind.API_ERROR, str(e)) from e

        if config is None:
            raise ResolveError(ResolveErrorKind.API_ERROR, "credentials not configured")

        token = config.get(symbol)
        if token is None or not token.networks:
            raise ResolveError(ResolveErrorKind.NOT_FOUND, symbol)

        deposit_open = is_deposit_open(token)

        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(self._pairs_for(n)) for n in token.contract_networks]

        candidates = [pair for task in tasks for pair in task.result()]
        best = select_best_pair(candidates)

        if best is None:
            logger.info(f"No DEX pairs for {symbol} across {len(tasks)} networks")
            return ResolveResult(found=False, deposit_open=deposit_open)

        logger.debug(
            f"Resolved {symbol} to {best.chain_id}/{best.pair_address} "
            f"out of {len(candidates)} pairs"
        )
        return ResolveResult(
            found=True,
            deposit_open=deposit_open,
            chain=best.chain_id,
            address=best.pair_address,
            url=best.url,
            price=best.price,
        )
