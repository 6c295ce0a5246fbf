"""
Deposit status of a token on the home exchange.

When the status cannot be determined the checker answers with the
configured fail-open default (True unless overridden), so a transient
MEXC problem never hides an opportunity on the dashboard.
"""

import logging

from spreadwatch.exchange.client import ExchangeClientError
from spreadwatch.exchange.mexc import MexcClient
from spreadwatch.exchange.models import TokenInfo


logger = logging.getLogger(__name__)


def is_deposit_open(token: TokenInfo) -> bool:
    """
    Decide whether deposits are open for a token.

    Closed only if the overall flag is explicitly False, or if the token
    lists networks and none of them accepts deposits.
    """
    if token.deposit_enable is False:
        return False
    if token.networks and not any(n.deposit_enable for n in token.networks):
        return False
    return True


class DepositChecker:
    """Resolves deposit status via the MEXC asset configuration."""

    def __init__(self, client: MexcClient, fail_open: bool = True) -> None:
        self._client = client
        self._fail_open = fail_open

    async def check(self, symbol: str) -> bool:
        """
        Check whether deposits are open for `symbol`.

        Returns:
            The deposit rule's verdict, or the fail-open default when
            credentials are missing, MEXC errors, or the symbol is unknown.
        """
        if not self._client.has_credentials:
            return self._fail_open

        try:
            config = await self._client.get_asset_config()
        except ExchangeClientError as e:
            logger.debug(f"Deposit check for {symbol} failed: {e}")
            return self._fail_open

        token = config.get(symbol) if config else None
        if token is None:
            logger.debug(f"Deposit check: {symbol} not listed")
            return self._fail_open

        return is_deposit_open(token)
