"""
MEXC (home exchange) client.

Public contract ticker for the reference price, and the signed
asset-configuration endpoint for deposit status and token contracts.
"""

import logging

from pydantic import ValidationError

from spreadwatch.config.constants import (
    ENDPOINT_CAPITAL_CONFIG,
    ENDPOINT_CONTRACT_TICKER,
    MEXC_API_KEY_HEADER,
    MEXC_CONTRACT_URL,
    MEXC_SPOT_URL,
    QUOTE_ASSET,
)
from spreadwatch.exchange.client import ExchangeClientError, HttpClient
from spreadwatch.exchange.models import AssetConfig
from spreadwatch.exchange.signer import RequestSigner
from spreadwatch.exchange.tickers import PARSE_ERRORS, to_price


logger = logging.getLogger(__name__)


class MexcClient(HttpClient):
    """
    Async MEXC REST client.

    Signed calls short-circuit to None when no key pair is configured,
    without touching the network.
    """

    def __init__(self, api_key: str = "", api_secret: str = "") -> None:
        """
        Initialize the MEXC client.

        Args:
            api_key: MEXC API key, empty to disable signed calls.
            api_secret: MEXC API secret, empty to disable signed calls.
        """
        super().__init__()
        self._api_key = api_key
        self._signer = RequestSigner(api_secret) if api_key and api_secret else None

    @property
    def has_credentials(self) -> bool:
        return self._signer is not None

    # =========================================================================
    # Public Endpoints
    # =========================================================================

    async def get_contract_price(self, symbol: str) -> float:
        """
        Get the last price of the `{symbol}_USDT` perpetual contract.

        Returns:
            Last price, or 0 on any failure.
        """
        url = f"{MEXC_CONTRACT_URL}{ENDPOINT_CONTRACT_TICKER}"

        try:
            data = await self.get_json(url, params={"symbol": f"{symbol}_{QUOTE_ASSET}"})
            return to_price(data["data"]["lastPrice"])
        except ExchangeClientError as e:
            logger.debug(f"MEXC error: {e}")
        except PARSE_ERRORS as e:
            logger.debug(f"MEXC unexpected response for {symbol}: {e!r}")

        return 0.0

    # =========================================================================
    # Signed Endpoints
    # =========================================================================

    async def get_asset_config(self) -> AssetConfig | None:
        """
        Get the deposit/withdraw configuration of every asset.

        Returns:
            Parsed listing, or None when credentials are not configured.

        Raises:
            ExchangeClientError: On network, HTTP or schema errors.
        """
        if self._signer is None:
            return None

        url = f"{MEXC_SPOT_URL}{ENDPOINT_CAPITAL_CONFIG}"
        params = self._signer.create_signed_params()

        data = await self.get_json(
            url,
            params=params,
            headers={MEXC_API_KEY_HEADER: self._api_key},
        )

        try:
            return AssetConfig.model_validate({"tokens": data})
        except ValidationError as e:
            raise ExchangeClientError(f"Invalid asset config: {e.error_count()} errors") from e
