"""
Pydantic models for MEXC and DexScreener responses.

These models provide type-safe parsing of upstream responses with
lenient defaults, since the schemas are owned by third parties.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)


class NetworkInfo(BaseModel):
    """One on-chain network a MEXC asset can be deposited on."""

    network: str | None = None
    chain_code: str | None = Field(default=None, alias="netWork")
    contract: str | None = None
    deposit_enable: bool | None = Field(default=None, alias="depositEnable")
    withdraw_enable: bool | None = Field(default=None, alias="withdrawEnable")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @property
    def name(self) -> str:
        """Chain code, falling back to the network label."""
        return self.chain_code or self.network or ""

    @property
    def has_contract(self) -> bool:
        """Check whether the network carries a token contract address."""
        return bool(self.contract and self.contract.strip())


class TokenInfo(BaseModel):
    """Asset configuration entry from `/api/v3/capital/config/getall`."""

    coin: str
    name: str | None = None
    deposit_enable: bool | None = Field(default=None, alias="depositEnable")
    networks: list[NetworkInfo] = Field(default_factory=list, alias="networkList")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("networks", mode="before")
    @classmethod
    def null_networks(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def contract_networks(self) -> list[NetworkInfo]:
        """Networks that carry a contract address, in response order."""
        return [n for n in self.networks if n.has_contract]


class AssetConfig(BaseModel):
    """Full asset-configuration listing."""

    tokens: list[TokenInfo] = Field(default_factory=list)

    @field_validator("tokens", mode="before")
    @classmethod
    def skip_invalid_tokens(cls, v: Any) -> Any:
        """Drop entries that fail validation instead of rejecting the listing."""
        if not isinstance(v, list):
            return v

        tokens: list[TokenInfo] = []
        for entry in v:
            try:
                tokens.append(TokenInfo.model_validate(entry))
            except ValidationError as e:
                coin = entry.get("coin") if isinstance(entry, dict) else None
                logger.debug(f"Skipping asset config entry {coin!r}: {e.error_count()} errors")
        return tokens

    def get(self, symbol: str) -> TokenInfo | None:
        """Find the entry for a symbol (case-insensitive)."""
        wanted = symbol.upper()
        for token in self.tokens:
            if token.coin.upper() == wanted:
                return token
        return None


class DexVolume(BaseModel):
    """Rolling traded volume in USD."""

    h24: float | None = None

    model_config = {"extra": "ignore"}


class DexPair(BaseModel):
    """Trading pair as indexed by DexScreener."""

    chain_id: str = Field(alias="chainId")
    pair_address: str = Field(alias="pairAddress")
    url: str = ""
    price_usd: str | None = Field(default=None, alias="priceUsd")
    volume: DexVolume = Field(default_factory=DexVolume)

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @property
    def volume_24h(self) -> float:
        """24h volume, 0 when DexScreener omits it."""
        return self.volume.h24 or 0.0

    @property
    def price(self) -> float:
        """Current USD price, 0 when missing or unparsable."""
        try:
            return float(self.price_usd) if self.price_usd else 0.0
        except ValueError:
            return 0.0


class DexPairsResponse(BaseModel):
    """Envelope of the token and pair lookup endpoints."""

    pairs: list[DexPair] | None = None
    pair: DexPair | None = None

    model_config = {"extra": "ignore"}

    @property
    def all_pairs(self) -> list[DexPair]:
        if self.pairs:
            return self.pairs
        return [self.pair] if self.pair else []
