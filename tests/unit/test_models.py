"""
Unit tests for upstream response models.

Tests that drifting MEXC asset entries degrade per entry instead of
invalidating the whole listing.
"""

from unittest.mock import AsyncMock

import pytest

from spreadwatch.exchange.mexc import MexcClient
from spreadwatch.exchange.models import AssetConfig, TokenInfo
from spreadwatch.market.deposit import DepositChecker


ODD_ENTRY = {
    "coin": "ODD",
    "name": None,
    "networkList": [
        {
            "coin": "ODD",
            "network": None,
            "netWork": None,
            "depositEnable": True,
            "contract": "0xodd",
        },
    ],
}


class TestAssetConfig:
    """Tests for AssetConfig parsing."""

    def test_null_string_fields(self, asset_config_payload: list[dict]) -> None:
        """Test that null labels parse and the network name falls back to ''."""
        config = AssetConfig.model_validate({"tokens": [*asset_config_payload, ODD_ENTRY]})

        odd = config.get("ODD")
        assert odd is not None
        assert odd.name is None
        assert odd.networks[0].name == ""
        assert [n.contract for n in odd.contract_networks] == ["0xodd"]
        assert config.get("PEPE") is not None

    def test_network_name_prefers_chain_code(self, pepe: TokenInfo) -> None:
        assert [n.name for n in pepe.networks] == ["ETH", "BSC"]

    def test_null_network_list(self) -> None:
        config = AssetConfig.model_validate({"tokens": [{"coin": "NIL", "networkList": None}]})

        token = config.get("NIL")
        assert token is not None
        assert token.networks == []

    @pytest.mark.parametrize(
        "bad_entry",
        [
            {"coin": None, "networkList": []},
            {"name": "no coin"},
            {"coin": "BAD", "networkList": "ETH"},
            "PEPE",
            None,
        ],
    )
    def test_invalid_entry_skipped(self, asset_config_payload: list[dict], bad_entry: object) -> None:
        """Test that one broken entry does not poison the rest."""
        config = AssetConfig.model_validate({"tokens": [bad_entry, *asset_config_payload]})

        assert [t.coin for t in config.tokens] == ["PEPE", "BTC", "DEAD", "BARE"]

    @pytest.mark.asyncio
    async def test_deposit_check_survives_bad_entry(self, asset_config_payload: list[dict]) -> None:
        """Test that a sibling entry's drift leaves the deposit verdict intact."""
        client = MexcClient("my_key", "my_secret")
        client.get_json = AsyncMock(  # type: ignore[method-assign]
            return_value=[{"coin": None}, ODD_ENTRY, *asset_config_payload]
        )

        assert await DepositChecker(client, fail_open=True).check("DEAD") is False
