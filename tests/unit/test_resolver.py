"""
Unit tests for TokenResolver.

Tests highest-volume selection across networks, error kinds, and
isolation of per-network DEX failures.
"""

import pytest

from spreadwatch.core.types import ResolveErrorKind
from spreadwatch.exchange.client import ExchangeClientError
from spreadwatch.market.resolver import ResolveError, TokenResolver, select_best_pair
from tests.mocks import MockDexClient, MockMexcClient, make_pair


PEPE_ETH = "0x6982508145454ce325ddbe47a25d4ec3d2311933"
PEPE_BSC = "0x25d887ce7a35172c62febfd67a1856f20faebb00"


def _resolver(mexc: MockMexcClient, dex: MockDexClient) -> TokenResolver:
    return TokenResolver(mexc, dex)  # type: ignore[arg-type]


class TestSelectBestPair:
    """Tests for select_best_pair."""

    def test_highest_volume(self) -> None:
        pairs = [
            make_pair("ethereum", "0xA", 1_000),
            make_pair("bsc", "0xB", 5_000),
            make_pair("ethereum", "0xC", 3_000),
        ]

        best = select_best_pair(pairs)

        assert best is not None
        assert best.pair_address == "0xB"

    def test_tie_keeps_first(self) -> None:
        pairs = [make_pair("ethereum", "0xA", 100), make_pair("bsc", "0xB", 100)]

        best = select_best_pair(pairs)

        assert best is not None
        assert best.pair_address == "0xA"

    def test_missing_volume_counts_as_zero(self) -> None:
        pairs = [make_pair("ethereum", "0xA", None), make_pair("bsc", "0xB", 1)]

        best = select_best_pair(pairs)

        assert best is not None
        assert best.pair_address == "0xB"

    def test_empty(self) -> None:
        assert select_best_pair([]) is None


class TestTokenResolver:
    """Tests for TokenResolver.resolve."""

    @pytest.mark.asyncio
    async def test_resolves_across_networks(self, mock_mexc: MockMexcClient) -> None:
        """Test that every contract network is searched for the best pair."""
        dex = MockDexClient(
            {
                PEPE_ETH: [make_pair("ethereum", "0xA", 1_000), make_pair("ethereum", "0xB", 5_000)],
                PEPE_BSC: [make_pair("bsc", "0xC", 3_000, price="0.0000123")],
            }
        )

        result = await _resolver(mock_mexc, dex).resolve("PEPE")

        assert result.found
        assert result.chain == "ethereum"
        assert result.address == "0xB"
        assert result.url == "https://dexscreener.com/ethereum/0xB"
        assert result.deposit_open is True
        assert sorted(dex.lookups) == sorted([PEPE_ETH, PEPE_BSC])

    @pytest.mark.asyncio
    async def test_failed_network_is_skipped(self, mock_mexc: MockMexcClient) -> None:
        """Test that one failing network does not abort the others."""
        dex = MockDexClient(
            {
                PEPE_ETH: ExchangeClientError("HTTP 429", code=429),
                PEPE_BSC: [make_pair("bsc", "0xC", 10)],
            }
        )

        result = await _resolver(mock_mexc, dex).resolve("PEPE")

        assert result.found
        assert result.chain == "bsc"
        assert result.address == "0xC"

    @pytest.mark.asyncio
    async def test_no_pairs_keeps_deposit_status(self, mock_mexc: MockMexcClient) -> None:
        result = await _resolver(mock_mexc, MockDexClient()).resolve("PEPE")

        assert not result.found
        assert result.to_dict() == {"ok": False, "error": "no pairs", "depositOpen": True}

    @pytest.mark.asyncio
    async def test_networks_without_contracts(self, mock_mexc: MockMexcClient) -> None:
        """Test that native coins resolve to no pairs without DEX lookups."""
        dex = MockDexClient()

        result = await _resolver(mock_mexc, dex).resolve("BTC")

        assert not result.found
        assert result.deposit_open is True
        assert dex.lookups == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("symbol", ["NOPE", "DEAD", "BARE"])
    async def test_not_found(self, mock_mexc: MockMexcClient, symbol: str) -> None:
        """Test that unlisted symbols and empty network lists are NOT_FOUND."""
        dex = MockDexClient()

        with pytest.raises(ResolveError) as exc_info:
            await _resolver(mock_mexc, dex).resolve(symbol)

        assert exc_info.value.kind is ResolveErrorKind.NOT_FOUND
        assert exc_info.value.to_dict() == {"ok": False, "error": "not found"}
        assert dex.lookups == []

    @pytest.mark.asyncio
    async def test_api_error(self) -> None:
        mexc = MockMexcClient(asset_config=ExchangeClientError("HTTP 503", code=503))

        with pytest.raises(ResolveError) as exc_info:
            await _resolver(mexc, MockDexClient()).resolve("PEPE")

        assert exc_info.value.kind is ResolveErrorKind.API_ERROR
        assert exc_info.value.to_dict() == {"ok": False, "error": "API error"}

    @pytest.mark.asyncio
    async def test_missing_credentials_is_api_error(self) -> None:
        mexc = MockMexcClient(has_credentials=False)

        with pytest.raises(ResolveError) as exc_info:
            await _resolver(mexc, MockDexClient()).resolve("PEPE")

        assert exc_info.value.kind is ResolveErrorKind.API_ERROR

    @pytest.mark.asyncio
    async def test_found_to_dict(self, mock_mexc: MockMexcClient) -> None:
        dex = MockDexClient({PEPE_ETH: [make_pair("ethereum", "0xA", 1, price="0.5")]})

        result = await _resolver(mock_mexc, dex).resolve("PEPE")

        assert result.to_dict() == {
            "ok": True,
            "chain": "ethereum",
            "addr": "0xA",
            "url": "https://dexscreener.com/ethereum/0xA",
            "price": 0.5,
            "depositOpen": True,
        }
