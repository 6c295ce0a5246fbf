"""
Pytest configuration and shared fixtures.

Provides reusable test fixtures for all test modules.
"""

from unittest.mock import MagicMock

import pytest

from spreadwatch.config.constants import EXCHANGES
from spreadwatch.config.settings import Settings
from spreadwatch.core.types import SystemSnapshot
from spreadwatch.exchange.models import AssetConfig, TokenInfo
from spreadwatch.market.aggregator import PriceAggregator
from spreadwatch.market.deposit import DepositChecker
from tests.mocks.upstream import MockMexcClient, MockTickerClient


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment, default secret."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        secret_token="777",
        mexc_api_key="",
        mexc_api_secret="",
        pod_ip="10.0.0.7",
        cpu_cores=2.0,
        ram_limit="512Mi",
        poll_interval_ms=500,
    )


# =============================================================================
# Asset Configuration Fixtures
# =============================================================================


@pytest.fixture
def asset_config_payload() -> list[dict]:
    """Raw `/api/v3/capital/config/getall` response."""
    return [
        {
            "coin": "PEPE",
            "name": "Pepe",
            "networkList": [
                {
                    "coin": "PEPE",
                    "network": "Ethereum(ERC20)",
                    "netWork": "ETH",
                    "depositEnable": True,
                    "withdrawEnable": True,
                    "contract": "0x6982508145454ce325ddbe47a25d4ec3d2311933",
                },
                {
                    "coin": "PEPE",
                    "network": "BNB Smart Chain(BEP20)",
                    "netWork": "BSC",
                    "depositEnable": False,
                    "withdrawEnable": True,
                    "contract": "0x25d887ce7a35172c62febfd67a1856f20faebb00",
                },
            ],
        },
        {
            "coin": "BTC",
            "name": "Bitcoin",
            "networkList": [
                {
                    "coin": "BTC",
                    "network": "Bitcoin(BTC)",
                    "netWork": "BTC",
                    "depositEnable": True,
                    "withdrawEnable": True,
                    "contract": "",
                },
            ],
        },
        {
            "coin": "DEAD",
            "name": "Delisted",
            "depositEnable": False,
            "networkList": [],
        },
        {
            "coin": "BARE",
            "name": "No networks",
            "networkList": [],
        },
    ]


@pytest.fixture
def asset_config(asset_config_payload: list[dict]) -> AssetConfig:
    """Parsed asset configuration."""
    return AssetConfig.model_validate({"tokens": asset_config_payload})


@pytest.fixture
def pepe(asset_config: AssetConfig) -> TokenInfo:
    """Token with one open and one closed network."""
    token = asset_config.get("PEPE")
    assert token is not None
    return token


# =============================================================================
# Aggregation Fixtures
# =============================================================================


@pytest.fixture
def fixed_prices() -> dict[str, float]:
    """A distinct price for every exchange in the roster."""
    return {ex: 3000.0 + i for i, ex in enumerate(EXCHANGES)}


@pytest.fixture
def mock_sampler() -> MagicMock:
    """Sampler returning a fixed snapshot."""
    sampler = MagicMock()
    sampler.sample.return_value = SystemSnapshot(ip="10.0.0.7", cpu_percent=12.5, ram_percent=40.1)
    return sampler


@pytest.fixture
def mock_tickers(fixed_prices: dict[str, float]) -> MockTickerClient:
    return MockTickerClient(fixed_prices)


@pytest.fixture
def mock_mexc(asset_config: AssetConfig) -> MockMexcClient:
    return MockMexcClient(price=3000.0, asset_config=asset_config)


@pytest.fixture
def aggregator(
    mock_tickers: MockTickerClient,
    mock_mexc: MockMexcClient,
    mock_sampler: MagicMock,
) -> PriceAggregator:
    """Aggregator wired entirely to mocks."""
    return PriceAggregator(
        tickers=mock_tickers,  # type: ignore[arg-type]
        mexc=mock_mexc,  # type: ignore[arg-type]
        deposits=DepositChecker(mock_mexc),  # type: ignore[arg-type]
        sampler=mock_sampler,
    )
