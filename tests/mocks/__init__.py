"""Mock implementations for testing."""

from tests.mocks.upstream import MockDexClient, MockMexcClient, MockTickerClient, make_pair


__all__ = [
    "MockDexClient",
    "MockMexcClient",
    "MockTickerClient",
    "make_pair",
]
