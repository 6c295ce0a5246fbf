"""
Unit tests for RequestSigner.

Tests HMAC-SHA256 signing and canonical parameter ordering.
"""

import hashlib
import hmac

import pytest

from spreadwatch.exchange.signer import RequestSigner


class TestRequestSigner:
    """Tests for RequestSigner."""

    @pytest.fixture
    def signer(self) -> RequestSigner:
        """Create a test signer."""
        return RequestSigner("test_secret_key")

    def test_sign_basic(self, signer: RequestSigner) -> None:
        """Test basic signature generation."""
        signature = signer.sign("recvWindow=5000&timestamp=1700000000000")

        # Signature should be 64 character hex string
        assert len(signature) == 64
        assert all(c in "0123456789abcdef" for c in signature)

    def test_sign_matches_hmac(self, signer: RequestSigner) -> None:
        """Test that the signature is a plain HMAC-SHA256 of the query."""
        query = "timestamp=1700000000000"
        expected = hmac.new(b"test_secret_key", query.encode(), hashlib.sha256).hexdigest()

        assert signer.sign(query) == expected

    def test_different_secrets_different_signatures(self) -> None:
        query = "timestamp=123456789"

        assert RequestSigner("secret1").sign(query) != RequestSigner("secret2").sign(query)

    def test_canonical_query_sorted(self) -> None:
        """Test that parameters are sorted lexicographically by key."""
        params = {"timestamp": 1700000000000, "coin": "PEPE", "recvWindow": 5000}

        assert RequestSigner.canonical_query(params) == (
            "coin=PEPE&recvWindow=5000&timestamp=1700000000000"
        )

    def test_create_signed_params(self, signer: RequestSigner) -> None:
        """Test that timestamp and signature are added over the canonical query."""
        result = signer.create_signed_params({"coin": "PEPE"}, timestamp_ms=1700000000000)

        assert result["timestamp"] == 1700000000000
        assert result["signature"] == signer.sign("coin=PEPE&timestamp=1700000000000")
        assert list(result) == ["coin", "timestamp", "signature"]

    def test_create_signed_params_fresh_timestamp(self, signer: RequestSigner) -> None:
        """Test that a current millisecond timestamp is attached."""
        result = signer.create_signed_params()

        assert isinstance(result["timestamp"], int)
        assert result["timestamp"] > 1_600_000_000_000

    def test_create_signed_params_does_not_mutate(self, signer: RequestSigner) -> None:
        params: dict[str, str | int | float] = {"coin": "PEPE"}

        signer.create_signed_params(params)

        assert params == {"coin": "PEPE"}
