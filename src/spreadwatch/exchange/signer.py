"""
HMAC-SHA256 request signing for the MEXC private API.

MEXC expects the signature over the query string with parameters
sorted by key and a fresh millisecond timestamp on every call.
"""

import hashlib
import hmac

from spreadwatch.utils.time import get_timestamp_ms


class RequestSigner:
    """
    Signs requests for MEXC API authentication.

    Uses HMAC-SHA256 as required by MEXC.
    """

    __slots__ = ("_secret_bytes",)

    def __init__(self, api_secret: str) -> None:
        """
        Initialize signer with API secret.

        Args:
            api_secret: MEXC API secret key.
        """
        # Pre-encode secret for faster HMAC computation
        self._secret_bytes = api_secret.encode("utf-8")

    @staticmethod
    def canonical_query(params: dict[str, str | int | float]) -> str:
        """
        Build the canonical query string.

        Args:
            params: Request parameters.

        Returns:
            `key=value` pairs sorted by key and joined with `&`.
        """
        return "&".join(f"{key}={params[key]}" for key in sorted(params))

    def sign(self, query_string: str) -> str:
        """
        Generate HMAC-SHA256 signature for a query string.

        Args:
            query_string: Canonical query parameters.

        Returns:
            Hexadecimal signature string.
        """
        return hmac.new(
            self._secret_bytes,
            query_string.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    def create_signed_params(
        self,
        params: dict[str, str | int | float] | None = None,
        timestamp_ms: int | None = None,
    ) -> dict[str, str | int | float]:
        """
        Create a new params dict with timestamp and signature.

        Args:
            params: Original request parameters.
            timestamp_ms: Override for the timestamp, current time if omitted.

        Returns:
            New params dict in canonical order, followed by the signature.
        """
        unsigned = dict(params or {})
        unsigned["timestamp"] = timestamp_ms if timestamp_ms is not None else get_timestamp_ms()

        # Keep the sent order identical to the signed order
        signed_params: dict[str, str | int | float] = {
            key: unsigned[key] for key in sorted(unsigned)
        }
        signed_params["signature"] = self.sign(self.canonical_query(unsigned))

        return signed_params
