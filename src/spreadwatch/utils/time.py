"""
Timestamp utilities.

Upstream APIs and the dashboard both work in Unix milliseconds.
"""

import time


def get_timestamp_ms() -> int:
    """
    Get current timestamp in milliseconds.

    Used for signed MEXC requests which expect millisecond timestamps.

    Returns:
        Current Unix timestamp in milliseconds.
    """
    return time.time_ns() // 1_000_000
