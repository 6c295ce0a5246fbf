"""
Memory size parsing.

Container resource limits arrive as Kubernetes-style quantity strings.
"""

from typing import Final


BYTES_PER_MIB: Final[int] = 1024 * 1024
BYTES_PER_GIB: Final[int] = 1024 * 1024 * 1024


def parse_ram_limit(text: str) -> int:
    """
    Parse a RAM limit string into bytes.

    Accepts a binary "Gi" or "Mi" suffix; bare numbers are megabytes.

    Args:
        text: Limit such as "512Mi", "1Gi" or "100".

    Returns:
        Limit in bytes.

    Raises:
        ValueError: If the value is not a positive number.

    Examples:
        >>> parse_ram_limit("512Mi")
        536870912
        >>> parse_ram_limit("1Gi")
        1073741824
    """
    value = text.strip()
    multiplier = BYTES_PER_MIB

    if value.endswith("Gi"):
        value, multiplier = value[:-2], BYTES_PER_GIB
    elif value.endswith("Mi"):
        value = value[:-2]

    amount = float(value)
    if amount <= 0:
        raise ValueError(f"RAM limit must be positive: {text!r}")

    return int(amount * multiplier)
