"""Fixed-width integer helpers."""

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


def saturated_add(a: int, b: int) -> int:
    """Add two signed 64-bit integers, clamping instead of overflowing.

    Args:
        a: First operand
        b: Second operand

    Returns:
        a + b, limited to [LONG_MIN, LONG_MAX]

    Raises:
        ValueError: If either operand is outside the 64-bit range
    """
    for operand in (a, b):
        if not LONG_MIN <= operand <= LONG_MAX:
            raise ValueError(f"Operand out of 64-bit range: {operand}")

    return max(LONG_MIN, min(LONG_MAX, a + b))
