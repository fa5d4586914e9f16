"""Integer helpers shared by the pipeline stages.

All arithmetic is exact Python ``int`` arithmetic checked against the bound
of a fixed-width unsigned numpy type, so results match what the same
operation would produce on that type without wrapping.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np


def integer_max(dtype: Any) -> int:
    """Largest value of an unsigned numpy integer type, as a Python int."""
    return int(np.iinfo(dtype).max)


def is_unsigned_dtype(dtype: Any) -> bool:
    try:
        return np.issubdtype(np.dtype(dtype), np.unsignedinteger)
    except TypeError:
        return False


def fits(value: int, limit: int) -> bool:
    return 0 <= value <= limit


def checked_mul(a: int, b: int, limit: int) -> Optional[int]:
    """Return ``a * b`` or None when the product exceeds ``limit``."""
    product = a * b
    if product > limit:
        return None
    return product


def checked_pow10(exponent: int, limit: int) -> Optional[int]:
    """Return ``10 ** exponent`` or None when it exceeds ``limit``.

    Multiplies step by step so a huge exponent stops at the first
    overflowing power instead of building a huge integer.

    Example:
        >>> checked_pow10(19, 2**64 - 1)
        10000000000000000000
        >>> checked_pow10(20, 2**64 - 1) is None
        True
    """
    result = 1
    for _ in range(exponent):
        result *= 10
        if result > limit:
            return None
    return result


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the iterative Euclidean algorithm.

    Example:
        >>> gcd(486, 12)
        6
    """
    while b:
        a, b = b, a % b
    return a


__all__ = [
    "integer_max",
    "is_unsigned_dtype",
    "fits",
    "checked_mul",
    "checked_pow10",
    "gcd",
]
