"""
Exponent aligner
=====================================
Combines the numerator and denominator ScaledIntegers into one integer
ratio by scaling the side with fewer decimal places by a power of ten:

    35.6 / 12  ->  (356, scale 1) / (12, scale 0)  ->  356 / 120

Every step is checked against the fixed-width integer limit, so the
result is exact or the call fails; nothing is rounded.
"""

from ..foundation.constants import (
    CODE_DENOMINATOR_OVERFLOW,
    CODE_NUMERATOR_OVERFLOW,
    CODE_POWER_OVERFLOW,
    UINT64_MAX,
)
from ..foundation.exceptions import IntegerOverflowError
from ..foundation.fraction_utils import checked_mul, checked_pow10
from ..runtime.logging_utils import get_logger
from .types import IntegerRatio, ScaledInteger

_logger = get_logger(__name__)


def align_exponents(
    num_side: ScaledInteger,
    den_side: ScaledInteger,
    max_value: int = UINT64_MAX,
) -> IntegerRatio:
    """Express ``num_side / den_side`` as a ratio of plain integers.

    The result is not reduced and may have a zero denominator.

    Raises:
        IntegerOverflowError: code 16 when ``10 ** diff`` overflows,
            18 when scaling the denominator overflows,
            20 when scaling the numerator overflows.
    """
    diff = abs(num_side.scale - den_side.scale)
    pow10 = checked_pow10(diff, max_value)
    if pow10 is None:
        raise IntegerOverflowError(
            CODE_POWER_OVERFLOW, f"Overflow in 10 ** {diff} (max {max_value})"
        )

    if num_side.scale > den_side.scale:
        numerator = num_side.mantissa
        denominator = checked_mul(den_side.mantissa, pow10, max_value)
        if denominator is None:
            raise IntegerOverflowError(
                CODE_DENOMINATOR_OVERFLOW,
                f"Overflow in denominator {den_side.mantissa} * {pow10}",
            )
    else:
        numerator = checked_mul(num_side.mantissa, pow10, max_value)
        denominator = den_side.mantissa
        if numerator is None:
            raise IntegerOverflowError(
                CODE_NUMERATOR_OVERFLOW,
                f"Overflow in numerator {num_side.mantissa} * {pow10}",
            )

    _logger.debug("aligned with 10 ** %d -> %d/%d", diff, numerator, denominator)
    return IntegerRatio(numerator=numerator, denominator=denominator)
