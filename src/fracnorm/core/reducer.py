"""Rational normalizer: reduce an integer ratio to lowest terms."""

from ..foundation.constants import CODE_DIVISION_BY_ZERO
from ..foundation.exceptions import FractionDomainError
from ..foundation.fraction_utils import gcd
from ..runtime.logging_utils import get_logger
from .types import IntegerRatio, ReducedFraction

_logger = get_logger(__name__)


def reduce_fraction(ratio: IntegerRatio) -> ReducedFraction:
    """
    Reduce ``ratio`` by the gcd of its numerator and denominator.

    A zero denominator is rejected before anything else; a zero numerator
    gives the canonical ``0/1``. Reducing a ReducedFraction again returns an
    equal value.

    Raises:
        FractionDomainError: code 26 when the denominator is zero.

    Example:
        >>> reduce_fraction(IntegerRatio(356, 120))
        ReducedFraction(numerator=89, denominator=30)
    """
    if ratio.denominator == 0:
        raise FractionDomainError(
            CODE_DIVISION_BY_ZERO,
            f"Division by zero in {ratio.numerator}/{ratio.denominator}",
        )

    if ratio.numerator == 0:
        return ReducedFraction(numerator=0, denominator=1)

    divisor = gcd(ratio.numerator, ratio.denominator)
    if divisor > 1:
        _logger.debug("reduced %s by gcd %d", ratio, divisor)

    return ReducedFraction(
        numerator=ratio.numerator // divisor,
        denominator=ratio.denominator // divisor,
    )
