"""
Decimal-to-rational converter
=====================================
Turns one side of a fraction ("35,6", "12", "0.125") into an exact
ScaledInteger: the digits with the separator removed form the mantissa,
the number of digits after the separator is the scale.

    "35,6"  -> ScaledInteger(mantissa=356, scale=1)
    "12"    -> ScaledInteger(mantissa=12, scale=0)
    "0.125" -> ScaledInteger(mantissa=125, scale=3)
"""

import re
from functools import lru_cache
from typing import Optional, Tuple

from ..foundation.constants import (
    CODE_INTEGER_TOO_LARGE,
    CODE_UNPARSABLE_NUMBER,
    DEFAULT_DECIMAL_SEPARATORS,
    UINT64_MAX,
    UINT8_MAX,
)
from ..foundation.exceptions import FractionParseError, IntegerOverflowError
from ..foundation.fraction_utils import fits
from ..runtime.logging_utils import get_logger
from .options import check_separators
from .types import ScaledInteger

_logger = get_logger(__name__)


@lru_cache(maxsize=16)
def number_pattern(separators: Tuple[str, ...]) -> "re.Pattern[str]":
    """Compiled matcher for ``digits`` or ``digits <sep> digits``.

    Raises:
        ConfigurationError: for an empty or invalid separator set.
    """
    check_separators(separators)
    char_class = "".join(re.escape(sep) for sep in separators)
    return re.compile(rf"\A([0-9]+)(?:[{char_class}]([0-9]+))?\Z")


def parse_scaled_integer(
    text: str,
    role: str,
    separators: Tuple[str, ...] = DEFAULT_DECIMAL_SEPARATORS,
    max_value: int = UINT64_MAX,
    max_scale: int = UINT8_MAX,
) -> ScaledInteger:
    """Parse an unsigned integer or decimal number into a ScaledInteger.

    Args:
        text: The numerator or denominator substring.
        role: ``"numerator"`` or ``"denominator"``, only used in messages.
        separators: Accepted decimal separator characters.
        max_value: Largest allowed mantissa.
        max_scale: Largest allowed number of fractional digits.

    Raises:
        FractionParseError: code 22 when ``text`` is not a number.
        IntegerOverflowError: code 24 when the mantissa or the scale is too
            large.
        ConfigurationError: when ``separators`` is empty or invalid.
    """
    match = number_pattern(tuple(separators)).match(text)
    if not match:
        raise FractionParseError(
            CODE_UNPARSABLE_NUMBER, f"Could not parse {role} = '{text}'"
        )

    int_digits: str = match.group(1)
    frac_digits: Optional[str] = match.group(2)
    digits = int_digits + (frac_digits or "")
    scale = len(frac_digits) if frac_digits else 0

    # More significant digits than the limit means larger; int() never sees
    # an arbitrarily long string.
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(max_value)):
        mantissa = None
    else:
        mantissa = int(significant)
    if mantissa is None or not fits(mantissa, max_value):
        raise IntegerOverflowError(
            CODE_INTEGER_TOO_LARGE,
            f"{role} '{text}' is too large (max {max_value})",
        )
    if not fits(scale, max_scale):
        raise IntegerOverflowError(
            CODE_INTEGER_TOO_LARGE,
            f"{role} '{text}' has too many decimal places ({scale}, max {max_scale})",
        )

    result = ScaledInteger(mantissa=mantissa, scale=scale)
    _logger.debug("%s %r -> %s", role, text, result)
    return result
