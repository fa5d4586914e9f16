"""
Fraction splitter
=====================================
Classifies the raw input as a whole number ("7") or a single division
("3/4") and returns the two sides as text. No number parsing happens here.
"""

import re
from typing import Tuple

from ..foundation.constants import CODE_MALFORMED_FRACTION, DEFAULT_DENOMINATOR_TEXT
from ..foundation.exceptions import FractionParseError
from ..runtime.logging_utils import get_logger

_logger = get_logger(__name__)

_RX_WHOLE = re.compile(r"\A([^/]+)\Z", re.DOTALL)
_RX_DIVISION = re.compile(r"\A([^/]+)/([^/]+)\Z", re.DOTALL)


def split_fraction(text: str) -> Tuple[str, str]:
    """Split ``text`` into numerator and denominator substrings.

    Args:
        text: Raw input such as ``"35,6/12"`` or ``"7"``.

    Returns:
        ``(numerator_text, denominator_text)``; the denominator defaults to
        ``"1"`` when there is no slash.

    Raises:
        FractionParseError: code 14 for empty input, empty sides or more
            than one slash.

    Examples:
        >>> split_fraction("35,6/12")
        ('35,6', '12')
        >>> split_fraction("7")
        ('7', '1')
    """
    match = _RX_WHOLE.match(text)
    if match:
        parts = (match.group(1), DEFAULT_DENOMINATOR_TEXT)
    else:
        match = _RX_DIVISION.match(text)
        if not match:
            raise FractionParseError(
                CODE_MALFORMED_FRACTION, f"Could not parse fraction '{text}'"
            )
        parts = (match.group(1), match.group(2))

    _logger.debug("split %r -> numerator=%r denominator=%r", text, *parts)
    return parts
