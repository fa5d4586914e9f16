"""
fracnorm: reduce fraction strings to lowest terms

Main features:
- Accepts "7", "3/4" and decimal sides with "," or "." ("35,6/12")
- Converts decimals to exact integer ratios, no floating point involved
- Checks every step against a fixed-width unsigned integer range (64-bit by default)
- Reports failures with stable numeric codes (E0014 ... E0026)

Quick start:
    >>> from fracnorm import parse_fraction
    >>> str(parse_fraction("35,6/12"))
    '89/30'

More information:
    - API reference: fracnorm.interface.api
    - Exception types: fracnorm.foundation.exceptions
    - Error codes: fracnorm.foundation.constants
"""

__version__ = "1.0.0"

from .interface.api import evaluate_fraction, parse_fraction
from .runtime.batch import batch_evaluate_fractions, format_batch_summary
from .foundation.exceptions import (
    FracNormError,
    FractionParseError,
    IntegerOverflowError,
    FractionDomainError,
    ArgumentError,
    ConfigurationError,
)
from .foundation.constants import (
    CODE_NO_ARGUMENT,
    CODE_TOO_MANY_ARGUMENTS,
    CODE_MALFORMED_FRACTION,
    CODE_POWER_OVERFLOW,
    CODE_DENOMINATOR_OVERFLOW,
    CODE_NUMERATOR_OVERFLOW,
    CODE_UNPARSABLE_NUMBER,
    CODE_INTEGER_TOO_LARGE,
    CODE_DIVISION_BY_ZERO,
)

from .core.options import ParseOptions
from .core.types import (
    FractionResult,
    IntegerRatio,
    ReducedFraction,
    ScaledInteger,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "parse_fraction",
    "evaluate_fraction",
    "batch_evaluate_fractions",
    "format_batch_summary",
    "ParseOptions",
    "IntegerRatio",
    "ReducedFraction",
    "ScaledInteger",
    "FractionResult",
    # Exceptions
    "FracNormError",
    "FractionParseError",
    "IntegerOverflowError",
    "FractionDomainError",
    "ArgumentError",
    "ConfigurationError",
    # Error codes
    "CODE_NO_ARGUMENT",
    "CODE_TOO_MANY_ARGUMENTS",
    "CODE_MALFORMED_FRACTION",
    "CODE_POWER_OVERFLOW",
    "CODE_DENOMINATOR_OVERFLOW",
    "CODE_NUMERATOR_OVERFLOW",
    "CODE_UNPARSABLE_NUMBER",
    "CODE_INTEGER_TOO_LARGE",
    "CODE_DIVISION_BY_ZERO",
]
