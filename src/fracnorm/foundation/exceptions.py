"""
Exception hierarchy
=====================================
Every failure carries a stable numeric code and a human-readable message
that names the offending value(s).

Hierarchy:
    FracNormError (base)
    ├── FractionParseError - input shape or number syntax is wrong
    ├── IntegerOverflowError - a value leaves the fixed-width integer range
    ├── FractionDomainError - division by zero
    ├── ArgumentError - command line arguments or input file are unusable
    └── ConfigurationError - ParseOptions are invalid
"""

from .constants import CODE_CONFIGURATION


class FracNormError(Exception):
    """Base class for all fracnorm errors.

    Catch this to handle any failure of the pipeline or the shell.

    Example:
        >>> try:
        ...     parse_fraction("1/2/3")
        ... except FracNormError as e:
        ...     print(e.format())
        E0014: Could not parse fraction '1/2/3'
    """

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def format(self) -> str:
        """Render as ``E<4-digit code>: <message>``."""
        return f"E{self.code:04d}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"


class FractionParseError(FracNormError):
    """The input is not a fraction, or one of its sides is not a number.

    Codes: 14 (fraction shape), 22 (number syntax).
    """

    pass


class IntegerOverflowError(FracNormError):
    """A parsed or computed value does not fit the fixed-width integer type.

    Codes: 16 (power of ten), 18 (denominator scaling),
    20 (numerator scaling), 24 (digit string or scale too large).
    """

    pass


class FractionDomainError(FracNormError):
    """The final denominator is zero (code 26)."""

    pass


class ArgumentError(FracNormError):
    """Bad command line input: unreadable --from-file path (code 1),
    wrong number of arguments (codes 10, 12).
    """

    pass


class ConfigurationError(FracNormError):
    """Invalid ParseOptions."""

    def __init__(self, message: str):
        super().__init__(CODE_CONFIGURATION, message)


__all__ = [
    "FracNormError",
    "FractionParseError",
    "IntegerOverflowError",
    "FractionDomainError",
    "ArgumentError",
    "ConfigurationError",
]
