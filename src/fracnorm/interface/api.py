"""
fracnorm API - public interface
=====================================
Parse a fraction string and reduce it to lowest terms.

Usage:
    >>> from fracnorm import parse_fraction, evaluate_fraction
    >>>
    >>> # Raising form
    >>> str(parse_fraction("35,6/12"))
    '89/30'
    >>>
    >>> # Result form, never raises for bad input
    >>> result = evaluate_fraction("5/0")
    >>> result.success, result.code
    (False, 26)
"""

from typing import Optional

from ..core.aligner import align_exponents
from ..core.decimal_converter import parse_scaled_integer
from ..core.options import ParseOptions
from ..core.reducer import reduce_fraction
from ..core.splitter import split_fraction
from ..core.types import FractionResult, ReducedFraction
from ..foundation.constants import CODE_SUCCESS, ROLE_DENOMINATOR, ROLE_NUMERATOR
from ..foundation.exceptions import FracNormError
from ..runtime.logging_utils import ensure_console_handler, get_logger

_logger = get_logger()


def parse_fraction(
    text: str, options: Optional[ParseOptions] = None
) -> ReducedFraction:
    """Parse ``text`` and return the fraction in lowest terms.

    Pipeline: split on "/" -> parse each side into a ScaledInteger ->
    align decimal exponents -> reduce by gcd. The first failing stage
    decides the error; it propagates unchanged.

    Args:
        text: ``"7"``, ``"3/4"``, ``"35,6/12"``, ``"0.5/0,25"`` ...
        options: ParseOptions; defaults accept "," and "." with 64-bit
            unsigned bounds.

    Returns:
        ReducedFraction with ``gcd(numerator, denominator) == 1``.

    Raises:
        FractionParseError: codes 14, 22.
        IntegerOverflowError: codes 16, 18, 20, 24.
        FractionDomainError: code 26.
        ConfigurationError: invalid options.

    Example:
        >>> parse_fraction("35,6/12")
        ReducedFraction(numerator=89, denominator=30)
    """
    opts = (options or ParseOptions()).validate()

    # The console handler lives only for this call.
    attached = ensure_console_handler(
        _logger,
        enabled=bool(opts.console_log or opts.debug),
        level=10 if opts.debug else 20,
    )
    try:
        return _run_pipeline(text, opts)
    finally:
        if attached:
            ensure_console_handler(_logger, enabled=False)


def _run_pipeline(text: str, opts: ParseOptions) -> ReducedFraction:
    max_value = opts.max_value
    num_text, den_text = split_fraction(text)
    num_side = parse_scaled_integer(
        num_text,
        ROLE_NUMERATOR,
        separators=opts.separators,
        max_value=max_value,
        max_scale=opts.max_scale,
    )
    den_side = parse_scaled_integer(
        den_text,
        ROLE_DENOMINATOR,
        separators=opts.separators,
        max_value=max_value,
        max_scale=opts.max_scale,
    )
    unreduced = align_exponents(num_side, den_side, max_value=max_value)
    return reduce_fraction(unreduced)


def evaluate_fraction(
    text: str, options: Optional[ParseOptions] = None
) -> FractionResult:
    """Like parse_fraction, but report failures in the returned FractionResult.

    Example:
        >>> evaluate_fraction("1/2/3").format()
        "E0014: Could not parse fraction '1/2/3'"
    """
    try:
        fraction = parse_fraction(text, options)
    except FracNormError as e:
        _logger.debug("evaluate_fraction(%r) failed: %s", text, e.format())
        return FractionResult(
            input=text, success=False, code=e.code, message=e.message
        )

    return FractionResult(
        input=text, success=True, fraction=fraction, code=CODE_SUCCESS
    )
