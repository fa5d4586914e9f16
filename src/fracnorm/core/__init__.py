"""Core computational subpackage public exports."""

from .aligner import align_exponents
from .decimal_converter import number_pattern, parse_scaled_integer
from .options import ParseOptions
from .reducer import reduce_fraction
from .splitter import split_fraction
from .types import FractionResult, IntegerRatio, ReducedFraction, ScaledInteger

__all__ = [
    "ParseOptions",
    "ScaledInteger",
    "IntegerRatio",
    "ReducedFraction",
    "FractionResult",
    "split_fraction",
    "number_pattern",
    "parse_scaled_integer",
    "align_exponents",
    "reduce_fraction",
]
