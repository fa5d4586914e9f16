"""Dataclasses passed between the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class ScaledInteger:
    """Exact decimal value ``mantissa * 10 ** -scale``.

    ``scale`` is the number of digits after the decimal separator, 0 for a
    plain integer. Built by the converter, consumed by the aligner.
    """

    mantissa: int
    scale: int = 0

    @property
    def value(self) -> Fraction:
        return Fraction(self.mantissa, 10**self.scale)


@dataclass(frozen=True, slots=True)
class IntegerRatio:
    """Numerator/denominator pair of plain integers.

    Built by the aligner; not reduced and the denominator may be zero.
    """

    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def as_tuple(self) -> Tuple[int, int]:
        return (self.numerator, self.denominator)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


@dataclass(frozen=True, slots=True)
class ReducedFraction(IntegerRatio):
    """IntegerRatio in lowest terms, as returned by ``reduce_fraction``.

    The denominator is at least 1 and zero is always ``0/1``.
    """


@dataclass
class FractionResult:
    """Outcome of evaluating one input string.

    ``code`` is 0 and ``fraction`` is set on success; otherwise ``code`` and
    ``message`` carry the error.
    """

    input: str
    success: bool
    fraction: Optional[ReducedFraction] = None
    code: int = 0
    message: str = ""

    def format(self) -> str:
        if self.success:
            return str(self.fraction)
        return f"E{self.code:04d}: {self.message}"
