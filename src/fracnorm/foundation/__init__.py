"""Foundation utilities and shared definitions public exports."""

from .constants import *
from .exceptions import *
from .fraction_utils import (
    checked_mul,
    checked_pow10,
    fits,
    gcd,
    integer_max,
    is_unsigned_dtype,
)

__all__ = [
    "checked_mul",
    "checked_pow10",
    "fits",
    "gcd",
    "integer_max",
    "is_unsigned_dtype",
]
