"""
Shared constants
=====================================
Error codes reported to callers and the fixed-width integer types that
bound every value in the pipeline.

Error codes are stable: the command line shell uses them as process exit
statuses and prints them as ``E<4-digit code>``.
"""

import numpy as np

# --- Fixed-width types ---

# Mantissas, powers of ten and scaled products must fit this type.
DEFAULT_INTEGER_DTYPE = np.uint64

# Number of digits after the decimal separator.
DEFAULT_SCALE_DTYPE = np.uint8

UINT64_MAX = int(np.iinfo(np.uint64).max)
UINT8_MAX = int(np.iinfo(np.uint8).max)

# --- Input syntax ---

FRACTION_SEPARATOR = "/"
DEFAULT_DECIMAL_SEPARATORS = (",", ".")
DEFAULT_DENOMINATOR_TEXT = "1"

ROLE_NUMERATOR = "numerator"
ROLE_DENOMINATOR = "denominator"

# --- Error codes ---

CODE_SUCCESS = 0
CODE_CONFIGURATION = 2

# Shell level
CODE_UNREADABLE_FILE = 1
CODE_NO_ARGUMENT = 10
CODE_TOO_MANY_ARGUMENTS = 12

# Pipeline level
CODE_MALFORMED_FRACTION = 14
CODE_POWER_OVERFLOW = 16
CODE_DENOMINATOR_OVERFLOW = 18
CODE_NUMERATOR_OVERFLOW = 20
CODE_UNPARSABLE_NUMBER = 22
CODE_INTEGER_TOO_LARGE = 24
CODE_DIVISION_BY_ZERO = 26

__all__ = [
    "DEFAULT_INTEGER_DTYPE",
    "DEFAULT_SCALE_DTYPE",
    "UINT64_MAX",
    "UINT8_MAX",
    "FRACTION_SEPARATOR",
    "DEFAULT_DECIMAL_SEPARATORS",
    "DEFAULT_DENOMINATOR_TEXT",
    "ROLE_NUMERATOR",
    "ROLE_DENOMINATOR",
    "CODE_SUCCESS",
    "CODE_CONFIGURATION",
    "CODE_UNREADABLE_FILE",
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
