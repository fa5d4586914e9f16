"""Public options objects.

These dataclasses provide a stable way to pass configuration into the API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..foundation.constants import (
    DEFAULT_DECIMAL_SEPARATORS,
    DEFAULT_INTEGER_DTYPE,
    DEFAULT_SCALE_DTYPE,
    FRACTION_SEPARATOR,
)
from ..foundation.exceptions import ConfigurationError
from ..foundation.fraction_utils import integer_max, is_unsigned_dtype


@dataclass(slots=True)
class ParseOptions:
    """Options that control fraction parsing."""

    separators: Tuple[str, ...] = DEFAULT_DECIMAL_SEPARATORS
    integer_dtype: Any = DEFAULT_INTEGER_DTYPE
    scale_dtype: Any = DEFAULT_SCALE_DTYPE

    # Logging
    console_log: bool = False
    debug: bool = False

    @property
    def max_value(self) -> int:
        return integer_max(self.integer_dtype)

    @property
    def max_scale(self) -> int:
        return integer_max(self.scale_dtype)

    def validate(self) -> "ParseOptions":
        """Raise ConfigurationError for unusable settings, return self otherwise."""
        for name in ("integer_dtype", "scale_dtype"):
            dtype = getattr(self, name)
            if not is_unsigned_dtype(dtype):
                raise ConfigurationError(
                    f"{name} must be an unsigned integer type, got {dtype!r}"
                )

        check_separators(self.separators)
        return self


def check_separators(separators: Tuple[str, ...]) -> None:
    """Raise ConfigurationError unless every separator is one non-digit character other than "/"."""
    if not separators:
        raise ConfigurationError("at least one decimal separator is required")
    for sep in separators:
        if not isinstance(sep, str) or len(sep) != 1:
            raise ConfigurationError(
                f"decimal separator must be a single character, got {sep!r}"
            )
        if sep.isdigit() or sep == FRACTION_SEPARATOR:
            raise ConfigurationError(f"invalid decimal separator {sep!r}")
