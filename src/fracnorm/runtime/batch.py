"""
Batch evaluation
=====================================
Evaluate many fraction strings independently and summarize the outcome.
A failing input never stops the others.

Usage:
    >>> from fracnorm.runtime.batch import batch_evaluate_fractions
    >>> results = batch_evaluate_fractions(["3/4", "6/8", "1/0"])
    >>> [r.code for r in results]
    [0, 0, 26]
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.options import ParseOptions
from ..core.types import FractionResult
from ..interface.api import evaluate_fraction
from .logging_utils import get_logger

_logger = get_logger(__name__)


def batch_evaluate_fractions(
    texts: Iterable[str], options: Optional[ParseOptions] = None
) -> List[FractionResult]:
    """Evaluate each input with evaluate_fraction, keeping input order."""
    results = [evaluate_fraction(text, options) for text in texts]
    failed = sum(1 for r in results if not r.success)
    _logger.debug("batch evaluated %d inputs, %d failed", len(results), failed)
    return results


def read_fraction_lines(path: Union[str, Path]) -> List[str]:
    """Read one input per line, skipping blank lines. Surrounding whitespace is stripped."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def first_failure_code(results: List[FractionResult]) -> int:
    for r in results:
        if not r.success:
            return r.code
    return 0


def format_batch_summary(results: List[FractionResult]) -> str:
    """Render one line per input followed by a totals line.

    Example output:
        3/4 -> 3/4
        1/0 -> E0026: Division by zero in 1/0
        Total: 2, succeeded: 1, failed: 1 (E0026 x1)
    """
    lines = [f"{r.input} -> {r.format()}" for r in results]

    failed = [r for r in results if not r.success]
    summary = (
        f"Total: {len(results)}, succeeded: {len(results) - len(failed)}, "
        f"failed: {len(failed)}"
    )
    if failed:
        counts = Counter(r.code for r in failed)
        detail = ", ".join(f"E{code:04d} x{n}" for code, n in sorted(counts.items()))
        summary += f" ({detail})"
    lines.append(summary)
    return "\n".join(lines)
