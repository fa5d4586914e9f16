#!/usr/bin/env python
"""
Command line tool: reduce a fraction to lowest terms

Usage:
    fracnorm 35,6/12              # prints 89/30
    fracnorm 5/0                  # prints E0026: ... to stderr, exit status 26
    fracnorm --from-file inputs.txt
    python -m fracnorm.interface.cli 3/4 --verbose

The exit status is 0 on success and the error code otherwise.
"""

import argparse
import re
import sys
from typing import List, Optional

from ..core.options import ParseOptions
from ..foundation.constants import (
    CODE_NO_ARGUMENT,
    CODE_TOO_MANY_ARGUMENTS,
    CODE_UNREADABLE_FILE,
)
from ..foundation.exceptions import ArgumentError, FracNormError
from ..runtime.batch import (
    batch_evaluate_fractions,
    first_failure_code,
    format_batch_summary,
    read_fraction_lines,
)
from .api import parse_fraction
from .. import __version__

# "-v", "--from-file"; "-3/4" or "-0,5/2" are (invalid) fractions instead.
_RX_OPTION_LIKE = re.compile(r"\A(--|-[A-Za-z])")


def _single_argument(fractions: List[str]) -> str:
    if not fractions:
        raise ArgumentError(CODE_NO_ARGUMENT, "No argument found")
    if len(fractions) != 1:
        raise ArgumentError(
            CODE_TOO_MANY_ARGUMENTS, f"Too many arguments ({len(fractions)})"
        )
    return fractions[0]


def reduce_command(args, options: ParseOptions) -> int:
    """Reduce one fraction given on the command line."""
    try:
        text = _single_argument(args.fractions)
        fraction = parse_fraction(text, options)
    except FracNormError as e:
        print(e.format(), file=sys.stderr)
        return e.code

    print(fraction)
    return 0


def batch_command(args, options: ParseOptions) -> int:
    """Reduce every line of a file."""
    if args.fractions:
        e = ArgumentError(
            CODE_TOO_MANY_ARGUMENTS,
            f"Too many arguments ({len(args.fractions)} besides --from-file)",
        )
        print(e.format(), file=sys.stderr)
        return e.code

    try:
        texts = read_fraction_lines(args.from_file)
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or exc
        e = ArgumentError(
            CODE_UNREADABLE_FILE,
            f"Could not read input file '{args.from_file}': {reason}",
        )
        print(e.format(), file=sys.stderr)
        return e.code

    results = batch_evaluate_fractions(texts, options)
    print(format_batch_summary(results))
    return first_failure_code(results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fracnorm",
        description="Reduce a fraction such as 35,6/12 to lowest terms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"fracnorm {__version__}"
    )
    parser.add_argument(
        "fractions",
        nargs="*",
        help="fraction to reduce, e.g. 3/4, 7 or 35,6/12 (exactly one)",
    )
    parser.add_argument(
        "--from-file",
        metavar="PATH",
        help="reduce one fraction per line of PATH instead",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log pipeline stages to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    # argparse sets aside inputs with a leading "-"; only real options are errors.
    unknown = [token for token in extras if _RX_OPTION_LIKE.match(token)]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    args.fractions.extend(token for token in extras if token not in unknown)

    options = ParseOptions(debug=args.verbose)

    if args.from_file:
        return batch_command(args, options)

    return reduce_command(args, options)


if __name__ == "__main__":
    sys.exit(main())
