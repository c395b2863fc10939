#!/usr/bin/env python3
"""
Roman Numerals CLI

Command-line interface for converting between integers and Roman numerals.

Usage:
    python -m roman_numerals <value> [<value> ...] [options]
    python -m roman_numerals 1994                 # MCMXCIV
    python -m roman_numerals MCMXCIV              # 1994
    python -m roman_numerals IV_VIII              # Milhar, 4008
    python -m roman_numerals --check IVI XIV      # validate only

Options:
    --check          Report valid/invalid instead of converting
    --separator SEP  Character joining Milhar groups (default: _)
    -v, --verbose    Log why values were rejected
"""

import argparse
import logging
import re
import sys

from . import __version__
from .numerals import MILHAR_SEPARATOR, NumeralError, NumeralKind
from .parser import NumeralParser
from .validator import NumeralValidator

logger = logging.getLogger(__name__)

_ARABIC = re.compile(r"^[+-]?\d+$")


def classify(value: str, separator: str = MILHAR_SEPARATOR) -> NumeralKind:
    """Decide which notation a command-line value is written in."""
    if _ARABIC.match(value):
        return NumeralKind.ARABIC
    if separator in value:
        return NumeralKind.MILHAR
    return NumeralKind.ROMAN


def convert(engine: NumeralParser, value: str) -> str:
    """
    Convert one command-line value.

    Raises:
        NumeralError: If the value has no conversion.
    """
    kind = classify(value, engine.separator)
    if kind is NumeralKind.ARABIC:
        return engine.encoder.encode(int(value))
    if kind is NumeralKind.MILHAR:
        return str(engine.parse_milhar(value))
    return str(engine.parse_roman(value))


def check(engine: NumeralParser, value: str) -> str:
    """
    Validate one command-line value.

    Raises:
        NumeralError: If the value is not a valid numeral.
    """
    kind = classify(value, engine.separator)
    if kind is NumeralKind.ARABIC:
        raise NumeralError(f"{value!r} is an integer, not a numeral")
    problem = engine.validator.first_error(value, milhar=kind is NumeralKind.MILHAR)
    if problem:
        raise NumeralError(problem)
    return f"valid {kind.value}"


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="roman-numerals",
        description=(
            "Convert between integers and Roman numerals.\n\n"
            "Integers 1-3999 are written as Roman numerals; Roman numerals\n"
            "are read back as integers. Milhar numerals use '_' to multiply\n"
            "a group by 1000 (IV_VIII = 4008)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  roman-numerals 2025\n"
            "  roman-numerals mcmxciv\n"
            "  roman-numerals L_X_XXIII\n"
            "  roman-numerals --check IIII IV\n"
        ),
    )

    parser.add_argument(
        "values",
        nargs="+",
        help="Integers, Roman numerals or Milhar numerals",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report whether each value is a valid numeral instead of converting",
    )
    parser.add_argument(
        "--separator",
        default=MILHAR_SEPARATOR,
        help=f"Character joining Milhar groups (default: {MILHAR_SEPARATOR})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = NumeralParser(validator=NumeralValidator(separator=args.separator))
    except ValueError as e:
        parser.error(str(e))

    action = check if args.check else convert
    error_count = 0

    for value in args.values:
        try:
            print(f"{value} -> {action(engine, value)}")
        except NumeralError as e:
            if args.check:
                print(f"{value} -> invalid")
            print(f"[ERROR] {value}: {e}", file=sys.stderr)
            error_count += 1

    logger.debug("Processed %d values, %d errors", len(args.values), error_count)
    sys.exit(1 if error_count else 0)


if __name__ == "__main__":
    main()
