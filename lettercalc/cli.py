"""Command line entry point.

Usage:
  lettercalc EXPRESSION [--conventional] [--lenient-brackets] [-v]
  python -m lettercalc EXPRESSION

Prints "<EXPRESSION> = <result>" and exits 0, or prints the error to stderr
and exits 1.
"""

import argparse
import logging
import sys

from lettercalc import calculate
from lettercalc.errors import CalcError, ExpressionNotProvided
from lettercalc.symbols import CONVENTIONAL_SYMBOLS, DEFAULT_SYMBOLS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the lettercalc command."""
    ap = argparse.ArgumentParser(
        prog="lettercalc",
        description=(
            "Evaluate integer arithmetic left to right, without precedence. "
            "Letters a-d are + - * / and e, f are ( )."
        ),
    )
    ap.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate, e.g. 3a2c4",
    )
    ap.add_argument(
        "--conventional",
        action="store_true",
        help="Read + - * / ( ) instead of the letters a-f",
    )
    ap.add_argument(
        "--lenient-brackets",
        action="store_true",
        help="Accept open brackets that are never closed",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parse and evaluation steps",
    )
    return ap


def run(
    expression: str | None,
    *,
    conventional: bool = False,
    lenient_brackets: bool = False,
) -> str:
    """Evaluate expression and format the output line.

    Raises:
        ExpressionNotProvided: If expression is None.
        CalcError: If the expression is invalid.

    """
    if expression is None:
        raise ExpressionNotProvided()

    symbols = CONVENTIONAL_SYMBOLS if conventional else DEFAULT_SYMBOLS
    result = calculate(
        expression,
        symbols,
        strict_brackets=not lenient_brackets,
    )
    return f"{expression} = {result}"


def main(argv: list[str] | None = None) -> int:
    """Run the command line.

    Args:
        argv: Arguments without the program name, sys.argv when None.

    Returns:
        int: The exit status, 0 on success and 1 on any CalcError.

    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        line = run(
            args.expression,
            conventional=args.conventional,
            lenient_brackets=args.lenient_brackets,
        )
    except CalcError as exc:
        logger.debug("evaluation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
