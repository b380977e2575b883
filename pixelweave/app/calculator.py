from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..arithmetic import format_expression, operate, parse_number, parse_operator
from ..errors import CalculatorError

logger = logging.getLogger(__name__)

FLAG_ARGS = {"-h", "--help", "-v", "--verbose"}


def _separate_operands(argv: List[str]) -> List[str]:
    """Insert "--" before the first operand so "-1e3" or "-inf" is never read as a flag."""
    for index, arg in enumerate(argv):
        if arg == "--":
            return list(argv)
        if arg not in FLAG_ARGS:
            return list(argv[:index]) + ["--"] + list(argv[index:])
    return list(argv)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pixelweave-calc",
        description="Evaluate a single arithmetic operation on two numbers.",
        epilog=(
            "Operators: + - / and * x X for multiplication. Quote * to keep the shell from expanding it. "
            "Options must come before the first operand."
        ),
    )
    parser.add_argument("first", help="First operand")
    parser.add_argument("operator", help="Operator; only its first character is used")
    parser.add_argument("second", help="Second operand")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parsed operands to stderr")
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(_separate_operands(argv))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        first = parse_number(args.first)
        operator = parse_operator(args.operator)
        second = parse_number(args.second)
        logger.debug("Parsed operands %r %s %r", first, operator, second)
        result = operate(operator, first, second)
    except CalculatorError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(format_expression(first, operator, second, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
