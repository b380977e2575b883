from __future__ import annotations

import math
import operator as _op
from typing import Callable, Dict

from .errors import InvalidNumberError, UnsupportedOperatorError


def _divide(first: float, second: float) -> float:
    # IEEE semantics instead of ZeroDivisionError.
    if second == 0:
        if first == 0 or math.isnan(first):
            return math.nan
        return math.copysign(math.inf, first) * math.copysign(1.0, second)
    return first / second


OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "/": _divide,
    "*": _op.mul,
    "x": _op.mul,
    "X": _op.mul,
}


def operate(operator: str, first: float, second: float) -> float:
    func = OPERATORS.get(operator)
    if func is None:
        raise UnsupportedOperatorError(operator)
    return func(first, second)


def parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise InvalidNumberError(text) from None


def parse_operator(text: str) -> str:
    """Return the operator character, which is the first character of ``text``."""
    if not text:
        raise UnsupportedOperatorError(text)
    return text[0]


def format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def format_expression(first: float, operator: str, second: float, result: float) -> str:
    return f"{format_number(first)} {operator} {format_number(second)} = {format_number(result)}"
