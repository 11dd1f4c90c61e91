"""Evaluate letter-encoded integer arithmetic from left to right.

>>> calculate("3a2c4")
20
"""

import typing as t

from lettercalc.errors import (
    CalcArithmeticError,
    CalcError,
    ExpressionNotProvided,
    IntegerParseError,
    InvalidInput,
)
from lettercalc.expression import Expression, Token, evaluate, tokenize
from lettercalc.number import Number, NumberAccumulator
from lettercalc.symbols import (
    CONVENTIONAL_SYMBOLS,
    DEFAULT_SYMBOLS,
    Operator,
    SymbolTable,
)

__all__ = [
    "CONVENTIONAL_SYMBOLS",
    "DEFAULT_SYMBOLS",
    "CalcArithmeticError",
    "CalcError",
    "Expression",
    "ExpressionNotProvided",
    "IntegerParseError",
    "InvalidInput",
    "Number",
    "NumberAccumulator",
    "Operator",
    "SymbolTable",
    "Token",
    "calculate",
    "evaluate",
    "tokenize",
]


def calculate(
    text: str,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
    /,
    *,
    strict_brackets: bool = True,
) -> int:
    """Tokenize and evaluate text.

    Returns:
        int: The result.

    Raises:
        CalcError: If the text cannot be parsed or evaluated.

    """
    expression: t.Final = tokenize(
        text,
        symbols,
        strict_brackets=strict_brackets,
    )
    return evaluate(expression).value
