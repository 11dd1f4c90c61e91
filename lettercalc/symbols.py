"""Operators and the table mapping input characters onto them.

The default alphabet encodes ``+ - * / ( )`` as the letters ``a`` to ``f``.
A SymbolTable can map any other single characters instead, e.g. the
conventional symbols.
"""

import dataclasses
import enum
import types
import typing as t

from lettercalc.errors import CalcArithmeticError
from lettercalc.number import Number, in_range, is_digit


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise CalcArithmeticError(f"division by zero: {a} / 0")
    # Python floors, the calculator truncates toward zero.
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Operator(enum.Enum):
    """Binary operators, applied strictly left to right."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, lhs: Number, rhs: Number, /) -> Number:
        """Apply the operator to two numbers.

        Raises:
            CalcArithmeticError: On division by zero or when the result does
            not fit in a Number.

        """
        result: t.Final = operator_map[self](lhs.value, rhs.value)
        if not in_range(result):
            raise CalcArithmeticError(
                f"overflow: {lhs} {self.value} {rhs} = {result}",
            )
        return Number(result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


# Define a map for operator execution.
operator_map: t.Final[dict[Operator, t.Callable[[int, int], int]]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: _truncating_div,
}


class Bracket(enum.Enum):
    """Brackets open and close a nested expression."""

    OPEN = "("
    CLOSE = ")"


# What a character stands for, or None if it is not part of the alphabet.
Symbol = Operator | Bracket


@dataclasses.dataclass(frozen=True, slots=True)
class SymbolTable:
    """Map single input characters to operators and brackets.

    Args:
        operators: Character for each operator. Every Operator must appear.
        open_bracket: Character opening a nested expression.
        close_bracket: Character closing a nested expression.

    Raises:
        ValueError: If a symbol is not a single non-digit character, an
        operator is missing, or a character is used twice.

    """

    # Mappings are unhashable, the brackets alone identify a table for hash().
    operators: t.Mapping[str, Operator] = dataclasses.field(hash=False)
    open_bracket: str
    close_bracket: str

    _lookup: dict[str, Symbol] = dataclasses.field(
        init=False,
        repr=False,
        compare=False,
    )

    def __post_init__(self) -> None:
        # Frozen dataclass, bypass __setattr__ for normalized fields.
        object.__setattr__(
            self,
            "operators",
            types.MappingProxyType(dict(self.operators)),
        )
        chars: t.Final = [
            *self.operators,
            self.open_bracket,
            self.close_bracket,
        ]
        for char in chars:
            if len(char) != 1 or is_digit(char):
                raise ValueError(
                    f"symbol must be a single non-digit character: {char!r}",
                )

        if len(set(chars)) != len(chars):
            raise ValueError(f"symbols must be distinct: {chars!r}")

        missing: t.Final = set(Operator) - set(self.operators.values())
        if missing:
            names = ", ".join(sorted(op.name for op in missing))
            raise ValueError(f"no symbol for operator(s): {names}")

        lookup: dict[str, Symbol] = dict(self.operators)
        lookup[self.open_bracket] = Bracket.OPEN
        lookup[self.close_bracket] = Bracket.CLOSE
        object.__setattr__(self, "_lookup", lookup)

    def classify(self, char: str, /) -> Symbol | None:
        """Return what char stands for, or None if it is not a symbol."""
        return self._lookup.get(char)


DEFAULT_SYMBOLS: t.Final = SymbolTable(
    operators={
        "a": Operator.ADD,
        "b": Operator.SUB,
        "c": Operator.MUL,
        "d": Operator.DIV,
    },
    open_bracket="e",
    close_bracket="f",
)

CONVENTIONAL_SYMBOLS: t.Final = SymbolTable(
    operators={op.value: op for op in Operator},
    open_bracket=Bracket.OPEN.value,
    close_bracket=Bracket.CLOSE.value,
)
