"""Expression trees.

A left to right expression parser and evaluator.

1) Tokenize. Open a root expression on a stack. An expression represents a
block of the input that is either inside brackets, or, the root expression
for the entire input.

2) Iterate the characters in the input.
    - If the character is an ASCII digit, append it to the number buffer.
        - Any non-digit character flushes this buffer into a Number token on
        the top expression.
    - If the character is an operator, append an Operator token.
    - If the character is an open bracket, push a new expression.
    - If the character is a close bracket, pop the top expression and append
    it as a token of its parent.
    - Else the character is invalid.

3) Ensure just the root expression remains and return it.

4) Evaluate. Fold the tokens of an expression from left to right, nested
expressions first, ignoring any conventional operator precedence.
"""

import dataclasses
import logging
import typing as t

from lettercalc.errors import InvalidInput
from lettercalc.number import Number, NumberAccumulator, is_digit
from lettercalc.symbols import DEFAULT_SYMBOLS, Bracket, Operator, SymbolTable

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Expression:
    """One bracket nesting level of the input.

    Args:
        tokens: The numbers, operators and nested expressions in input order.

    """

    tokens: "list[Token]" = dataclasses.field(default_factory=list)

    def __iter__(self) -> "t.Iterator[Token]":
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


# A token is exactly one of these, nested expressions are owned by their
# parent so the result of tokenize is always a tree.
Token = Number | Operator | Expression


T = t.TypeVar("T")


class Stack(t.Generic[T]):
    """Basic stack implementation to encapsulate list operations."""

    __slots__ = ("_array",)

    def __init__(self) -> None:
        """Initialize the backing array."""
        self._array: t.Final[list[T]] = []

    def push(self, item: T, /) -> None:
        """Push to the stack."""
        self._array.append(item)

    def pop(self) -> T:
        """Pop from the stack."""
        return self._array.pop()

    def back(self) -> T:
        """Peek at the last element in the stack."""
        return self._array[-1]

    def empty(self) -> bool:
        """Return True if the stack is empty."""
        return not len(self)

    def __len__(self) -> int:
        """Return the size of the stack."""
        return len(self._array)


class ExpressionStack(Stack[Expression]):
    """Expressions being built, one per currently open bracket."""

    __slots__ = ()

    def push_expression(self) -> None:
        """Open a new, empty expression."""
        self.push(Expression())

    def add_token(self, token: Token, /) -> None:
        """Append a token to the innermost open expression."""
        self.back().tokens.append(token)

    def close_expression(self) -> None:
        """Move the innermost expression into its parent.

        Raises:
            InvalidInput: If there is no parent, i.e. the close bracket has no
            matching open bracket.

        """
        nested: t.Final = self.pop()
        if self.empty():
            raise InvalidInput("unmatched right bracket")

        self.add_token(nested)


def tokenize(
    text: str,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
    /,
    *,
    strict_brackets: bool = True,
) -> Expression:
    """Parse text into a tree of expressions.

    Args:
        text: The input, digits and characters from symbols only.
        symbols: Mapping of characters to operators and brackets.
        strict_brackets: Reject open brackets left unclosed at the end of the
            input. When False, the innermost unclosed expression is returned
            and everything outside it is ignored.

    Returns:
        Expression: The root expression.

    Raises:
        InvalidInput: On an unknown character or unmatched bracket.
        IntegerParseError: If a number does not fit in a Number.

    """
    accumulator: t.Final = NumberAccumulator()
    expressions: t.Final = ExpressionStack()
    expressions.push_expression()
    max_depth = 1

    for test_char in text:
        if is_digit(test_char):
            # Numbers are only emitted once a non-digit ends them.
            accumulator.push(test_char)
            continue

        if (number := accumulator.finalize()) is not None:
            expressions.add_token(number)

        symbol = symbols.classify(test_char)

        if isinstance(symbol, Operator):
            expressions.add_token(symbol)
        elif symbol is Bracket.OPEN:
            expressions.push_expression()
            max_depth = max(max_depth, len(expressions))
        elif symbol is Bracket.CLOSE:
            expressions.close_expression()
        else:
            raise InvalidInput(f"unrecognized character {test_char!r}")

    if (number := accumulator.finalize()) is not None:
        expressions.add_token(number)

    if len(expressions) > 1:
        if strict_brackets:
            raise InvalidInput("unmatched left bracket")
        logger.debug(
            "ignoring %d unclosed bracket(s), using innermost expression",
            len(expressions) - 1,
        )

    root: t.Final = expressions.pop()
    logger.debug(
        "tokenized %d characters into %d top level tokens, depth %d",
        len(text),
        len(root),
        max_depth,
    )
    return root


@dataclasses.dataclass(slots=True)
class _Fold:
    """Left to right evaluation state of one expression.

    Args:
        tokens: The remaining tokens of the expression.
        left_operand: The value accumulated so far.
        pending_operator: Operator waiting for its right operand.

    """

    tokens: t.Iterator[Token]
    left_operand: Number | None = None
    pending_operator: Operator | None = None

    def take_operand(self, number: Number, /, *, reason: str) -> None:
        """Combine number with the value so far.

        Args:
            number: A number, or the value of a nested expression.
            reason: Error reason if no operator separates the two values.

        """
        if self.left_operand is None:
            self.left_operand = number
            return

        if self.pending_operator is None:
            raise InvalidInput(reason)

        operator: t.Final = self.pending_operator
        result: t.Final = operator.apply(self.left_operand, number)
        logger.debug(
            "%s %s %s = %s",
            self.left_operand,
            operator.value,
            number,
            result,
        )
        self.left_operand = result
        self.pending_operator = None

    def take_operator(self, operator: Operator, /) -> None:
        if self.pending_operator is not None:
            raise InvalidInput(
                "two operators in a row: "
                f"{self.pending_operator!r}, {operator!r}",
            )
        self.pending_operator = operator

    def result(self) -> Number:
        if self.pending_operator is not None:
            raise InvalidInput(f"trailing operator: {self.pending_operator!r}")

        if self.left_operand is None:
            # Also reached by empty brackets.
            raise InvalidInput("no numbers in input")

        return self.left_operand


def evaluate(expression: Expression, /) -> Number:
    """Evaluate an expression tree from left to right.

    Nested expressions are folded depth first before their value is combined
    with the enclosing expression. An explicit stack is used instead of
    recursion so deep nesting cannot exhaust the interpreter's call stack.

    Returns:
        Number: The value of the expression.

    Raises:
        InvalidInput: If the tokens do not alternate between values and
        operators, or an expression holds no value.
        CalcArithmeticError: On division by zero or overflow.

    """
    folds: t.Final[Stack[_Fold]] = Stack()
    folds.push(_Fold(iter(expression)))

    while True:
        fold = folds.back()
        token = next(fold.tokens, None)

        if token is None:
            value = fold.result()
            folds.pop()
            if folds.empty():
                return value
            folds.back().take_operand(
                value,
                reason="number followed by bracket",
            )
        elif isinstance(token, Number):
            fold.take_operand(token, reason="number after right bracket")
        elif isinstance(token, Operator):
            fold.take_operator(token)
        elif isinstance(token, Expression):
            folds.push(_Fold(iter(token)))
        else:
            raise TypeError(f"unexpected token: {token!r}")
