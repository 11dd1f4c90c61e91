import dataclasses

import pytest

from lettercalc import (
    CalcArithmeticError,
    CalcError,
    IntegerParseError,
    InvalidInput,
    calculate,
)


@dataclasses.dataclass(frozen=True, slots=True)
class EvalCase:
    """Defines a single evaluation scenario.

    Args:
        description: A brief summary of what this case tests.
        expected: The expected result, or the error type expected.
        expression: A letter-encoded expression to evaluate.

    """

    description: str
    expected: int | type[CalcError]
    expression: str


def _ids(cases: tuple[EvalCase, ...]) -> list[str]:
    return [case.description for case in cases]


ACCEPTANCE: tuple[EvalCase, ...] = (
    EvalCase(description="Add then multiply", expected=20, expression="3a2c4"),
    EvalCase("Add then divide", 17, "32a2d2"),
    EvalCase("Add, subtract, multiply", 14208, "500a10b66c32"),
    EvalCase("Bracketed product", 235, "3ae4c66fb32"),
    EvalCase("Nested brackets", 990, "3c4d2aee2a4c41fc4f"),
)

VALID: tuple[EvalCase, ...] = (
    # ------------- Basic Operations --------------------------------
    EvalCase("Simple addition", 10, "5a5"),
    EvalCase("Simple division", 1, "5d5"),
    EvalCase("Simple multiplication", 25, "5c5"),
    EvalCase("Simple subtraction", 0, "5b5"),
    EvalCase("Integer division truncation", 2, "5d2"),
    EvalCase("No operators", 1, "1"),
    # ----------- Left to right -------------------------------------
    EvalCase("Left to right division and multiplication", 4, "8d2c1"),
    EvalCase("Left to right addition and multiplication", 9, "1a2c3"),
    EvalCase("Left to right subtraction and division", 1, "9b3d6"),
    # ----------- Multi-digit ---------------------------------------
    EvalCase("Double-digit numbers", 20, "10a10"),
    EvalCase("Triple-digit numbers", 200, "100c2"),
    # ------------- Nesting -----------------------------------------
    EvalCase("Simple nested operation", 4, "e1a3f"),
    EvalCase("Operator before bracket", 8, "2ce1a3f"),
    EvalCase("Operator after bracket", 4, "e1a1fc2"),
    EvalCase("Two distinct brackets", 8, "e1a1fce1a3f"),
    EvalCase("Deeply nested brackets", 8, "e1a1fce1ae1a2ff"),
    EvalCase("Root redundant brackets", 1, "e1f"),
    EvalCase("Many redundant brackets", 1, "eeeee1fffff"),
    EvalCase("Many redundant brackets with operator", 2, "eeeee1a1fffff"),
    EvalCase("Many redundant brackets with external operator", 4, "2ceeeee1a1fffff"),
    # ----------- Operators with 0 ----------------------------------
    EvalCase("Addition of 0", 1, "1a0"),
    EvalCase("Addition to 0", 1, "0a1"),
    EvalCase("0 only addition", 0, "0a0"),
    EvalCase("Leading 0 addition", 1, "0001a0000"),
    EvalCase("0 in brackets", 0, "e0f"),
    EvalCase("Leading 0 in brackets", 0, "e0000f"),
    # ----------- Negative intermediate values ----------------------
    EvalCase("Subtraction below zero", -2, "1b3"),
    EvalCase("Negative exact division", -1, "1b4d3"),
    EvalCase("Negative division truncates toward zero", -3, "0b7d2"),
    EvalCase("Division by a negative bracket", -3, "7de0b2f"),
    EvalCase("Negative times negative", 6, "0b2ce0b3f"),
    # ----------- Number limits -------------------------------------
    EvalCase("Largest number", 9223372036854775807, "9223372036854775807"),
    EvalCase("Smallest number", -9223372036854775808, "0b9223372036854775807b1"),
    EvalCase("Long leading zero run", 8, "0" * 5000 + "7a1"),
    EvalCase(
        "Long leading zero run at the limit",
        9223372036854775807,
        "0" * 5000 + "9223372036854775807",
    ),
)

INVALID: tuple[EvalCase, ...] = (
    # ----------- Division by 0 -------------------------------------
    EvalCase("Division by 0", CalcArithmeticError, "1d0"),
    EvalCase("Zero divided by 0", CalcArithmeticError, "0d0"),
    EvalCase("Division by evaluated zero", CalcArithmeticError, "1de2b2f"),
    EvalCase("Division by 0 with leading zeros", CalcArithmeticError, "1d00000"),
    EvalCase(
        "Deeply nested brackets with division by 0",
        CalcArithmeticError,
        "ee1a1fce1ae1a2ffd0",
    ),
    # ----------- Overflow ------------------------------------------
    EvalCase("Number too large", IntegerParseError, "9223372036854775808"),
    EvalCase("Number too large in brackets", IntegerParseError, "1ae99999999999999999999f"),
    EvalCase("Huge digit run", IntegerParseError, "1" * 5000),
    EvalCase("Addition overflow", CalcArithmeticError, "9223372036854775807a1"),
    EvalCase("Subtraction overflow", CalcArithmeticError, "0b9223372036854775807b2"),
    EvalCase("Multiplication overflow", CalcArithmeticError, "4294967296c4294967296"),
    EvalCase(
        "Smallest number divided by -1",
        CalcArithmeticError,
        "0b9223372036854775807b1de0b1f",
    ),
    EvalCase(
        "Leading zeros before a too large number",
        IntegerParseError,
        "0" * 5000 + "9223372036854775808",
    ),
    # ----------- Invalid characters --------------------------------
    EvalCase("Invalid operator", InvalidInput, "1=2"),
    EvalCase("Conventional symbols", InvalidInput, "1+2"),
    EvalCase("Upper case letter", InvalidInput, "1A2"),
    EvalCase("Letter outside the alphabet", InvalidInput, "1g2"),
    EvalCase("Unary minus", InvalidInput, "-1"),
    EvalCase("Whitespace", InvalidInput, "1 a 2"),
    EvalCase("Global numeric characters", InvalidInput, "五b五"),
    EvalCase("Decimal numbers", InvalidInput, "2.5"),
    EvalCase("Superscript character", InvalidInput, "²"),
    EvalCase("Superscript character with valid numeric", InvalidInput, "2²"),
    EvalCase("Fractional characters with valid operator", InvalidInput, "2c½"),
    # ----------- Empty expressions ---------------------------------
    EvalCase("Empty expression", InvalidInput, ""),
    EvalCase("Nested empty expression", InvalidInput, "ef"),
    EvalCase("Empty brackets after operator", InvalidInput, "1aef"),
    # ----------- Invalid operator ----------------------------------
    EvalCase("Expression starts with an operator", InvalidInput, "a1"),
    EvalCase("Single operator only", InvalidInput, "a"),
    EvalCase("Expression ends with an operator", InvalidInput, "1a"),
    EvalCase("Bracket starts with an operator", InvalidInput, "ea1f"),
    EvalCase("Bracket ends with an operator", InvalidInput, "e1af"),
    EvalCase("Multiple concurrent operators", InvalidInput, "1aa1"),
    EvalCase("Operators either side of an open bracket", InvalidInput, "1aea1f"),
    # ----------- Invalid brackets ----------------------------------
    EvalCase("Implicit multiplication", InvalidInput, "1e2c3f"),
    EvalCase("Bracket implicit multiplication", InvalidInput, "e2c3fe2c3f"),
    EvalCase("Number after bracket", InvalidInput, "e2c3f4"),
    EvalCase("Unclosed root bracket start", InvalidInput, "e4"),
    EvalCase("Unclosed root bracket end", InvalidInput, "4f"),
    EvalCase("Unclosed nested bracket start", InvalidInput, "ee4f"),
    EvalCase("Unclosed nested bracket end", InvalidInput, "e4ff"),
    EvalCase("Inverse brackets", InvalidInput, "f4e"),
)


@pytest.mark.parametrize("case", ACCEPTANCE + VALID, ids=_ids(ACCEPTANCE + VALID))
def test_valid_expression(case: EvalCase) -> None:
    assert calculate(case.expression) == case.expected


@pytest.mark.parametrize("case", INVALID, ids=_ids(INVALID))
def test_invalid_expression(case: EvalCase) -> None:
    with pytest.raises(case.expected):
        calculate(case.expression)


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("2a3c4", 20),
        ("2c3a4", 10),
        ("20b8d4", 3),
        ("20d4b8", -3),
    ],
)
def test_left_to_right_fold_ignores_precedence(expression: str, expected: int) -> None:
    assert calculate(expression) == expected


@pytest.mark.parametrize("case", ACCEPTANCE, ids=_ids(ACCEPTANCE))
def test_bracketing_whole_expression_is_identity(case: EvalCase) -> None:
    assert calculate(f"e{case.expression}f") == calculate(case.expression)


@pytest.mark.parametrize("expression", ["3c4d2aee2a4c41fc4f", "1d0", "1aa1", "9" * 30])
def test_determinism(expression: str) -> None:
    outcomes = []
    for _ in range(3):
        try:
            outcomes.append(calculate(expression))
        except CalcError as exc:
            outcomes.append(type(exc))
    assert outcomes[0] == outcomes[1] == outcomes[2]


def test_division_by_zero_is_also_builtin_arithmetic_error() -> None:
    with pytest.raises(ArithmeticError, match="division by zero"):
        calculate("5d0")


def test_deep_nesting_does_not_exhaust_the_stack() -> None:
    depth = 5000
    assert calculate("e" * depth + "7" + "f" * depth) == 7


def test_lenient_brackets_uses_innermost_expression() -> None:
    assert calculate("e5", strict_brackets=False) == 5
    assert calculate("1ae2c3", strict_brackets=False) == 6


def test_lenient_brackets_still_rejects_unmatched_right_bracket() -> None:
    with pytest.raises(InvalidInput, match="unmatched right bracket"):
        calculate("4f", strict_brackets=False)
