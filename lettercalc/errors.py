"""Errors raised while parsing or evaluating an expression.

Every failure derives from CalcError so a caller can report any of them
through one handler. The first error raised aborts the whole call.
"""


class CalcError(Exception):
    """Base class for every lettercalc failure."""


class ExpressionNotProvided(CalcError):
    """No expression was supplied to the calculator."""

    def __init__(self) -> None:
        super().__init__("expression not provided")


class InvalidInput(CalcError):
    """The expression is malformed.

    Attributes:
        reason: Human-readable explanation of what is wrong.

    """

    def __init__(self, reason: str, /) -> None:
        super().__init__(f"invalid input: {reason}")
        self.reason = reason


class IntegerParseError(CalcError):
    """A run of digits could not be turned into an integer."""

    def __init__(self, digits: str, /) -> None:
        # Very long digit runs are summarised, the full text is of no use.
        shown = digits if len(digits) <= 32 else f"{digits[:29]}..."
        super().__init__(f"cannot parse integer from {shown!r}")
        self.digits = digits


class CalcArithmeticError(CalcError, ArithmeticError):
    """An operator could not be applied, e.g. division by zero."""
