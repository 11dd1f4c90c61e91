"""Integer values and the digit buffer used while tokenizing."""

import dataclasses
import typing as t

from lettercalc.errors import IntegerParseError

# Numbers are machine sized signed integers, not Python's unbounded int.
NUMBER_BITS: t.Final = 64
NUMBER_MIN: t.Final = -(2 ** (NUMBER_BITS - 1))
NUMBER_MAX: t.Final = 2 ** (NUMBER_BITS - 1) - 1
_MAX_DIGITS: t.Final = len(str(NUMBER_MAX))


def in_range(value: int, /) -> bool:
    """Return True if value fits in a Number."""
    return NUMBER_MIN <= value <= NUMBER_MAX


@dataclasses.dataclass(frozen=True, slots=True)
class Number:
    """Signed integer wrapper.

    Args:
        value: The wrapped integer, within NUMBER_MIN and NUMBER_MAX.

    Raises:
        ValueError: If value is out of range. Parsing and arithmetic check
        the range first and raise their own errors.

    """

    value: int

    def __post_init__(self) -> None:
        if not in_range(self.value):
            raise ValueError(
                f"{self.value} does not fit in {NUMBER_BITS} bits",
            )

    @classmethod
    def from_digits(cls, digits: str, /) -> "Number":
        """Parse a string of ASCII digits.

        Leading zeros are ignored, however many there are.

        Raises:
            IntegerParseError: If the digits do not form an integer in range.

        """
        if not (digits.isascii() and digits.isdigit()):
            raise IntegerParseError(digits) from ValueError(
                f"not a run of ASCII digits: {digits!r}",
            )

        significant: t.Final = digits.lstrip("0") or "0"
        # Checked before int() so its digit limit is never reached.
        if len(significant) > _MAX_DIGITS or not in_range(int(significant)):
            raise IntegerParseError(digits) from OverflowError(
                f"{len(significant)} digits do not fit in {NUMBER_BITS} bits",
            )

        return cls(int(significant))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def is_digit(test_char: str, /) -> bool:
    """Return True for the ASCII digits 0-9 only."""
    # Direct comparison, isdigit() accepts superscripts and other scripts.
    return len(test_char) == 1 and "0" <= test_char <= "9"


class NumberAccumulator:
    """Collect consecutive digit characters until a number is complete."""

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer: t.Final[list[str]] = []

    @property
    def pending(self) -> bool:
        """True while digits are waiting to be finalized."""
        return bool(self._buffer)

    def push(self, digit: str, /) -> None:
        """Append a digit. The caller checks it with is_digit first."""
        self._buffer.append(digit)

    def finalize(self) -> Number | None:
        """Turn the buffered digits into a Number and clear the buffer.

        Returns:
            Number | None: The parsed number, or None when no digits are
            pending. None is not an error, e.g. a bracket follows an operator.

        Raises:
            IntegerParseError: If the digits overflow a Number.

        """
        if not self._buffer:
            return None

        digits: t.Final = "".join(self._buffer)
        self._buffer.clear()
        return Number.from_digits(digits)
