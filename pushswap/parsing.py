"""Reading and checking the integers given on the command line."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Iterable, List, Sequence

_WHITESPACE = " \t\n\v\f\r"
_DIGIT_RUN = re.compile(r"[0-9]*")
_INT_MAX_TEXT = "2147483647"
_INT_MIN_TEXT = "-2147483648"
# At this many significant digits the value no longer fits a 64-bit integer.
_TOO_MANY_DIGITS = 19


class InputError(Exception):
    """Bad input; ``exit_status`` is the status the program ends with."""

    def __init__(self, exit_status: int) -> None:
        super().__init__("Error")
        self.exit_status = exit_status


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters, the way a C string compare does."""
    if limit == 0:
        return 0
    for left, right in zip_longest(first[:limit], second[:limit], fillvalue="\0"):
        if left != right or left == "\0":
            return ord(left) - ord(right)
    return 0


def atoi(text: str) -> int:
    """Read a leading integer from ``text`` as a 32-bit signed value.

    Leading whitespace and one sign are skipped and reading stops at the
    first non-digit. A number of 19 or more significant digits reads as
    -1, or as 0 when it carries a minus sign.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = _DIGIT_RUN.match(rest).group()
    if len(digits.lstrip("0")) >= _TOO_MANY_DIGITS:
        return 0 if negative else -1
    value = int(digits) if digits else 0
    return _to_int32(-value if negative else value)


def _check_range(text: str, length: int) -> None:
    if length < 10:
        return
    if (
        length > 11
        or (length == 10 and _compare_prefix(text, _INT_MAX_TEXT, 10) > 0)
        or (length == 11 and _compare_prefix(text, _INT_MIN_TEXT, 11) > 0)
    ):
        raise InputError(2)


def validate_number(text: str) -> int:
    """Check that ``text`` is a number within range and return its value."""
    signed = text[:1] in ("-", "+")
    body = text[1:] if signed else text
    if not body:
        raise InputError(6)
    if any(char not in "0123456789" for char in body):
        raise InputError(1)
    leading_zeros = len(body) - len(body.lstrip("0"))
    _check_range(text, len(text) - leading_zeros)
    return atoi(text)


def check_duplicates(words: Sequence[str]) -> List[int]:
    """Reject repeated values and return the values read from ``words``.

    A lone word is validated in full instead.
    """
    words = list(words)
    if len(words) == 1:
        return [validate_number(words[0])]
    values = [atoi(word) for word in words]
    if len(set(values)) != len(values):
        raise InputError(2)
    return values


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn command-line arguments into stack values, top of the stack first.

    A single argument is split on spaces. Words are validated from the last
    to the first, so the last bad word decides the error raised.
    """
    args = list(args)
    if not args:
        raise InputError(2)
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
    else:
        words = args
    check_duplicates(words)
    values = [validate_number(word) for word in reversed(words)]
    if not values:
        raise InputError(1)
    values.reverse()
    return values