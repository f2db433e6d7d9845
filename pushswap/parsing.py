"""Turn command-line arguments into a list of distinct 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def strict_atoi(text: str) -> int:
    """Convert *text* to an int, accepting only an optional sign and ASCII digits.

    The value must fit in a signed 32-bit integer.
    """
    sign = 1
    body = text
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body:
        raise ParseError(f"not a number: {text!r}")
    result = 0
    for char in body.lstrip("0"):
        if char not in _DIGITS:
            raise ParseError(f"not a number: {text!r}")
        result = result * 10 + (ord(char) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            raise ParseError(f"out of range: {text!r}")
    return result * sign


def split_arguments(args: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split them on spaces into words.

    Only the space character separates words. Raises ParseError when no word
    is found.
    """
    words = [word for word in " ".join(args).split(" ") if word]
    if not words:
        raise ParseError("no numbers given")
    return words


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse the arguments into integers, rejecting malformed input and duplicates."""
    numbers = [strict_atoi(word) for word in split_arguments(args)]
    if len(set(numbers)) != len(numbers):
        raise ParseError("duplicate numbers")
    return numbers