"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence

INT_MAX = 2147483647


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


def parse_int(text: str) -> int:
    """Parse a signed decimal integer the strict way the simulator expects.

    Leading whitespace and control characters are skipped, one optional sign
    is accepted, and only ASCII digits may follow.  Magnitudes above INT_MAX
    and trailing garbage raise ValueError.  An empty digit run yields 0.
    """
    if text is None:
        raise ValueError("no value given")
    stripped = text.lstrip("".join(chr(c) for c in range(33)))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    consumed = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        consumed += 1
        if value > INT_MAX:
            raise ValueError(f"value out of range: {text!r}")
    if consumed != len(stripped):
        raise ValueError(f"not a number: {text!r}")
    return sign * value


def split_words(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the simulator arguments (without the program name).

    Expects 4 or 5 non-negative integers: number of philosophers, time to
    die, time to eat, time to sleep and, optionally, meals each must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentError("Wrong number of arguments")
    numbers = []
    for arg in args:
        try:
            value = parse_int(arg)
        except ValueError:
            value = -1
        if value < 0:
            raise ArgumentError(f"Invalid argument {arg}")
        numbers.append(value)
    return numbers