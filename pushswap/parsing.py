"""Reading the command-line numbers into a list of distinct 32-bit integers."""

from __future__ import annotations

import re
from typing import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """The arguments are not a list of distinct integers that fit in 32 bits."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_number(text: str) -> int:
    """Read an optional sign and the ASCII digits after it, ignoring what follows.

    Text with no leading digits reads as 0. A sign standing alone, or a value
    that leaves the 32-bit signed range while being read, raises InputError.
    """
    sign = 1
    rest = text
    if rest[:1] in ("+", "-"):
        if rest[:1] == "-":
            sign = -1
        if len(rest) == 1:
            raise InputError(f"lone sign: {text!r}")
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            raise InputError(f"out of range: {text!r}")
    return result * sign


def is_number_token(text: str) -> bool:
    """True when ``text`` is an optional sign followed by one or more ASCII digits."""
    return _NUMBER_PATTERN.fullmatch(text) is not None


def _is_blank_byte(byte: int) -> bool:
    return byte == 32 or byte <= 13 or byte >= 128


def has_content(text: str) -> bool:
    """True when ``text`` holds a character other than a space or a control code up to 13.

    Characters outside ASCII count as blank.
    """
    return any(
        not _is_blank_byte(byte)
        for byte in text.encode("utf-8", "surrogateescape")
    )


def tokenize(args: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split on spaces, dropping empty pieces."""
    joined = " ".join(args)
    return [piece for piece in joined.split(" ") if piece]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program arguments into the list of numbers to sort.

    An empty argument list, or a first argument with no content, gives an
    empty list. Anything that is not a set of distinct 32-bit integers raises
    InputError.
    """
    args = list(args)
    if not args or not has_content(args[0]):
        return []
    pieces = tokenize(args)
    if not pieces or not all(is_number_token(piece) for piece in pieces):
        raise InputError()
    values: list[int] = []
    seen: set[int] = set()
    for piece in pieces:
        value = parse_number(piece)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values