"""Error handling: name tags, token costs and validated positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import BinaryIO, TextIO

_INTEGER = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly: sign and ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 2 ** (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, fee included."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def spend_tokens(tokens: int, user_input: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(user_input)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Raised when a positive nonzero integer cannot be created."""

    NEGATIVE = "Number is negative"
    ZERO = "Number is zero"

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash(self.description)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def read_and_validate(stream: TextIO | BinaryIO) -> PositiveNonzeroInteger:
    """Read one line holding a number and validate it.

    Read errors, parse errors and CreationError all propagate to the caller.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    number = _parse_int(line.strip(), 64)
    return PositiveNonzeroInteger(number)