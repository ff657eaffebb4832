"""Small pieces: macro messages, module constants, lints and variables."""

from __future__ import annotations

import sys

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER

NUMBER = 3


def macro_message(value: object | None = None) -> str:
    """The plain macro message, or the one that shows the given value."""
    if value is None:
        return "Check out my macro!"
    return f"Look at this other macro: {value}"


def make_sausage() -> str:
    """Print the sausage line and return it."""
    message = "sausage!"
    print(message)
    return message


def favorite_snacks() -> str:
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_option(res: int, option: int | None) -> int:
    """Add the optional value, if there is one."""
    if option is not None:
        res += option
    return res


def ten_message(x: int) -> str:
    """Print whether the value is ten and return that line."""
    message = "Ten!" if x == 10 else "Not ten!"
    print(message)
    return message


def number_lines(*args: object) -> list[str]:
    """One "Number" line per value."""
    return [f"Number {value}" for value in args]