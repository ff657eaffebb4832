"""Booleans, characters, arrays, slices, tuples and strings."""

from __future__ import annotations

import math
from collections.abc import Sequence

BIG_ARRAY_SIZE = 100
COLOR_WORDS = frozenset({"green", "blue", "red"})


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply at the given time of day."""
    messages = []
    if is_morning:
        messages.append("Good morning!")
    if is_evening:
        messages.append("Good evening!")
    return messages


def classify_character(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(items: Sequence[object]) -> str:
    """Comment on whether the array holds at least 100 items."""
    if len(items) >= BIG_ARRAY_SIZE:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[int]) -> list[int]:
    """The second to fourth items; raise IndexError if there are fewer than four."""
    if len(values) < 4:
        raise IndexError(f"range end index 4 out of range for slice of length {len(values)}")
    return list(values[1:4])


def _display(value: object) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second_number(numbers: tuple[int, ...]) -> int:
    """The second element of the tuple."""
    return numbers[1]


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in COLOR_WORDS