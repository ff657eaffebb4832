"""Conversions between strings, numbers and small records."""

from __future__ import annotations

import functools
import operator
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


@dataclass
class Person:
    """A person; the default is John, aged 30."""

    name: str = "John"
    age: int = 30


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def parse_person(text: str) -> Person:
    """Parse "name,age"; raise ValueError if the text is not of that form."""
    if not text:
        raise ValueError("input is empty")
    fields = text.split(",")
    if len(fields) != 2:
        raise ValueError(f"expected a name and an age separated by a comma, got {text!r}")
    name, age_text = fields
    if not name:
        raise ValueError("name is empty")
    return Person(name=name, age=_parse_usize(age_text))


def person_from(text: str) -> Person:
    """Parse "name,age", falling back to the default person on any error."""
    try:
        return parse_person(text)
    except ValueError:
        return Person()


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int


def _channel(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"colour channel must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"colour channel {value} is out of range 0..=255")
    return value


def color_from_tuple(values: Sequence[int]) -> Color:
    """Build a colour from three channel values; raise ValueError if one is out of range."""
    if len(values) != 3:
        raise ValueError(f"expected three channels, got {len(values)}")
    red, green, blue = (_channel(value) for value in values)
    return Color(red=red, green=green, blue=blue)


def color_from_slice(values: Sequence[int]) -> Color:
    """Build a colour from a sequence that must hold exactly three channel values."""
    if len(values) != 3:
        raise ValueError(f"slice must hold exactly three values, got {len(values)}")
    return color_from_tuple(values)


def average(values: Iterable[float]) -> float:
    """Arithmetic mean; NaN for no values."""
    items = list(values)
    total = functools.reduce(operator.add, items, 0.0)
    if not items:
        return float("nan")
    return total / len(items)