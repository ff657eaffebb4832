"""Filling vectors and working with optional values."""

from __future__ import annotations

from collections.abc import Iterable

_U16_MAX = 2**16 - 1


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """A new list holding the given values followed by 22, 44 and 66."""
    return [*(values or ()), 22, 44, 66]


def describe_vec(name: str, values: list[int]) -> str:
    """A line giving the list's name, length and contents."""
    contents = ", ".join(str(value) for value in values)
    return f"{name} has length {len(values)} content `[{contents}]`"


def print_number(maybe_number: int | None) -> None:
    """Print the number; raise ValueError if there is none or it does not fit in 16 bits."""
    if maybe_number is None:
        raise ValueError("called print_number without a number")
    if not 0 <= maybe_number <= _U16_MAX:
        raise ValueError(f"{maybe_number} does not fit in 16 unsigned bits")
    print(f"printing: {maybe_number}")


def option_numbers() -> list[int | None]:
    """Five numbers spread across a small range."""
    return [((step * 1235) + 2) // (4 * 16) for step in range(5)]


def describe_optional(value: object | None) -> str:
    """Describe an optional value."""
    if value is not None:
        return f"the value of optional value is: {value}"
    return "The optional value doesn't contain anything!"


def drain_values(values: list[int | None]) -> list[int]:
    """Pop values off the end of the list until it is empty or a None is popped.

    The list is changed in place; the popped values are returned in order.
    """
    drained = []
    while values:
        value = values.pop()
        if value is None:
            break
        print(f"current value: {value}")
        drained.append(value)
    return drained