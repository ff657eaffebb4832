"""Capitalising words, dividing lists of numbers and factorials."""

from __future__ import annotations

import math
from collections.abc import Iterable

_U64_MAX = 2**64 - 1


def capitalize_first(text: str) -> str:
    """The text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Each word with its first character in upper case."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """The capitalised words joined into one string."""
    return "".join(capitalize_words(words))


class DivisionError(ArithmeticError):
    """Raised when a division cannot give an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZero):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZero)


def divide(a: int, b: int) -> int:
    """a divided by b when b divides a evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list(numbers: Iterable[int], divisor: int) -> list[int]:
    """All quotients, or the first DivisionError raised."""
    return [divide(number, divisor) for number in numbers]


def list_of_results(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Each quotient, or the DivisionError in its place."""
    results: list[int | DivisionError] = []
    for number in numbers:
        try:
            results.append(divide(number, divisor))
        except DivisionError as error:
            results.append(error)
    return results


def factorial(num: int) -> int:
    """num! for a non-negative num whose factorial fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result