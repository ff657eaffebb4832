"""Small functions: prices, doubling, greetings and comparisons."""

from __future__ import annotations

BULK_THRESHOLD = 40


def calculate_apple_price(n: int) -> int:
    """Price of n apples: 2 each, or 1 each when buying more than 40."""
    price = 1 if n > BULK_THRESHOLD else 2
    return n * price


def times_two(num: int) -> int:
    return num * 2


def my_macro(text: str) -> str:
    """Greet the given text."""
    return f"Hello {text}"


def call_me(num: int = 0) -> None:
    """Ring num times."""
    for call in range(1, num + 1):
        print(f"Ring! Call number {call}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """10 off an even price, 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """The bigger of two numbers."""
    return b if a < b else a


def fizz_if_foo(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"