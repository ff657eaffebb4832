"""Generic containers and report cards with any kind of grade."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
G = TypeVar("G")


def shopping_list() -> list[str]:
    """A shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[G]):
    """A report card whose grade may be numeric or alphabetic."""

    grade: G
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"