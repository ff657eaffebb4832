"""Records of several shapes, an order template and parcel fees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class ColorClassicStruct:
    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A record without fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


@dataclass(frozen=True)
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order every new order starts from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Package:
    """A parcel; it must weigh something."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Package has to weigh something")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_kg: int) -> int:
        """Fee in cents, truncated towards zero."""
        return _div_trunc(self.weight_in_grams * cents_per_kg, 1000)