"""
Cart item model.
"""

import math
from typing import Any

from app.exceptions import InvalidArgumentError


def validate_price(price: Any) -> float:
    if price is None:
        raise InvalidArgumentError("Price cannot be null")
    if not price >= 0:
        raise InvalidArgumentError(
            "Price cannot be negative", details={"price": price}
        )
    if not math.isfinite(price):
        raise InvalidArgumentError(
            "Price must be a finite number", details={"price": price}
        )
    return float(price)


def validate_rate(rate: Any) -> float:
    if rate is None or not 0 <= rate <= 100:
        raise InvalidArgumentError(
            "Discount rate must be between 0 and 100", details={"rate": rate}
        )
    return float(rate)


class Item:
    """
    A priced, named, identified entry of a cart.

    The price is never negative: it is checked on construction, by the
    ``price`` setter and by ``apply_discount``. The id is not checked for
    uniqueness, that is up to the caller.

    Two items are equal when their ``(id, name, price)`` triples are equal.
    Items are mutable and therefore unhashable.
    """

    __slots__ = ("_id", "_name", "_price")

    def __init__(self, id: int, name: str, price: float):
        self._price = validate_price(price)
        self._id = id
        self._name = name

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value is None or not str(value).strip():
            raise InvalidArgumentError("Name cannot be null or empty")
        self._name = value

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        self._price = validate_price(value)

    def apply_discount(self, rate: float) -> None:
        """Reduce the price in place by ``rate`` percent (0-100)."""
        rate = validate_rate(rate)
        self._price = self._price * (1 - rate / 100)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return (self._id, self._name, self._price) == (
            other._id,
            other._name,
            other._price,
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Item(id={self._id!r}, name={self._name!r}, price={self._price!r})"
