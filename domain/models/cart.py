"""
Cart model - an ordered, mutable collection of items.
"""

from typing import Iterable, Iterator, List, Optional

from app.exceptions import InvalidArgumentError
from domain.models.item import Item, validate_rate


class Cart:
    """
    Ordered collection of Items with aggregate queries.

    Insertion order is preserved and duplicates are allowed. Total and count
    are computed on demand. The cart does no locking; callers sharing one
    between threads must serialize access themselves.
    """

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._items: List[Item] = []
        if items is not None:
            self.replace_items(items)

    @property
    def items(self) -> List[Item]:
        """Copy of the item list, in insertion order."""
        return list(self._items)

    def add(self, item: Item) -> None:
        if item is None:
            raise InvalidArgumentError("Item cannot be null")
        self._items.append(item)

    def remove(self, item: Item) -> None:
        """Remove the first item equal to ``item``."""
        try:
            self._items.remove(item)
        except ValueError:
            raise InvalidArgumentError(
                "Item is not in the cart", details={"item": repr(item)}
            ) from None

    def find_by_id(self, item_id: int) -> Optional[Item]:
        return next((item for item in self._items if item.id == item_id), None)

    def total(self) -> float:
        return float(sum(item.price for item in self._items))

    def apply_discount_to_all(self, rate: float) -> None:
        """
        Apply a percentage discount to every item in place.

        The rate is checked once before any item is touched, so a bad rate
        leaves the cart unchanged.
        """
        rate = validate_rate(rate)
        for item in self._items:
            item.apply_discount(rate)

    def replace_items(self, items: Iterable[Item]) -> None:
        """Swap the cart contents for ``items`` (all entries must be non-null)."""
        new_items = list(items)
        if any(item is None for item in new_items):
            raise InvalidArgumentError("Item cannot be null")
        self._items = new_items

    def clear(self) -> None:
        self._items.clear()

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return "Cart(items=[" + ", ".join(repr(i) for i in self._items) + "])"
