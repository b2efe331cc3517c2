"""
Item domain mappers.
Handles transformation between Item entities and their records/DTOs.
"""

from typing import Iterable, List

from domain.models import Item, Cart
from domain.schemas.cart_schemas import (
    ItemRecord,
    CartSnapshot,
    ItemResponse,
    CartResponse,
)


class ItemMapper:
    """Mapper for item and cart transformations."""

    @staticmethod
    def to_record(item: Item) -> ItemRecord:
        return ItemRecord(id=item.id, name=item.name, price=item.price)

    @staticmethod
    def from_record(record: ItemRecord) -> Item:
        return Item(record.id, record.name, record.price)

    @staticmethod
    def to_snapshot(items: Iterable[Item]) -> CartSnapshot:
        """
        Convert an ordered sequence of items to a CartSnapshot.

        Args:
            items: Items in cart order

        Returns:
            CartSnapshot with one record per item, order preserved
        """
        return CartSnapshot(items=[ItemMapper.to_record(i) for i in items])

    @staticmethod
    def from_snapshot(snapshot: CartSnapshot) -> List[Item]:
        return [ItemMapper.from_record(r) for r in snapshot.items]

    @staticmethod
    def to_response(item: Item) -> ItemResponse:
        return ItemResponse.model_validate(item)

    @staticmethod
    def cart_to_response(cart: Cart) -> CartResponse:
        return CartResponse(
            items=[ItemMapper.to_response(i) for i in cart.items],
            count=cart.count(),
            total=cart.total(),
        )
