"""Cart service - facade over a single cart, its store and its operation log"""

from typing import List, Optional

from app.exceptions import SmartCartError, InvalidArgumentError
from domain.discounts import DiscountStrategy, no_discount
from domain.models import Cart, Item
from repositories import CartStore, OperationLog
from repositories.base import PathLike
from services.base_service import BaseService


class CartService(BaseService):
    """
    Business operations on one shopping cart.

    Wraps the core Cart with the aggregate queries callers need (most
    expensive, cheapest, items below a price), discount pricing and
    persistence. Persistence failures are logged and appended to the
    operation log before they propagate.
    """

    def __init__(
        self,
        cart: Optional[Cart] = None,
        store: Optional[CartStore] = None,
        operation_log: Optional[OperationLog] = None,
    ):
        super().__init__("smartcart.cart")
        self.cart = cart if cart is not None else Cart()
        self.store = store or CartStore()
        self.operation_log = operation_log

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------

    def add_item(self, item: Item) -> Item:
        self.cart.add(item)
        self.log_info("Added item", id=item.id, name=item.name)
        return item

    def remove_item(self, item: Item) -> None:
        self.cart.remove(item)
        self.log_info("Removed item", id=item.id)

    def remove_item_by_id(self, item_id: int) -> Optional[Item]:
        """Remove the first item with item_id. Returns None if there was none."""
        item = self.cart.find_by_id(item_id)
        if item is None:
            self.log_warning("Item not in cart", id=item_id)
            return None
        self.cart.remove(item)
        self.log_info("Removed item", id=item_id)
        return item

    def find_item(self, item_id: int) -> Optional[Item]:
        return self.cart.find_by_id(item_id)

    def get_items(self) -> List[Item]:
        return self.cart.items

    def clear_cart(self) -> None:
        self.cart.clear()
        self.log_info("The cart has been cleared")

    def describe(self) -> List[str]:
        """Human-readable lines for the cart contents."""
        if self.cart.count() == 0:
            return ["The cart is empty."]
        return [repr(item) for item in self.cart]

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def calculate_total(self) -> float:
        return self.cart.total()

    def get_total_item_count(self) -> int:
        return self.cart.count()

    def get_most_expensive_item(self) -> Optional[Item]:
        """Highest priced item; the first one wins a tie. None when empty."""
        best = None
        for item in self.cart:
            if best is None or item.price > best.price:
                best = item
        return best

    def get_cheapest_item(self) -> Optional[Item]:
        """Lowest priced item; the first one wins a tie. None when empty."""
        best = None
        for item in self.cart:
            if best is None or item.price < best.price:
                best = item
        return best

    def find_items_below_price(self, price: float) -> List[Item]:
        """Items strictly cheaper than price, in cart order."""
        if price is None:
            raise InvalidArgumentError("Price threshold cannot be null")
        return [item for item in self.cart if item.price < price]

    # ------------------------------------------------------------------
    # Discounts
    # ------------------------------------------------------------------

    def calculate_total_with_discount(
        self, strategy: Optional[DiscountStrategy] = None
    ) -> float:
        """Cart total after strategy. Items are not modified."""
        strategy = strategy or no_discount()
        return strategy.apply_discount(self.cart.total())

    def apply_discount_to_all(self, rate: float) -> None:
        self.cart.apply_discount_to_all(rate)
        self.log_info("Applied discount to all items", rate=rate, count=self.cart.count())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, destination: PathLike) -> int:
        """Persist the cart items. Returns the number of items written."""
        try:
            written = self.store.save(self.cart.items, destination)
        except SmartCartError as e:
            self._record_failure(f"Error saving cart to file: {destination}", e)
            raise
        self.log_info("Cart saved", path=destination, count=written)
        return written

    def load(self, source: PathLike, missing_ok: bool = False) -> int:
        """
        Replace the cart contents with the items stored at source.

        Args:
            source: Snapshot file written by save()
            missing_ok: Start from an empty cart instead of failing when source is absent

        Returns:
            Number of items loaded

        Raises:
            NotFoundError: If source does not exist and missing_ok is False
            DecodeFailureError: If source cannot be decoded
            StorageError: If source cannot be read
        """
        try:
            if missing_ok:
                items = self.store.load_or_default(source)
            else:
                items = self.store.load(source)
        except SmartCartError as e:
            self._record_failure(f"Error loading cart from file: {source}", e)
            raise
        self.cart.replace_items(items)
        self.log_info("Cart loaded", path=source, count=len(items))
        return len(items)

    def _record_failure(self, message: str, error: SmartCartError) -> None:
        self.log_error(message, error=error.message)
        if self.operation_log is None:
            return
        try:
            self.operation_log.append(f"{message} - {error.message}")
        except SmartCartError as log_error:
            self.log_error("Error writing to log file", error=log_error.message)
