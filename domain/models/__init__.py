"""
Domain models package - plain Python cart entities.
"""

from domain.models.item import Item, validate_price, validate_rate
from domain.models.cart import Cart

__all__ = [
    "Item",
    "Cart",
    "validate_price",
    "validate_rate",
]
