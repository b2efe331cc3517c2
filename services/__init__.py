"""Services package - Business logic layer"""

from services.base_service import BaseService
from services.cart_service import CartService

__all__ = [
    "BaseService",
    "CartService",
]
