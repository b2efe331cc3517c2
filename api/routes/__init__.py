"""API routes package"""

from . import cart, health

__all__ = ["cart", "health"]
