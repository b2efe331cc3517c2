"""
API dependencies for dependency injection
"""

from typing import Optional

from app.config import settings
from repositories import CartStore, OperationLog
from services.cart_service import CartService

_cart_service: Optional[CartService] = None


def get_cart_service() -> CartService:
    """
    Process-wide cart service dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(service: CartService = Depends(get_cart_service)):
            # Use service here
            pass
    """
    global _cart_service
    if _cart_service is None:
        _cart_service = CartService(
            store=CartStore(),
            operation_log=OperationLog(settings.operation_log_file),
        )
    return _cart_service


def reset_cart_service() -> None:
    """Drop the process-wide service so the next request starts with an empty cart."""
    global _cart_service
    _cart_service = None
