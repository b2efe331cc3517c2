"""
Domain schemas package - Pydantic models for validation and persistence.
"""

from domain.schemas.cart_schemas import (
    SNAPSHOT_FORMAT_VERSION,
    ItemRecord,
    CartSnapshot,
    ItemCreate,
    ItemResponse,
    CartResponse,
    CartSummaryResponse,
    DiscountAllRequest,
    DiscountQuoteRequest,
    DiscountQuoteResponse,
    PersistenceResponse,
)

__all__ = [
    "SNAPSHOT_FORMAT_VERSION",
    "ItemRecord",
    "CartSnapshot",
    "ItemCreate",
    "ItemResponse",
    "CartResponse",
    "CartSummaryResponse",
    "DiscountAllRequest",
    "DiscountQuoteRequest",
    "DiscountQuoteResponse",
    "PersistenceResponse",
]
