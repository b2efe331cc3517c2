"""Schemas for cart persistence records and cart API payloads"""

from pydantic import BaseModel, Field
from typing import Optional, List

from domain.enums import DiscountKind

SNAPSHOT_FORMAT_VERSION = 1


# ============================================================================
# Persistence records
# ============================================================================


class ItemRecord(BaseModel):
    """One item as stored in a cart snapshot"""

    id: int
    name: str
    price: float = Field(..., ge=0, allow_inf_nan=False)

    model_config = {"extra": "forbid", "from_attributes": True}


class CartSnapshot(BaseModel):
    """Versioned on-disk encoding of a cart's items, order preserved"""

    format_version: int = Field(default=SNAPSHOT_FORMAT_VERSION)
    items: List[ItemRecord] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


# ============================================================================
# API payloads
# ============================================================================


class ItemCreate(BaseModel):
    """Schema for adding an item to the cart"""

    id: int = Field(..., description="Item identifier (not checked for uniqueness)")
    name: str = Field(..., min_length=1, description="Item name")
    price: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Item price, never negative"
    )


class ItemResponse(BaseModel):
    """Schema for an item in API responses"""

    id: int
    name: str
    price: float

    model_config = {"from_attributes": True}


class CartResponse(BaseModel):
    """Cart contents with derived aggregates"""

    items: List[ItemResponse]
    count: int
    total: float


class CartSummaryResponse(BaseModel):
    """Aggregate view of the cart"""

    count: int
    total: float
    most_expensive: Optional[ItemResponse] = None
    cheapest: Optional[ItemResponse] = None


class DiscountAllRequest(BaseModel):
    """Percentage discount applied to every item in place"""

    rate: float = Field(
        ..., allow_inf_nan=False, description="Discount rate in percent (0-100)"
    )


class DiscountQuoteRequest(BaseModel):
    """Declarative description of a discount strategy to price the cart with"""

    kind: DiscountKind = Field(default=DiscountKind.NONE, description="Base strategy")
    value: float = Field(
        default=0,
        allow_inf_nan=False,
        description="Percentage for 'percentage', amount for 'flat'",
    )
    max_discount: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        description="Optional cap on the amount taken off the total",
    )
    then: Optional["DiscountQuoteRequest"] = Field(
        None, description="Optional strategy applied after this one"
    )


class DiscountQuoteResponse(BaseModel):
    """Cart total before and after a discount strategy"""

    total: float
    discounted_total: float
    discount: float
    formatted: str


class PersistenceResponse(BaseModel):
    """Result of saving or loading the cart"""

    path: str
    count: int
    size_bytes: Optional[int] = None


DiscountQuoteRequest.model_rebuild()
