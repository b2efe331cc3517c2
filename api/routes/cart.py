"""Shopping cart routes"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
import logging
from typing import List, Optional

from app.config import settings
from api.dependencies import get_cart_service
from api.responses import ERROR_RESPONSES
from domain.discounts import DiscountStrategy, build_strategy
from domain.mappers import ItemMapper
from domain.models import Item
from domain.schemas.cart_schemas import (
    ItemCreate,
    ItemResponse,
    CartResponse,
    CartSummaryResponse,
    DiscountAllRequest,
    DiscountQuoteRequest,
    DiscountQuoteResponse,
    PersistenceResponse,
)
from services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartcart.api.cart")


def strategy_from_request(request: DiscountQuoteRequest) -> DiscountStrategy:
    """Turn a (possibly chained) quote request into a DiscountStrategy."""
    strategy = build_strategy(request.kind, request.value, request.max_discount)
    if request.then is not None:
        strategy = strategy.combine_with(strategy_from_request(request.then))
    return strategy


@router.get("", response_model=CartResponse)
def get_cart(service: CartService = Depends(get_cart_service)):
    """Get all items with count and total"""
    return ItemMapper.cart_to_response(service.cart)


@router.delete("", response_model=CartResponse)
def clear_cart(service: CartService = Depends(get_cart_service)):
    """Remove every item from the cart"""
    service.clear_cart()
    return ItemMapper.cart_to_response(service.cart)


@router.get("/items", response_model=List[ItemResponse])
def list_items(
    below: Optional[float] = Query(
        default=None, description="Only items strictly cheaper than this price"
    ),
    service: CartService = Depends(get_cart_service),
):
    """List items in cart order, optionally filtered by price"""
    items = (
        service.get_items() if below is None else service.find_items_below_price(below)
    )
    return [ItemMapper.to_response(i) for i in items]


@router.post("/items", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def add_item(payload: ItemCreate, service: CartService = Depends(get_cart_service)):
    """Append an item to the cart"""
    item = service.add_item(Item(payload.id, payload.name, payload.price))
    return ItemMapper.to_response(item)


@router.get("/items/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, service: CartService = Depends(get_cart_service)):
    """Get the first item with the given id"""
    item = service.find_item(item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item {item_id} not found",
        )
    return ItemMapper.to_response(item)


@router.delete("/items/{item_id}")
def remove_item(item_id: int, service: CartService = Depends(get_cart_service)):
    """Remove the first item with the given id"""
    removed = service.remove_item_by_id(item_id)
    if removed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item {item_id} not found",
        )
    return {"status": "ok", "removed": item_id}


@router.get("/summary", response_model=CartSummaryResponse)
def get_summary(service: CartService = Depends(get_cart_service)):
    """Count, total, most expensive and cheapest item"""
    most_expensive = service.get_most_expensive_item()
    cheapest = service.get_cheapest_item()
    return CartSummaryResponse(
        count=service.get_total_item_count(),
        total=service.calculate_total(),
        most_expensive=ItemMapper.to_response(most_expensive) if most_expensive else None,
        cheapest=ItemMapper.to_response(cheapest) if cheapest else None,
    )


@router.post("/discount-all", response_model=CartResponse)
def discount_all(
    payload: DiscountAllRequest, service: CartService = Depends(get_cart_service)
):
    """
    Apply a percentage discount to every item price in place.

    The rate must be within 0-100; an invalid rate leaves every item unchanged.
    """
    service.apply_discount_to_all(payload.rate)
    return ItemMapper.cart_to_response(service.cart)


@router.post("/quote", response_model=DiscountQuoteResponse)
def quote(
    payload: DiscountQuoteRequest, service: CartService = Depends(get_cart_service)
):
    """
    Price the cart with a discount strategy without modifying it.

    Examples:
    - 10% off: {"kind": "percentage", "value": 10}
    - 10% off, at most 100 off: {"kind": "percentage", "value": 10, "max_discount": 100}
    - 10% off then 50 off: {"kind": "percentage", "value": 10, "then": {"kind": "flat", "value": 50}}
    """
    strategy = strategy_from_request(payload)
    total = service.calculate_total()
    discounted = service.calculate_total_with_discount(strategy)
    return DiscountQuoteResponse(
        total=total,
        discounted_total=discounted,
        discount=total - discounted,
        formatted=strategy.apply_discount_formatted(total),
    )


@router.post("/save", response_model=PersistenceResponse)
def save_cart(service: CartService = Depends(get_cart_service)):
    """Persist the cart to the configured cart file"""
    count = service.save(settings.cart_file)
    return PersistenceResponse(
        path=settings.cart_file,
        count=count,
        size_bytes=service.store.size(settings.cart_file),
    )


@router.post("/load", response_model=PersistenceResponse)
def load_cart(service: CartService = Depends(get_cart_service)):
    """Replace the cart with the contents of the configured cart file"""
    count = service.load(settings.cart_file)
    return PersistenceResponse(
        path=settings.cart_file,
        count=count,
        size_bytes=service.store.size(settings.cart_file),
    )
