"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from app.config import settings
from api.dependencies import get_cart_service
from api.responses import HealthResponse
from services.cart_service import CartService

router = APIRouter(tags=["Health"])
logger = logging.getLogger("smartcart.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok", service=settings.app_name, version=settings.app_version
    )


@router.get("/cart-file/status")
def cart_file_status(service: CartService = Depends(get_cart_service)):
    """Report whether the configured cart file exists and how large it is."""
    path = settings.cart_file
    exists = service.store.exists(path)
    return {
        "path": path,
        "exists": exists,
        "size_bytes": service.store.size(path) if exists else None,
    }
