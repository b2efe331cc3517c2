"""
SmartCart FastAPI Application
Main entry point with middleware, configuration management and cart restore on startup
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio.to_thread

from api.routes import cart, health
from api.dependencies import get_cart_service

from app.config import settings
from app.exceptions import SmartCartError

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    cart_exception_handler,
    general_exception_handler,
)

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("smartcart.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Restores the cart from the configured file and optionally saves it on shutdown.
    """
    _logger.info(f"Starting SmartCart in {settings.environment.value} mode")
    service = get_cart_service()

    # Restore cart (best-effort)
    if settings.load_cart_on_startup:
        try:
            count = await anyio.to_thread.run_sync(
                lambda: service.load(settings.cart_file, missing_ok=True)
            )
            _logger.info("Restored %d items from %s", count, settings.cart_file)
        except SmartCartError as e:
            _logger.warning(
                "Failed to restore cart from %s; starting empty: %s",
                settings.cart_file,
                e,
            )

    try:
        yield
    finally:
        _logger.info("Shutting down SmartCart")
        if settings.autosave_on_shutdown:
            try:
                service.save(settings.cart_file)
                _logger.info("Cart saved to %s", settings.cart_file)
            except SmartCartError as e:
                _logger.exception("Error saving cart during shutdown: %s", e)


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(SmartCartError, cart_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(cart.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
