"""
Consolidated middleware for the SmartCart API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import (
    SmartCartError,
    InvalidArgumentError,
    NotFoundError,
    DecodeFailureError,
    StorageError,
)

logger = logging.getLogger("smartcart.middleware")

ERROR_CODES = {
    InvalidArgumentError: "INVALID_ARGUMENT",
    NotFoundError: "NOT_FOUND",
    DecodeFailureError: "DECODE_FAILURE",
    StorageError: "STORAGE_ERROR",
}


# ============================================================================
# Helper Functions
# ============================================================================


def error_json(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    """Build the standard error envelope"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = jsonable_encoder(details)
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    # Rejected inputs may be NaN or infinity, which cannot be rendered as JSON
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return error_json(422, "VALIDATION_ERROR", "Request validation failed", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return error_json(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def cart_exception_handler(request: Request, exc: SmartCartError):
    """Handle cart, discount and storage errors using their suggested status"""
    if exc.http_status >= 500:
        logger.error(f"Cart error on {request.url}: {exc.detailed_message()}")
    else:
        logger.warning(f"Cart error on {request.url}: {str(exc)}")

    code = exc.code or ERROR_CODES.get(type(exc), "CART_ERROR")
    return error_json(exc.http_status, code, exc.message, exc.details)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return error_json(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )
