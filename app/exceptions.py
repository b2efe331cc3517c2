from datetime import datetime, timezone
from typing import Any, Mapping, Optional


class SmartCartError(Exception):
    """Base class for every error raised by the cart, its discounts and its store.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, paths)
        code: optional machine-readable error code
        timestamp: UTC time the error was created
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Cart error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def detailed_message(self) -> str:
        """Message prefixed with the error class and the time it occurred."""
        return (
            f"{self.__class__.__name__} occurred at "
            f"{self.timestamp.isoformat()}: {self.message}"
        )

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(SmartCartError, ValueError):
    """Raised when an input violates an invariant (negative price, rate out of range, ...).

    http_status is 400.
    """

    http_status = 400
    default_message = "Invalid argument"


class NotFoundError(SmartCartError):
    """Raised when a persistence source or a requested item does not exist.

    http_status is 404.
    """

    http_status = 404
    default_message = "Not found"


class DecodeFailureError(SmartCartError):
    """Raised when a persistence source exists but cannot be decoded into cart items.

    http_status is 422.
    """

    http_status = 422
    default_message = "Could not decode cart data"


class StorageError(SmartCartError):
    """Raised when the underlying storage medium fails (permissions, disk, ...).

    http_status is 500.
    """

    http_status = 500
    default_message = "Storage failure"
