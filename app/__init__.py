"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    SmartCartError,
    InvalidArgumentError,
    NotFoundError,
    DecodeFailureError,
    StorageError,
)

__all__ = [
    "settings",
    "SmartCartError",
    "InvalidArgumentError",
    "NotFoundError",
    "DecodeFailureError",
    "StorageError",
]
