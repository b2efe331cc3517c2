"""
Repositories package - Data access layer.
"""

from repositories.base import BaseFileRepository
from repositories.cart_store import CartStore
from repositories.operation_log import OperationLog

__all__ = [
    "BaseFileRepository",
    "CartStore",
    "OperationLog",
]
