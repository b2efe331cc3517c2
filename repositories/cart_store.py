"""
Cart Store - Data access layer for persisting cart contents to a file
"""

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from app.exceptions import (
    DecodeFailureError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
)
from domain.mappers import ItemMapper
from domain.models import Item
from domain.schemas.cart_schemas import CartSnapshot, SNAPSHOT_FORMAT_VERSION
from repositories.base import BaseFileRepository, PathLike

logger = logging.getLogger("smartcart.repositories.cart_store")


class CartStore(BaseFileRepository):
    """
    Saves and loads a cart's items as a versioned JSON snapshot.

    File layout::

        {"format_version": 1, "items": [{"id": 1, "name": "Laptop", "price": 1200.0}]}
    """

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def save(self, items: Iterable[Item], destination: PathLike) -> int:
        """
        Write items to destination, replacing any previous snapshot.

        Args:
            items: Items in cart order
            destination: Target file path

        Returns:
            Number of items written

        Raises:
            InvalidArgumentError: If items is None or contains None
            StorageError: If the file cannot be written
        """
        if items is None:
            raise InvalidArgumentError("Cart cannot be null.")
        items = list(items)
        if any(item is None for item in items):
            raise InvalidArgumentError("Cart cannot contain null items.")

        target = self._path(destination)
        try:
            snapshot = ItemMapper.to_snapshot(items)
        except ValidationError as e:
            raise InvalidArgumentError(
                "Cart contains an item that cannot be stored",
                details={"errors": e.error_count()},
            ) from e
        payload = snapshot.model_dump_json(indent=self.indent)

        try:
            target.write_text(payload, encoding=self.encoding)
        except OSError as e:
            raise StorageError(
                f"Could not write cart to {target}: {e}",
                details={"path": str(target)},
            ) from e

        logger.info(f"Saved {len(items)} items to {target}")
        return len(items)

    def load(self, source: PathLike) -> List[Item]:
        """
        Read items back from a snapshot written by save().

        Raises:
            NotFoundError: If source does not exist
            DecodeFailureError: If the content is not a valid snapshot
            StorageError: If the file exists but cannot be read
        """
        target = self._path(source)
        if not target.exists():
            raise NotFoundError(
                f"The file {target} does not exist.", details={"path": str(target)}
            )

        try:
            raw = target.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeFailureError(
                f"Cart file {target} is not valid {self.encoding} text",
                details={"path": str(target)},
            ) from e
        except OSError as e:
            raise StorageError(
                f"Could not read cart from {target}: {e}",
                details={"path": str(target)},
            ) from e

        items = self._decode(raw, target)
        logger.info(f"Loaded {len(items)} items from {target}")
        return items

    def load_or_default(self, source: PathLike) -> List[Item]:
        """Like load(), but returns an empty list when source does not exist."""
        try:
            return self.load(source)
        except NotFoundError:
            logger.debug(f"No cart file at {source}, starting empty")
            return []

    def _decode(self, raw: str, target) -> List[Item]:
        try:
            snapshot = CartSnapshot.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeFailureError(
                f"Cart file {target} does not contain a valid cart snapshot",
                details={"path": str(target), "errors": e.error_count()},
            ) from e

        if snapshot.format_version != SNAPSHOT_FORMAT_VERSION:
            raise DecodeFailureError(
                f"Unsupported cart snapshot version {snapshot.format_version}",
                details={
                    "path": str(target),
                    "format_version": snapshot.format_version,
                },
            )

        try:
            return ItemMapper.from_snapshot(snapshot)
        except InvalidArgumentError as e:
            raise DecodeFailureError(
                f"Cart file {target} contains an invalid item: {e}",
                details={"path": str(target)},
            ) from e
