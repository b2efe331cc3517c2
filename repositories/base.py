"""
Base repository for file-backed storage.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from abc import ABC
from pathlib import Path
from typing import Union

from app.exceptions import NotFoundError, StorageError

PathLike = Union[str, Path]

logger = logging.getLogger("smartcart.repositories")


class BaseFileRepository(ABC):
    """
    Base repository providing the file queries every store shares.
    All file-backed repositories should inherit from this class.
    """

    encoding = "utf-8"

    @staticmethod
    def _path(path: PathLike) -> Path:
        return Path(path)

    def exists(self, path: PathLike) -> bool:
        """Check if a regular file exists at path"""
        return self._path(path).is_file()

    def size(self, path: PathLike) -> int:
        """
        Get the size of a file in bytes.

        Raises:
            NotFoundError: If the file does not exist
            StorageError: If the file cannot be inspected
        """
        target = self._path(path)
        if not target.is_file():
            raise NotFoundError(
                f"The file {target} does not exist.", details={"path": str(target)}
            )
        try:
            return target.stat().st_size
        except OSError as e:
            raise StorageError(
                f"Could not read size of {target}: {e}", details={"path": str(target)}
            ) from e

    def delete(self, path: PathLike) -> bool:
        """Delete a file. Returns False if nothing was deleted."""
        target = self._path(path)
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(
                f"Could not delete {target}: {e}", details={"path": str(target)}
            ) from e
        logger.info(f"Deleted file {target}")
        return True
