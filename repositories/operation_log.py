"""
Operation Log - append-only text file recording cart operations and failures
"""

from datetime import datetime
from typing import Optional

from app.exceptions import InvalidArgumentError, StorageError
from repositories.base import BaseFileRepository, PathLike


class OperationLog(BaseFileRepository):
    """Appends timestamped lines to a log file. Never truncates."""

    def __init__(self, default_destination: Optional[PathLike] = None):
        self.default_destination = default_destination

    def append(self, message: str, destination: Optional[PathLike] = None) -> None:
        """
        Append ``<ISO timestamp>: <message>`` as one line.

        The file and its parent directory are created if absent.

        Raises:
            InvalidArgumentError: If no destination is given or configured
            StorageError: If the file cannot be written
        """
        destination = destination or self.default_destination
        if destination is None:
            raise InvalidArgumentError("Log destination is required")

        target = self._path(destination)
        line = f"{datetime.now().isoformat()}: {message}\n"
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("a", encoding=self.encoding) as f:
                f.write(line)
        except OSError as e:
            raise StorageError(
                f"Could not append to log file {target}: {e}",
                details={"path": str(target)},
            ) from e

    def read_lines(self, source: Optional[PathLike] = None) -> list[str]:
        """Return the logged lines, or an empty list if nothing was logged yet."""
        target = self._path(source or self.default_destination)
        if not target.exists():
            return []
        try:
            return target.read_text(encoding=self.encoding).splitlines()
        except OSError as e:
            raise StorageError(
                f"Could not read log file {target}: {e}",
                details={"path": str(target)},
            ) from e
