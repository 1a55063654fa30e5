"""Persistence layer errors."""

from pathlib import Path


class StorageError(Exception):
    """Base storage error.

    Raised when reading, writing or deleting a record file fails. The
    underlying OSError, if any, is chained as the cause.
    """

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message if path is None else f"{message}: {path}")


class CorruptRecordError(StorageError):
    """Raised when a record file does not hold a valid record."""

    pass
