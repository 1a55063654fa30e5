"""File-backed persistence for Blogger entities."""

from blogger.persistence.error import CorruptRecordError, StorageError
from blogger.persistence.store import Store
from blogger.persistence.table import Table

__all__ = [
    "Store",
    "Table",
    "StorageError",
    "CorruptRecordError",
]
