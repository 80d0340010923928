"""Storage layer for dancelog."""

from dancelog.database.base import KeyValueStore, StorageError, StorageQuotaExceeded
from dancelog.database.factories import create_sqlite_store

__all__ = ["KeyValueStore", "StorageError", "StorageQuotaExceeded", "create_sqlite_store"]
