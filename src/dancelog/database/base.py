"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Raised when the underlying store cannot be read or written."""


class StorageQuotaExceeded(StorageError):
    """Raised when a write would exceed the store's configured quota."""


class KeyValueStore(ABC):
    """Local persistent key-value storage.

    Values are opaque strings. Every ``set_item`` replaces the previous value
    for the key in a single write.
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the underlying store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release the underlying store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create backing tables if they do not exist."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or None if absent.

        Raises:
            StorageError: If the store cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any prior value.

        Raises:
            StorageQuotaExceeded: If the value does not fit the quota
            StorageError: If the store cannot be written
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys in sorted order."""
        pass
