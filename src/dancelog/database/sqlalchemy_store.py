"""SQLAlchemy key-value store implementation."""

from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from dancelog.database.base import KeyValueStore, StorageError, StorageQuotaExceeded
from dancelog.database.models import StorageEntry, create_session_factory


class SQLAlchemyKeyValueStore(KeyValueStore):
    """SQLAlchemy-based implementation of KeyValueStore."""

    def __init__(self, database_url: str, quota_bytes: Optional[int] = None):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
            quota_bytes: Optional maximum UTF-8 size of a single value
        """
        self.database_url = database_url
        self.quota_bytes = quota_bytes
        self.database_path: Optional[str] = None
        self._session_factory: Optional[sessionmaker[Session]] = None
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating the engine and session if needed."""
        if self._session_factory is None:
            self._session_factory = create_session_factory(self.database_url)
        if self._session is None:
            self._session = self._session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        try:
            self._get_session()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not initialize store at {self.database_url}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or None if absent."""
        try:
            session = self._get_session()
            entry = session.get(StorageEntry, key, populate_existing=True)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read '{key}': {e}") from e
        if entry is None:
            return None
        return entry.value

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any prior value."""
        if self.quota_bytes is not None:
            size = len(value.encode("utf-8"))
            if size > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Value for '{key}' is {size} bytes, exceeding quota of {self.quota_bytes} bytes"
                )

        session = None
        try:
            session = self._get_session()
            entry = session.get(StorageEntry, key, populate_existing=True)
            if entry is None:
                session.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            if session is not None:
                session.rollback()
            raise StorageError(f"Could not write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        session = None
        try:
            session = self._get_session()
            entry = session.get(StorageEntry, key, populate_existing=True)
            if entry is not None:
                session.delete(entry)
                session.commit()
        except SQLAlchemyError as e:
            if session is not None:
                session.rollback()
            raise StorageError(f"Could not remove '{key}': {e}") from e

    def keys(self) -> list[str]:
        """List stored keys in sorted order."""
        try:
            session = self._get_session()
            entries = session.query(StorageEntry.key).order_by(StorageEntry.key).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not list keys: {e}") from e
        return [row.key for row in entries]
