"""Record store domain service."""

import time
from typing import Callable, Optional

from dancelog.database.repository import RecordRepository
from dancelog.domain.entities import Record, RecordFields
from dancelog.domain.errors import NotFoundError, record_not_found
from dancelog.logging_setup import get_logger
from dancelog.utils.id_generator import generate_record_id

logger = get_logger("dancelog.domain.record_store")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class RecordStore:
    """Owns the in-memory record collection.

    The collection is kept newest-created first. Every mutation writes the
    full collection back through the repository before returning.
    """

    def __init__(
        self,
        repository: RecordRepository,
        clock: Callable[[], int] = _now_ms,
        id_factory: Callable[[], str] = generate_record_id,
    ):
        """Initialize record store.

        Args:
            repository: Persistence adapter for the collection
            clock: Returns the current instant in epoch milliseconds
            id_factory: Returns a fresh record id
        """
        self.repository = repository
        self.clock = clock
        self.id_factory = id_factory
        self._records: list[Record] = []
        self._ids: set[str] = set()
        self._initialized = False
        self._last_timestamp = 0

    def initialize(self) -> tuple[Record, ...]:
        """Load the stored collection. Later calls return the current snapshot."""
        if not self._initialized:
            self._records = list(self.repository.load())
            self._ids = {r.id for r in self._records}
            self._last_timestamp = max((r.timestamp for r in self._records), default=0)
            self._initialized = True
        return self.records

    @property
    def records(self) -> tuple[Record, ...]:
        """Immutable snapshot of the collection, newest-created first."""
        return tuple(self._records)

    def get(self, record_id: str) -> Optional[Record]:
        """Get a record by id, or None if not found."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def add(self, fields: RecordFields) -> Record:
        """Create a record from ``fields`` and prepend it to the collection.

        Returns:
            The new Record
        """
        record = Record(
            id=self._new_id(),
            date=fields.date,
            institution=fields.institution,
            amount=fields.amount,
            timestamp=self._next_timestamp(),
        )
        self._records.insert(0, record)
        self._ids.add(record.id)
        self.repository.save(self._records)
        logger.info("Added record %s", record.id)
        return record

    def update(self, record_id: str, fields: RecordFields) -> Record:
        """Replace all fields of a record except its id.

        The record keeps its position and gets a fresh timestamp.

        Returns:
            The updated Record

        Raises:
            NotFoundError: If no record has ``record_id``
        """
        index = self._index_of(record_id)
        if index is None:
            raise NotFoundError(record_not_found(record_id))

        record = Record(
            id=record_id,
            date=fields.date,
            institution=fields.institution,
            amount=fields.amount,
            timestamp=self._next_timestamp(),
        )
        self._records[index] = record
        self.repository.save(self._records)
        logger.info("Updated record %s", record_id)
        return record

    def remove(self, record_id: str) -> bool:
        """Delete a record by id. The collection is saved either way.

        Returns:
            True if a record was removed
        """
        index = self._index_of(record_id)
        if index is not None:
            del self._records[index]
            self._ids.discard(record_id)
            logger.info("Removed record %s", record_id)
        self.repository.save(self._records)
        return index is not None

    def _index_of(self, record_id: str) -> Optional[int]:
        if not record_id:
            return None
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _new_id(self) -> str:
        record_id = self.id_factory()
        while record_id in self._ids:
            logger.warning("Generated id %s collides with an existing record, retrying", record_id)
            record_id = self.id_factory()
        return record_id

    def _next_timestamp(self) -> int:
        # Never go backwards, even if the wall clock does
        self._last_timestamp = max(self.clock(), self._last_timestamp)
        return self._last_timestamp
