"""Whole-collection persistence of teaching records."""

from typing import Sequence

from dancelog.database import mappers
from dancelog.database.base import KeyValueStore, StorageError
from dancelog.domain.entities import Record
from dancelog.logging_setup import get_logger

STORAGE_KEY = "dance_teaching_records_v1"

logger = get_logger("dancelog.database.repository")


class RecordRepository:
    """Loads and saves the full record collection as a single stored value.

    Storage failures never propagate: ``load`` falls back to an empty
    collection and ``save`` drops the write, both after logging.
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        """Initialize record repository.

        Args:
            store: Key-value store holding the collection
            key: Entry name the collection is stored under
        """
        self.store = store
        self.key = key

    def load(self) -> list[Record]:
        """Load the stored collection, or an empty list if absent or unreadable."""
        try:
            data = self.store.get_item(self.key)
        except StorageError:
            logger.exception("Failed to load records")
            return []

        if data is None:
            return []

        try:
            records = mappers.deserialize_records(data)
        except (ValueError, RecursionError):
            logger.exception("Failed to load records: stored value is not a record list")
            return []

        logger.debug("Loaded %d records from '%s'", len(records), self.key)
        return records

    def save(self, records: Sequence[Record]) -> None:
        """Overwrite the stored collection with ``records``."""
        try:
            self.store.set_item(self.key, mappers.serialize_records(records))
        except StorageError:
            logger.exception("Failed to save records")
            return
        logger.debug("Saved %d records to '%s'", len(records), self.key)
