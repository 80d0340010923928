"""Store factory functions."""

import os
from pathlib import Path
from typing import Optional

from dancelog.database.sqlalchemy_store import SQLAlchemyKeyValueStore

DB_PATH_ENV_VAR = "DANCELOG_DB_PATH"


def default_database_path() -> str:
    """Return ~/.dancelog/dancelog.db, creating the directory if needed."""
    db_dir = Path.home() / ".dancelog"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "dancelog.db")


def create_sqlite_store(
    database_path: Optional[str] = None, quota_bytes: Optional[int] = None
) -> SQLAlchemyKeyValueStore:
    """Create a SQLite-backed key-value store.

    Args:
        database_path: Path to SQLite database file. If None, checks DANCELOG_DB_PATH
            environment variable, then defaults to ~/.dancelog/dancelog.db
        quota_bytes: Optional maximum size of a single stored value in bytes

    Returns:
        SQLAlchemyKeyValueStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        database_path = default_database_path()

    store = SQLAlchemyKeyValueStore(f"sqlite:///{database_path}", quota_bytes=quota_bytes)
    store.database_path = database_path
    return store
