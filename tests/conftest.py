"""Shared pytest fixtures for dancelog tests."""

import logging
import tempfile
import os
from decimal import Decimal
import pytest

from dancelog.database.factories import create_sqlite_store
from dancelog.database.repository import RecordRepository
from dancelog.domain.entities import (
    CustomInstitution,
    InstitutionType,
    NamedInstitution,
    Record,
    RecordFields,
)
from dancelog.domain.record_store import RecordStore


@pytest.fixture
def temp_db():
    """Create a temporary store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def repository(temp_db):
    """Create a RecordRepository over the temporary store."""
    return RecordRepository(temp_db)


class FakeClock:
    """Deterministic millisecond clock that advances on every call."""

    def __init__(self, start: int = 1_714_521_600_000, step: int = 1000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def clock():
    """Create a deterministic clock."""
    return FakeClock()


@pytest.fixture
def record_store(repository, clock):
    """Create an initialized RecordStore with a temporary store."""
    store = RecordStore(repository, clock=clock)
    store.initialize()
    return store


@pytest.fixture
def may_records():
    """Records from two months, stored newest-created first."""
    return [
        Record(
            id="r3",
            date="2024-06-01",
            institution=NamedInstitution(InstitutionType.DI_LE_BEI_BEI),
            amount=Decimal("200"),
            timestamp=3,
        ),
        Record(
            id="r2",
            date="2024-05-15",
            institution=CustomInstitution("私教课"),
            amount=Decimal("50"),
            timestamp=2,
        ),
        Record(
            id="r1",
            date="2024-05-01",
            institution=NamedInstitution(InstitutionType.DI_LE_BEI_BEI),
            amount=Decimal("100"),
            timestamp=1,
        ),
    ]


def _make_fields(
    date: str = "2024-05-01",
    institution=None,
    amount: str = "100",
) -> RecordFields:
    """Build RecordFields with sensible defaults."""
    return RecordFields(
        date=date,
        institution=institution or NamedInstitution(InstitutionType.DI_LE_BEI_BEI),
        amount=Decimal(amount),
    )


@pytest.fixture
def make_fields():
    """Return a builder for RecordFields."""
    return _make_fields


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by CLI invocations after each test."""
    yield
    logger = logging.getLogger("dancelog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
