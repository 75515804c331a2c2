"""
Shared fixtures for the ledger tests.
"""
import os
import tempfile

# Must be set before dodocoin modules read the environment
os.environ.setdefault("DODOCOIN_DATABASE_URL", "sqlite://")
os.environ.setdefault("DODOCOIN_LOG_DIR", os.path.join(tempfile.gettempdir(), "dodocoin-test-logs"))
os.environ["DODOCOIN_API_KEY"] = "test-key"

import pytest
from datetime import date, datetime, timedelta, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dodocoin.database import Base
from dodocoin import models  # Register tables with Base
from dodocoin.schemas import Transaction
from dodocoin.services.ledger_service import Ledger
from dodocoin.services.storage_service import MemoryStore


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite session per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def ledger(store):
    return Ledger(store)


@pytest.fixture
def now():
    return datetime(2026, 1, 30, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def today():
    return date(2026, 1, 30)


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


def make_transaction(amount: int, when: datetime, label: str = "Test") -> Transaction:
    """Build a transaction stamped at `when` (UTC)"""
    stamp = when.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return Transaction(label=label, amount=amount, date=stamp)
