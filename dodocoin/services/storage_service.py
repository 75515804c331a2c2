"""
Key-value storage used by the ledger.
The ledger only sees the KeyValueStore interface; backends are injected.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dodocoin.exceptions import StorageException
from dodocoin.repositories.stored_value_repository import StoredValueRepository

logger = logging.getLogger("dodocoin.storage")


class KeyValueStore(ABC):
    """String-keyed store of string values"""

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent"""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key; removing an absent key is not an error"""


class MemoryStore(KeyValueStore):
    """Dict-backed store, mainly for tests and scripting"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def save(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class DatabaseStore(KeyValueStore):
    """
    Store backed by the stored_values table.

    Every call commits on its own; writes to different keys are not atomic.
    """

    def __init__(self, db: Session):
        self.db = db

    def load(self, key: str) -> Optional[str]:
        try:
            row = StoredValueRepository.get(self.db, key)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to load '{key}': {e}")
            raise StorageException("load", str(e)) from e
        return row.value if row else None

    def save(self, key: str, value: str) -> None:
        try:
            StoredValueRepository.upsert(self.db, key, value)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save '{key}': {e}")
            raise StorageException("save", str(e)) from e

    def remove(self, key: str) -> None:
        try:
            StoredValueRepository.delete(self.db, key)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to remove '{key}': {e}")
            raise StorageException("remove", str(e)) from e
