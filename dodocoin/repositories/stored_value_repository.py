"""
Stored value repository - Data access layer for the StoredValue model.
Handles all database queries against the string-keyed store.
"""
from typing import Optional
from sqlalchemy.orm import Session

from dodocoin.models import StoredValue


class StoredValueRepository:
    """Repository for StoredValue data access"""

    @staticmethod
    def get(db: Session, key: str) -> Optional[StoredValue]:
        """Get stored value by key"""
        return db.query(StoredValue).filter(StoredValue.key == key).first()

    @staticmethod
    def upsert(db: Session, key: str, value: str) -> StoredValue:
        """
        Create or update a stored value.

        Args:
            db: Database session
            key: Storage key
            value: String value to store

        Returns:
            Stored row
        """
        row = db.query(StoredValue).filter(StoredValue.key == key).first()
        if row:
            row.value = value
        else:
            row = StoredValue(key=key, value=value)
            db.add(row)
        db.commit()
        db.refresh(row)
        return row

    @staticmethod
    def delete(db: Session, key: str) -> bool:
        """Delete a stored value. Returns False if the key was absent."""
        row = db.query(StoredValue).filter(StoredValue.key == key).first()
        if not row:
            return False
        db.delete(row)
        db.commit()
        return True
