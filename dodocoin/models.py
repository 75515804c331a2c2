from sqlalchemy import Column, String, DateTime
from datetime import datetime

from dodocoin.database import Base


class StoredValue(Base):
    __tablename__ = "stored_values"

    key = Column(String, primary_key=True, index=True)
    value = Column(String, nullable=False)  # Always a string; JSON for structured values
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
