"""SQLAlchemy models for stored records."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text

from .session import Base


class RecordRow(Base):
    __tablename__ = "records"

    id = Column(String(24), primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
