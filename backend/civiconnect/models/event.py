"""Event ORM model."""
import uuid
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func
from civiconnect.database import Base


class Event(Base):
    __tablename__ = "events"

    event_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=True)
    # Zero-padded ISO string, so string order is chronological order.
    date = Column(String(40), nullable=True, index=True)
    event_type = Column("type", String(100), nullable=True)
    organizer = Column(String(255), nullable=True, index=True)  # organizer email, no FK
    registered_users = Column(JSON, nullable=False, default=list)  # set semantics
    extra = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
