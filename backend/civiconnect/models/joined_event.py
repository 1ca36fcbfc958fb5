"""JoinedEvent ORM model: the record of a user's participation in an event."""
import uuid
from sqlalchemy import Column, String, JSON, UniqueConstraint
from civiconnect.database import Base


class JoinedEvent(Base):
    __tablename__ = "joined_events"
    __table_args__ = (
        UniqueConstraint("event_id", "user_email", name="uq_joined_events_event_user"),
    )

    join_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(36), nullable=False, index=True)
    current_user = Column("user_email", String(255), nullable=False, index=True)
    joined_at = Column(String(40), nullable=False)
    extra = Column(JSON, nullable=False, default=dict)
