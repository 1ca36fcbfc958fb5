"""Pydantic schemas for Events."""
from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from civiconnect.dates import normalize_event_date
from civiconnect.models.event import Event
from civiconnect.schemas.user import UserOut


class _EventFields(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    date: Optional[str] = None
    type: Optional[str] = None
    organizer: Optional[str] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return normalize_event_date(value)

    def provided_fields(self) -> dict[str, Any]:
        """Only the keys the client actually sent, extras included."""
        return {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}


class EventCreate(_EventFields):
    pass


class EventUpdate(_EventFields):
    """Partial update: absent keys are left untouched."""


class EventOut(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")
    title: Optional[str] = None
    date: Optional[str] = None
    type: Optional[str] = None
    organizer: Optional[str] = None
    registeredUsers: list[str] = []


class EventDetailOut(EventOut):
    organizerDetails: Optional[UserOut] = None


def event_document(event: Event) -> dict[str, Any]:
    """Flatten an Event row into its JSON document form."""
    return {
        **(event.extra or {}),
        "_id": event.event_id,
        "title": event.title,
        "date": event.date,
        "type": event.event_type,
        "organizer": event.organizer,
        "registeredUsers": list(event.registered_users or []),
    }
