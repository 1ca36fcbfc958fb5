"""Pydantic schemas for join records."""
from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from civiconnect.models.joined_event import JoinedEvent


class JoinedEventCreate(BaseModel):
    """Join request; extra fields (event title, image, ...) are copied into the record."""

    model_config = ConfigDict(extra="allow")

    eventId: str
    currentUser: str


class JoinedEventOut(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")
    eventId: str
    currentUser: str
    joinedAt: str


def joined_event_document(record: JoinedEvent) -> dict[str, Any]:
    return {
        **(record.extra or {}),
        "_id": record.join_id,
        "eventId": record.event_id,
        "currentUser": record.current_user,
        "joinedAt": record.joined_at,
    }
