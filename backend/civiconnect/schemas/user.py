"""Pydantic schemas for Users."""
from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from civiconnect.models.user import User


class UserCreate(BaseModel):
    """Signup payload; any field besides ``email`` is stored as-is."""

    model_config = ConfigDict(extra="allow")

    email: str


class UserOut(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
    joinedEventIds: list[str] = []


def user_document(user: User) -> dict[str, Any]:
    """Flatten a User row into its JSON document form."""
    return {
        **(user.extra or {}),
        "_id": user.user_id,
        "email": user.email,
        "joinedEventIds": list(user.joined_event_ids or []),
    }
