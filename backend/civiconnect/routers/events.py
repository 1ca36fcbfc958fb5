"""Event API routes — delegates to event_service."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from civiconnect.database import get_db
from civiconnect.schemas.common import InsertResult, UpdateResult
from civiconnect.schemas.event import EventCreate, EventUpdate, EventOut, EventDetailOut, event_document
from civiconnect.schemas.user import user_document
from civiconnect.services import event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[EventOut])
def list_events(
    filter_date: Optional[str] = Query(None, alias="filterDate", description="Only events on or after this date"),
    event_type: Optional[str] = Query(None, alias="type", description="Exact event type; 'all' disables the filter"),
    search: Optional[str] = Query(None, description="Case-insensitive title substring"),
    db: Session = Depends(get_db),
):
    """List events, date ascending. 404 when nothing matches."""
    events = event_service.list_events(db, filter_date=filter_date, event_type=event_type, search=search)
    return [event_document(event) for event in events]


@router.post("", response_model=InsertResult)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    event = event_service.create_event(db, payload.provided_fields())
    return InsertResult(insertedId=event.event_id)


@router.get("/{event_id}", response_model=EventDetailOut)
def get_event(event_id: str, db: Session = Depends(get_db)):
    """Fetch a single event with its organizer's user record merged in."""
    event, organizer = event_service.get_event_detail(db, event_id)
    return {
        **event_document(event),
        "organizerDetails": user_document(organizer) if organizer else None,
    }


@router.put("/{event_id}", response_model=UpdateResult)
def update_event(event_id: str, payload: EventUpdate, db: Session = Depends(get_db)):
    """Update an event and every join record that references it."""
    matched, modified = event_service.update_event(db, event_id, payload.provided_fields())
    return UpdateResult(matchedCount=matched, modifiedCount=modified)
