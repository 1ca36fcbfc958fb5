"""Organizer dashboard routes."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from civiconnect.database import get_db
from civiconnect.schemas.event import EventOut, event_document
from civiconnect.services import event_service

router = APIRouter()


@router.get("", response_model=list[EventOut])
def list_managed_events(email: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Events organized by ``email``. 404 when there are none."""
    return [event_document(event) for event in event_service.list_managed_events(db, email)]
