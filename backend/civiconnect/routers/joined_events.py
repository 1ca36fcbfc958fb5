"""Join record API routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from civiconnect.database import get_db
from civiconnect.schemas.common import InsertResult
from civiconnect.schemas.joined_event import JoinedEventCreate, JoinedEventOut, joined_event_document
from civiconnect.services import join_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[JoinedEventOut])
def list_joined_events(email: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Events the user has joined. 404 when there are none."""
    return [joined_event_document(record) for record in join_service.list_joined_events(db, email)]


@router.post("", response_model=InsertResult)
def join_event(payload: JoinedEventCreate, db: Session = Depends(get_db)):
    """Join an event. 409 if the user already joined it."""
    record = join_service.join_event(
        db,
        event_id=payload.eventId,
        current_user=payload.currentUser,
        extra_fields=payload.model_extra,
    )
    return InsertResult(insertedId=record.join_id)
