"""Event service: listing filters, detail assembly, create, and update propagation.

Responsibilities:
- Translate ``filterDate`` / ``type`` / ``search`` query values into filters
- Merge the organizer's user record into the event detail
- Push event updates down to join records before updating the event itself
"""
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from civiconnect.dates import normalize_event_date
from civiconnect.errors import NotFound, ValidationFailure, parse_record_id
from civiconnect.models.event import Event
from civiconnect.models.joined_event import JoinedEvent
from civiconnect.models.user import User

logger = logging.getLogger(__name__)

ALL_TYPES = "all"

# Keys a client may never set through create/update bodies.
PROTECTED_FIELDS = frozenset({
    "_id", "id", "eventId", "currentUser", "joinedAt", "registeredUsers", "joinedEventIds",
})

# Document key -> Event column attribute. Everything else lives in ``extra``.
EVENT_COLUMNS = {
    "title": "title",
    "date": "date",
    "type": "event_type",
    "organizer": "organizer",
}


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _writable(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if key not in PROTECTED_FIELDS}


def _apply_fields(event: Event, fields: dict[str, Any]) -> None:
    extra = dict(event.extra or {})
    for key, value in fields.items():
        if key in EVENT_COLUMNS:
            setattr(event, EVENT_COLUMNS[key], value)
        else:
            extra[key] = value
    event.extra = extra


def _event_snapshot(event: Event) -> tuple:
    return (event.title, event.date, event.event_type, event.organizer, dict(event.extra or {}))


def build_event_filters(
    filter_date: Optional[str] = None,
    event_type: Optional[str] = None,
    search: Optional[str] = None,
) -> list:
    """AND-ed filter clauses for the event listing; absent values add nothing."""
    clauses = []
    if filter_date:
        try:
            lower_bound = normalize_event_date(filter_date)
        except ValueError:
            raise ValidationFailure(f"Invalid filterDate: {filter_date!r}")
        clauses.append(Event.date >= lower_bound)
    if event_type and event_type != ALL_TYPES:
        clauses.append(Event.event_type == event_type)
    if search:
        clauses.append(Event.title.ilike(f"%{_escape_like(search)}%", escape="\\"))
    return clauses


def list_events(
    db: Session,
    filter_date: Optional[str] = None,
    event_type: Optional[str] = None,
    search: Optional[str] = None,
) -> list[Event]:
    """Matching events, date ascending. No match is NotFound, not an empty list."""
    clauses = build_event_filters(filter_date, event_type, search)
    logger.debug("Listing events with %d filter clause(s)", len(clauses))
    events = db.query(Event).filter(*clauses).order_by(Event.date).all()
    if not events:
        raise NotFound("No events found")
    return events


def get_event_detail(db: Session, event_id: str) -> tuple[Event, Optional[User]]:
    """Fetch an event and the User behind its organizer email (None if unknown)."""
    event_key = parse_record_id(event_id)
    event = db.query(Event).filter(Event.event_id == event_key).first()
    if not event:
        raise NotFound("Event not found")
    organizer = None
    if event.organizer:
        organizer = db.query(User).filter(User.email == event.organizer).first()
    return event, organizer


def create_event(db: Session, fields: dict[str, Any]) -> Event:
    event = Event(registered_users=[], extra={})
    _apply_fields(event, _writable(fields))
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event '%s' (%s) by organizer %s", event.title, event.event_id, event.organizer)
    return event


def update_event(db: Session, event_id: str, updates: dict[str, Any]) -> tuple[int, int]:
    """Apply ``updates`` to every join record of the event, then to the event.

    The join records are committed first, so they carry the update even when
    the event itself does not exist (the caller then gets NotFound).
    Returns ``(matched, modified)`` for the event update.
    """
    event_key = parse_record_id(event_id)
    updates = _writable(updates)

    joined = db.query(JoinedEvent).filter(JoinedEvent.event_id == event_key).all()
    for record in joined:
        record.extra = {**(record.extra or {}), **updates}
    db.commit()
    logger.info("Propagated update to %d join record(s) of event %s", len(joined), event_key)

    event = db.query(Event).filter(Event.event_id == event_key).first()
    if not event:
        raise NotFound("Event not found")

    before = _event_snapshot(event)
    _apply_fields(event, updates)
    modified = int(_event_snapshot(event) != before)
    db.commit()
    logger.info("Updated event %s (modified=%d)", event_key, modified)
    return 1, modified


def list_managed_events(db: Session, organizer_email: Optional[str]) -> list[Event]:
    """Events organized by ``organizer_email``; NotFound when there are none."""
    events = db.query(Event).filter(Event.organizer == organizer_email).all() if organizer_email else []
    if not events:
        raise NotFound("User has no managed events")
    return events
