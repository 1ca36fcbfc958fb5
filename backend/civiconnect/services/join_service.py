"""Join workflow: registers a user's participation in an event.

Three records must agree after a join:
- a JoinedEvent row for (eventId, currentUser)
- the eventId inside User.joinedEventIds
- the currentUser inside Event.registeredUsers

All three writes happen in one transaction. The unique constraint on
(event_id, user_email) guarantees at most one join record per pair, even
when two requests pass the existence check at the same time.
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from civiconnect.dates import utc_now_iso
from civiconnect.errors import Conflict, NotFound, StoreError, ValidationFailure, parse_record_id
from civiconnect.models.event import Event
from civiconnect.models.joined_event import JoinedEvent
from civiconnect.models.user import User

logger = logging.getLogger(__name__)

ALREADY_JOINED = "User already joined this event"


def _with_member(members: Optional[list], item: str) -> list:
    """Set insertion on a JSON array: returns a new list containing ``item`` once."""
    members = list(members or [])
    if item not in members:
        members.append(item)
    return members


def _find_join(db: Session, event_id: str, current_user: str) -> Optional[JoinedEvent]:
    return (
        db.query(JoinedEvent)
        .filter(JoinedEvent.event_id == event_id, JoinedEvent.current_user == current_user)
        .first()
    )


def _add_joined_event_id(db: Session, email: str, event_id: str) -> None:
    user = db.query(User).filter(User.email == email).with_for_update().first()
    if user is None:
        logger.warning("Join by unknown user %s for event %s; no user record to update", email, event_id)
        return
    user.joined_event_ids = _with_member(user.joined_event_ids, event_id)


def _add_registered_user(db: Session, event_id: str, email: str) -> None:
    event = db.query(Event).filter(Event.event_id == event_id).with_for_update().first()
    if event is None:
        logger.warning("Join of unknown event %s by %s; no event record to update", event_id, email)
        return
    event.registered_users = _with_member(event.registered_users, email)


def join_event(
    db: Session,
    event_id: str,
    current_user: str,
    extra_fields: Optional[dict[str, Any]] = None,
) -> JoinedEvent:
    """Record that ``current_user`` joined ``event_id``.

    Raises ValidationFailure for a malformed id or empty user, Conflict when
    the pair is already joined, StoreError when the transaction fails.
    """
    event_key = parse_record_id(event_id)
    if not current_user:
        raise ValidationFailure("currentUser is required")

    fields = {
        key: value for key, value in (extra_fields or {}).items()
        if key not in ("_id", "eventId", "currentUser", "joinedAt")
    }
    record = JoinedEvent(
        event_id=event_key,
        current_user=current_user,
        joined_at=utc_now_iso(),
        extra=fields,
    )

    try:
        if _find_join(db, event_key, current_user):
            raise Conflict(ALREADY_JOINED)

        db.add(record)
        db.flush()
        # Order-independent set insertions; both must land or neither does.
        _add_joined_event_id(db, current_user, event_key)
        _add_registered_user(db, event_key, current_user)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Concurrent duplicate join of event %s by %s rejected", event_key, current_user)
        raise Conflict(ALREADY_JOINED)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error joining event %s for %s", event_key, current_user)
        raise StoreError("Failed to join event", details=str(exc))

    db.refresh(record)
    logger.info("User %s joined event %s (%s)", current_user, event_key, record.join_id)
    return record


def list_joined_events(db: Session, email: Optional[str]) -> list[JoinedEvent]:
    """Join records of ``email``; NotFound when there are none."""
    records = db.query(JoinedEvent).filter(JoinedEvent.current_user == email).all() if email else []
    if not records:
        raise NotFound("User has no joined events")
    return records
