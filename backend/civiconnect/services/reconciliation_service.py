"""Membership reconciliation.

Join records are the source of truth for who joined what. This rebuilds
User.joinedEventIds and Event.registeredUsers from them, repairing rows that
drifted (e.g. records written before the join workflow was transactional,
or edited by hand). Safe to run repeatedly.
"""
import logging
from collections import defaultdict
from typing import Any

from sqlalchemy.orm import Session

from civiconnect.models.event import Event
from civiconnect.models.joined_event import JoinedEvent
from civiconnect.models.user import User

logger = logging.getLogger(__name__)


def reconcile_memberships(db: Session, dry_run: bool = False) -> dict[str, Any]:
    """Rewrite membership sets that disagree with the join records.

    Returns counts of drifted users and events. With ``dry_run`` nothing is
    written.
    """
    event_ids_by_user: dict[str, list[str]] = defaultdict(list)
    users_by_event: dict[str, list[str]] = defaultdict(list)
    for record in db.query(JoinedEvent).order_by(JoinedEvent.joined_at).all():
        event_ids_by_user[record.current_user].append(record.event_id)
        users_by_event[record.event_id].append(record.current_user)

    users_fixed = 0
    for user in db.query(User).all():
        expected = event_ids_by_user.get(user.email, [])
        if sorted(user.joined_event_ids or []) != sorted(expected):
            users_fixed += 1
            logger.warning("User %s joinedEventIds drifted: %s -> %s", user.email, user.joined_event_ids, expected)
            if not dry_run:
                user.joined_event_ids = expected

    events_fixed = 0
    for event in db.query(Event).all():
        expected = users_by_event.get(event.event_id, [])
        if sorted(event.registered_users or []) != sorted(expected):
            events_fixed += 1
            logger.warning("Event %s registeredUsers drifted: %s -> %s", event.event_id, event.registered_users, expected)
            if not dry_run:
                event.registered_users = expected

    if dry_run:
        db.rollback()
    else:
        db.commit()

    logger.info("Reconciliation done: users_fixed=%d events_fixed=%d dry_run=%s", users_fixed, events_fixed, dry_run)
    return {"users_fixed": users_fixed, "events_fixed": events_fixed, "dry_run": dry_run}
