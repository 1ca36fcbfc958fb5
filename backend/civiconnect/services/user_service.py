"""User service: signup and listing."""
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from civiconnect.errors import Conflict
from civiconnect.models.user import User

logger = logging.getLogger(__name__)

# Existing clients display this text verbatim.
USER_EXISTS = "User already exists, login successfull"


def list_users(db: Session) -> list[User]:
    return db.query(User).all()


def create_user(db: Session, email: str, fields: dict[str, Any]) -> User:
    """Insert a user; an email already on file is a Conflict."""
    if db.query(User).filter(User.email == email).first():
        raise Conflict(USER_EXISTS)

    extra = {key: value for key, value in fields.items() if key not in ("_id", "email", "joinedEventIds")}
    user = User(email=email, joined_event_ids=[], extra=extra)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict(USER_EXISTS)
    db.refresh(user)
    logger.info("Created user %s (%s)", user.user_id, user.email)
    return user
