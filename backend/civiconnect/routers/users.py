"""User API routes."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiconnect.database import get_db
from civiconnect.schemas.common import InsertResult
from civiconnect.schemas.user import UserCreate, UserOut, user_document
from civiconnect.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    """List all users."""
    return [user_document(user) for user in user_service.list_users(db)]


@router.post("", response_model=InsertResult)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Sign up a user; 409 when the email is already registered."""
    user = user_service.create_user(db, email=payload.email, fields=payload.model_extra or {})
    return InsertResult(insertedId=user.user_id)
