"""Error taxonomy surfaced to API clients as ``{"error": <message>}``."""
import uuid
from typing import Optional

from fastapi import HTTPException, status


class Conflict(HTTPException):
    """Duplicate user email or duplicate join."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=message)


class NotFound(HTTPException):
    """Missing record or empty result set."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)


class ValidationFailure(HTTPException):
    """Malformed identifier or query value."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class StoreError(HTTPException):
    """Connectivity or query failure in the record store."""

    def __init__(self, message: str = "Server error", details: Optional[str] = None):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)
        self.details = details


def parse_record_id(raw: Optional[str], label: str = "event") -> str:
    """Return the canonical form of a record id, or raise ValidationFailure."""
    try:
        return str(uuid.UUID(str(raw)))
    except (TypeError, ValueError):
        raise ValidationFailure(f"Invalid {label} id: {raw!r}")
