"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the users, events and joined_events tables, including the
unique (event_id, user_email) constraint on joined_events.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("joined_event_ids", sa.JSON, nullable=False),
        sa.Column("extra", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- events ---
    op.create_table(
        "events",
        sa.Column("event_id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("date", sa.String(40), nullable=True),
        sa.Column("type", sa.String(100), nullable=True),
        sa.Column("organizer", sa.String(255), nullable=True),
        sa.Column("registered_users", sa.JSON, nullable=False),
        sa.Column("extra", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_events_date", "events", ["date"])
    op.create_index("ix_events_organizer", "events", ["organizer"])

    # --- joined_events ---
    op.create_table(
        "joined_events",
        sa.Column("join_id", sa.String(36), primary_key=True),
        sa.Column("event_id", sa.String(36), nullable=False),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("joined_at", sa.String(40), nullable=False),
        sa.Column("extra", sa.JSON, nullable=False),
        sa.UniqueConstraint("event_id", "user_email", name="uq_joined_events_event_user"),
    )
    op.create_index("ix_joined_events_event_id", "joined_events", ["event_id"])
    op.create_index("ix_joined_events_user_email", "joined_events", ["user_email"])


def downgrade() -> None:
    op.drop_table("joined_events")
    op.drop_table("events")
    op.drop_table("users")
