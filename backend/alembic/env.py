"""Alembic migration runner for the civiconnect tables.

The connection URL always comes from civiconnect.config, so migrations
target the same store as the running service.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from civiconnect.config import settings
from civiconnect.database import Base

# Register every table on Base.metadata
from civiconnect.models.user import User  # noqa: F401
from civiconnect.models.event import Event  # noqa: F401
from civiconnect.models.joined_event import JoinedEvent  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def run_migrations() -> None:
    """Emit SQL in offline mode, otherwise apply over a short-lived connection."""
    if context.is_offline_mode():
        context.configure(
            url=settings.database_url,
            target_metadata=Base.metadata,
            literal_binds=True,
            dialect_opts={"paramstyle": "named"},
        )
        with context.begin_transaction():
            context.run_migrations()
        return

    engine = create_engine(settings.database_url, poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=Base.metadata)
        with context.begin_transaction():
            context.run_migrations()


run_migrations()
