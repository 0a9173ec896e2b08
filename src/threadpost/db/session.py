"""Database engine configuration."""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase

from threadpost.core.settings import settings
from threadpost.db.adapter import Database


class Base(DeclarativeBase):
    """Declarative base shared by all table records."""


# Ensure record modules are imported so that metadata is populated when create_all runs.
import threadpost.models  # noqa: E402,F401

engine = create_engine(
    settings.effective_database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
)


def get_db() -> Generator[Database, None, None]:
    """Yield a persistence adapter bound to the configured engine.

    Each statement the adapter runs uses its own connection from the pool, so
    there is nothing to release afterwards beyond dropping the reference.
    """
    yield Database(engine)


def create_tables(bind: Engine | None = None) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=bind or engine)
