"""Create the post and user tables."""

from __future__ import annotations

from sqlalchemy.engine import Engine

from threadpost.core.logging import configure_logging
from threadpost.db.session import create_tables


def init_db(engine: Engine | None = None) -> None:
    """Initialize the database by creating all tables."""
    create_tables(engine)


if __name__ == "__main__":
    configure_logging()
    init_db()
    print("Database initialized.")
