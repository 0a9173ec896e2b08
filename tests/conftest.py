# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from threadpost.db.adapter import Database
from threadpost.db.session import Base, create_tables, drop_tables
from threadpost.entities import Post, User
from threadpost.models import PostRecord, UserRecord

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def store(engine: Engine) -> Iterator[Database]:
    """Provide a persistence adapter over the shared test engine."""
    try:
        yield Database(engine)
    finally:
        # Ensure each test sees a clean database.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


def _persist_user(store: Database, identity: str, display_name: str) -> User:
    store.insert(UserRecord.__table__, {"identity": identity, "display_name": display_name})
    return User(identity=identity, display_name=display_name)


@pytest.fixture()
def alice(store: Database) -> User:
    """Create and return a persisted author."""
    return _persist_user(store, "alice", "Alice")


@pytest.fixture()
def bob(store: Database) -> User:
    """Create and return a second persisted author."""
    return _persist_user(store, "bob", "Bob")


@pytest.fixture()
def root_post(store: Database, alice: User) -> Post:
    """Create a top-level post by alice."""
    post = Post(author=alice.identity, content="Root post")
    assert post.create(store) is True
    return post


@pytest.fixture()
def insert_post(store: Database) -> Callable[..., str]:
    """Return a helper inserting raw post rows, bypassing the entity."""

    def _insert(**values: Any) -> str:
        values.setdefault("content", "row content")
        persisted = store.insert(PostRecord.__table__, values)
        assert persisted is not None
        return persisted["id"]

    return _insert
