"""Data access helpers for working with post rows."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.engine import RowMapping

from threadpost.db.adapter import Database
from threadpost.models.post import PostRecord

__all__ = ["PostRepository"]

posts = PostRecord.__table__


class PostRepository:
    """Thin wrapper around the persistence adapter for the ``posts`` table."""

    def __init__(self, store: Database) -> None:
        """Initialize the repository with a persistence adapter."""
        self.store = store

    def find(self, post_id: str) -> list[RowMapping]:
        """Return every row stored under ``post_id``.

        More than one row means the identifier is not unique in the store;
        callers decide what that means.
        """
        return self.store.load(posts, {"id": post_id})

    def children_of(self, parent_id: str) -> list[RowMapping]:
        """Return the replies to ``parent_id``, newest first."""
        return self.store.load(
            posts,
            {"parent": parent_id},
            order_by=[posts.c.created_time.desc()],
        )

    def insert(self, values: Mapping[str, Any]) -> dict[str, Any] | None:
        """Insert a post row and return it with its generated columns."""
        return self.store.insert(posts, values)

    def update_content(self, post_id: str, content: str, modified_time: int) -> bool:
        """Overwrite the content of a post and stamp its modification time."""
        stmt = (
            update(posts)
            .where(posts.c.id == post_id)
            .values(content=content, modified_time=modified_time)
        )
        return self.store.execute(stmt)

    def delete(self, post_id: str) -> bool:
        """Delete the post row keyed by ``post_id``."""
        return self.store.execute(delete(posts).where(posts.c.id == post_id))
