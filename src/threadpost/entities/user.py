"""Minimal author entity resolved from ``posts.author``."""

from __future__ import annotations

from dataclasses import dataclass

from threadpost.core.errors import PreconditionError
from threadpost.db.adapter import Database
from threadpost.models.user import UserRecord

users = UserRecord.__table__


@dataclass
class User:
    """Author identity as seen by posts."""

    identity: str | None = None
    display_name: str | None = None

    def is_ready(self) -> bool:
        return self.identity is not None

    def load(self, store: Database, filter: str) -> User:
        """Populate from the row keyed by ``filter``; stays unready unless exactly one matches."""
        if not isinstance(filter, str):
            raise PreconditionError(
                f"User filter must be an identity string, got {type(filter).__name__}"
            )
        rows = store.load(users, {"identity": filter})
        if len(rows) == 1:
            self.identity = rows[0]["identity"]
            self.display_name = rows[0]["display_name"]
        else:
            self.identity = None
            self.display_name = None
        return self

    @classmethod
    def fetch(cls, store: Database, identifier: str) -> User:
        return cls().load(store, identifier)
