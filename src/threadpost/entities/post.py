"""Post entity with lazily resolved author, reply and repost relations.

A post read from the store only knows the identifiers of its author, the
post it replies to (``parent``) and the post it reposts (``link``). Callers
resolve the relations they need, one hop at a time, with the ``resolve_*``
methods. Each resolution happens at most once per instance.

Replying and reposting are meant to be exclusive. A post holding both is in
conflict; this is reported by :meth:`Post.is_conflict` and never corrected
automatically.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from threadpost.core.errors import PreconditionError
from threadpost.db.adapter import Database
from threadpost.db.time import unix_now
from threadpost.entities.ref import Ref
from threadpost.entities.user import User
from threadpost.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Post:
    """A post and its three references.

    ``author``, ``parent`` and ``link`` accept an identifier, an entity or a
    :class:`Ref` and are always stored as a :class:`Ref` (or ``None``).
    ``children`` is ``None`` until :meth:`resolve_children` runs; an empty
    tuple means the post has no replies.
    """

    id: str | None = None
    author: Ref[User] | None = None
    content: str | None = None
    created_time: int | None = None
    modified_time: int | None = None
    parent: Ref[Post] | None = None
    link: Ref[Post] | None = None
    children: tuple[Post, ...] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.author = Ref.to(User, self.author)
        self.parent = Ref.to(Post, self.parent)
        self.link = Ref.to(Post, self.link)
        if self.children is not None:
            self.children = tuple(self.children)

    @property
    def identity(self) -> str | None:
        return self.id

    # Rows

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Post:
        """Build a post from a stored row, leaving every reference unresolved."""
        return cls(
            id=row["id"],
            author=row["author"],
            content=row["content"],
            created_time=row["created_time"],
            modified_time=row.get("modified_time"),
            parent=row.get("parent"),
            link=row.get("link"),
        )

    def to_row(self) -> dict[str, Any]:
        """Return the persisted shape, with references flattened to identifiers."""
        return {
            "id": self.id,
            "author": Ref.identifier_of(self.author),
            "content": self.content,
            "created_time": self.created_time,
            "modified_time": self.modified_time,
            "parent": Ref.identifier_of(self.parent),
            "link": Ref.identifier_of(self.link),
        }

    def _assign(self, other: Post) -> None:
        self.id = other.id
        self.author = other.author
        self.content = other.content
        self.created_time = other.created_time
        self.modified_time = other.modified_time
        self.parent = other.parent
        self.link = other.link
        self.children = None

    def _require_ready(self, action: str) -> None:
        if not self.is_ready():
            raise PreconditionError(f"Cannot {action} a post that has not been persisted")

    # Loading

    def is_ready(self) -> bool:
        return self.id is not None

    @classmethod
    def fetch(cls, store: Database, identifier: str) -> Post:
        return cls().load_by_identifier(store, identifier)

    def load_by_identifier(self, store: Database, identifier: str) -> Post:
        """Populate this post from the row stored under ``identifier``.

        Anything other than exactly one matching row leaves the post unready
        with every field cleared. Check :meth:`is_ready` afterwards.
        """
        if not isinstance(identifier, str):
            raise PreconditionError(
                f"Post identifier must be a string, got {type(identifier).__name__}"
            )

        rows = PostRepository(store).find(identifier)
        if len(rows) == 1:
            self._assign(Post.from_row(rows[0]))
        else:
            if rows:
                logger.warning(
                    "Identifier %s matches %d posts; treating as not found",
                    identifier,
                    len(rows),
                )
            self._assign(Post())
        return self

    def reload(self, store: Database) -> Post:
        """Re-read this post from the store, dropping any resolved relations."""
        self._require_ready("reload")
        return self.load_by_identifier(store, self.id)

    # Writes

    def create(self, store: Database) -> bool:
        """Insert this post; on success it takes the generated id and creation time."""
        if self.is_ready():
            raise PreconditionError(f"Post {self.id} has already been persisted")
        if self.content is None or self.author is None:
            raise PreconditionError("A post needs content and an author before it can be created")

        row = self.to_row()
        values = {key: row[key] for key in ("author", "content", "parent", "link")}
        persisted = PostRepository(store).insert(values)
        if persisted is None:
            return False

        self.id = persisted["id"]
        self.created_time = persisted["created_time"]
        logger.info("Created post %s by %s", self.id, values["author"])
        return True

    def replace(self, store: Database) -> bool:
        """Persist the current content and stamp the modification time.

        Only ``content`` and ``modified_time`` are written; every other column
        keeps its stored value.
        """
        self._require_ready("replace")
        now = unix_now()
        if not PostRepository(store).update_content(self.id, self.content, now):
            return False
        self.modified_time = now
        return True

    def destroy(self, store: Database) -> bool:
        """Delete this post's row. Replies and reposts of it are left alone."""
        self._require_ready("destroy")
        if not PostRepository(store).delete(self.id):
            return False
        logger.info("Deleted post %s", self.id)
        return True

    # Relations

    def resolve_author(self, store: Database) -> Post:
        if self.author is not None:
            self.author.resolve(store)
        return self

    def resolve_parent(self, store: Database) -> Post:
        if self.parent is not None:
            self.parent.resolve(store)
        return self

    def resolve_link(self, store: Database) -> Post:
        if self.link is not None:
            self.link.resolve(store)
        return self

    def resolve_children(self, store: Database) -> Post:
        """Load the replies to this post, newest first, each with its author resolved.

        Runs once per instance; an empty result still counts as loaded.
        """
        if self.children is not None:
            return self
        self._require_ready("load the replies of")

        rows = PostRepository(store).children_of(self.id)
        self.children = tuple(Post.from_row(row).resolve_author(store) for row in rows)
        logger.debug("Resolved %d repl(ies) to post %s", len(self.children), self.id)
        return self

    # Queries

    def is_author(self, candidate: User | str) -> bool:
        """Whether ``candidate`` wrote this post, whatever form ``author`` is in."""
        if self.author is None:
            return False
        return self.author.identifier == Ref.identifier_of(candidate)

    def is_conflict(self) -> bool:
        return self.parent is not None and self.link is not None

    def get_content(self) -> str | None:
        return self.content

    def get_parent(self) -> Post | str | None:
        return self.parent.value() if self.parent is not None else None

    def get_link(self) -> Post | str | None:
        return self.link.value() if self.link is not None else None

    def set_content(self, content: str) -> Post:
        self.content = content
        return self

    def set_author(self, author: User | str) -> Post:
        self.author = Ref.to(User, author)
        return self
