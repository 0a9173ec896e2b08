"""SQLAlchemy record for persisted posts."""

import uuid

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadpost.db.session import Base
from threadpost.db.time import unix_now


def new_identifier() -> str:
    """Return a fresh opaque identifier for a post row."""
    return str(uuid.uuid4())


class PostRecord(Base):
    """One row per post.

    ``parent`` and ``link`` hold identifiers of other rows in this table but
    carry no foreign key: deleting a post never cascades to its replies or
    reposts.
    """

    __tablename__ = "posts"

    # Assigned by the store on insert.
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_identifier)
    author: Mapped[str] = mapped_column(String(64), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_time: Mapped[int] = mapped_column(BigInteger, nullable=False, default=unix_now)
    modified_time: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    # Reply target and repost target respectively.
    parent: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    link: Mapped[str | None] = mapped_column(String(36), nullable=True)
