"""SQLAlchemy record for post authors."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadpost.db.session import Base


class UserRecord(Base):
    """Author identity referenced by ``posts.author``."""

    __tablename__ = "users"

    identity: Mapped[str] = mapped_column(String(64), primary_key=True)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
