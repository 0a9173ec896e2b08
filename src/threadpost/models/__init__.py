"""SQLAlchemy table records backing the entities."""

from .post import PostRecord
from .user import UserRecord

__all__ = ["PostRecord", "UserRecord"]
