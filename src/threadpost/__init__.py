"""Threaded posts with lazily resolved author, reply and repost relations."""

from .core.errors import PreconditionError, ThreadPostError
from .db.adapter import Database
from .entities import Post, Ref, User

__all__ = [
    "Database",
    "Post",
    "PreconditionError",
    "Ref",
    "ThreadPostError",
    "User",
]
