"""Entities with lazily resolved references."""

from .post import Post
from .ref import Ref
from .user import User

__all__ = ["Post", "Ref", "User"]
