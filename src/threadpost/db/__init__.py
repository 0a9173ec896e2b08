"""Database configuration and the persistence adapter."""

from .adapter import Database
from .session import Base, create_tables, drop_tables, engine, get_db

__all__ = ["Base", "Database", "create_tables", "drop_tables", "engine", "get_db"]
