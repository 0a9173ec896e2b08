"""Persistence adapter used by the entities.

The adapter speaks SQLAlchemy Core against a table and keeps three promises
to its callers: queries are always parameterized, "no rows" is an empty
list rather than an error, and a write the store rejects (constraint or data
violation) comes back as a failed result while connectivity and statement
errors propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import Table, insert, select
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.sql import ColumnElement, Executable

from threadpost.core.errors import PreconditionError

logger = logging.getLogger(__name__)

# Write failures the store reports about the data itself rather than the connection.
NON_FATAL_WRITE_ERRORS = (IntegrityError, DataError)


class Database:
    """Thin adapter around a SQLAlchemy engine.

    Every write runs in its own transaction; loads use a short-lived
    connection. Transaction and pooling policy belong to the engine.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the adapter with an engine."""
        self.engine = engine

    def load(
        self,
        table: Table,
        filter: Mapping[str, Any],
        order_by: Sequence[ColumnElement[Any]] | None = None,
    ) -> list[RowMapping]:
        """Return every row of ``table`` matching the equality ``filter``.

        Args:
            table: Table to read from.
            filter: Column name to value; ``None`` matches SQL NULL.
            order_by: Optional ordering clauses.

        Raises:
            PreconditionError: If ``filter`` is not a mapping or names a column
                the table does not have.
        """
        if not isinstance(filter, Mapping):
            raise PreconditionError(
                f"Filter for {table.name} must be a mapping, got {type(filter).__name__}"
            )

        stmt = select(table)
        for column_name, value in filter.items():
            column = table.c.get(column_name)
            if column is None:
                raise PreconditionError(f"Table {table.name} has no column {column_name!r}")
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        if order_by:
            stmt = stmt.order_by(*order_by)

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        logger.debug("Loaded %d row(s) from %s", len(rows), table.name)
        return list(rows)

    def execute(self, statement: Executable, params: Mapping[str, Any] | None = None) -> bool:
        """Run a single write statement and report whether the store accepted it."""
        try:
            with self.engine.begin() as conn:
                conn.execute(statement, dict(params) if params else None)
        except NON_FATAL_WRITE_ERRORS as exc:
            logger.warning("Store rejected write: %s", exc.orig)
            return False
        return True

    def insert(self, table: Table, values: Mapping[str, Any]) -> dict[str, Any] | None:
        """Insert one row and return its persisted values.

        The returned mapping includes the values the table generates itself
        (such as the primary key and creation timestamp), or ``None`` if the
        store rejected the row.
        """
        try:
            with self.engine.begin() as conn:
                result = conn.execute(insert(table), dict(values))
                persisted = dict(result.last_inserted_params())
        except NON_FATAL_WRITE_ERRORS as exc:
            logger.warning("Store rejected insert into %s: %s", table.name, exc.orig)
            return None
        return persisted
