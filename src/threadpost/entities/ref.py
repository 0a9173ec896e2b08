"""References that hold either an identifier or the entity it names.

A reference starts out either unresolved (only the identifier is known, as
when a row is read from the store) or resolved (built from an entity the
caller already has). Resolving fetches the entity once and keeps it; later
calls return the same object without touching the store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Protocol, Self, TypeVar

from threadpost.core.errors import PreconditionError

if TYPE_CHECKING:
    from threadpost.db.adapter import Database

logger = logging.getLogger(__name__)


class Entity(Protocol):
    """What a reference needs from the entity type it points at."""

    @property
    def identity(self) -> str | None: ...

    @classmethod
    def fetch(cls, store: Database, identifier: str) -> Self: ...


E = TypeVar("E", bound=Entity)


class Ref(Generic[E]):
    """Foreign key that is either an identifier or a resolved entity."""

    __slots__ = ("kind", "_identifier", "_entity")

    def __init__(self, kind: type[E], identifier: str, entity: E | None = None) -> None:
        self.kind = kind
        self._identifier = identifier
        self._entity = entity

    @classmethod
    def of(cls, entity: E) -> Ref[E]:
        """Return a reference already resolved to ``entity``."""
        if entity.identity is None:
            raise PreconditionError(
                f"Cannot reference a {type(entity).__name__} that has no identity"
            )
        return cls(type(entity), entity.identity, entity)

    @classmethod
    def to(cls, kind: type[E], value: Any) -> Ref[E] | None:
        """Coerce ``None``, an identifier, an entity or a reference into a reference."""
        if value is None:
            return None
        if isinstance(value, Ref):
            if not issubclass(value.kind, kind):
                raise PreconditionError(
                    f"Expected a reference to {kind.__name__}, got one to {value.kind.__name__}"
                )
            return value
        if isinstance(value, kind):
            return cls.of(value)
        if isinstance(value, str):
            return cls(kind, value)
        raise PreconditionError(
            f"Expected an identifier or {kind.__name__}, got {type(value).__name__}"
        )

    @staticmethod
    def identifier_of(value: Any) -> str | None:
        """Normalise an identifier, entity or reference to its identifier."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, Ref):
            return value.identifier
        return value.identity

    @property
    def identifier(self) -> str:
        """The identifier this reference names, resolved or not."""
        return self._identifier

    @property
    def entity(self) -> E | None:
        """The resolved entity, or ``None`` while unresolved."""
        return self._entity

    def is_resolved(self) -> bool:
        return self._entity is not None

    def value(self) -> E | str:
        """Return the entity when resolved, otherwise the identifier."""
        return self._entity if self._entity is not None else self._identifier

    def resolve(self, store: Database) -> E:
        """Fetch the referenced entity on first call and return the cached one after."""
        if self._entity is None:
            logger.debug("Resolving %s %s", self.kind.__name__, self._identifier)
            self._entity = self.kind.fetch(store, self._identifier)
        return self._entity

    def __repr__(self) -> str:
        state = "resolved" if self.is_resolved() else "unresolved"
        return f"Ref({self.kind.__name__}, {self._identifier!r}, {state})"
