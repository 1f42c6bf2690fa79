"""Base domain entity — identity, name and audit metadata."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from home_wiki.domain.constants import DEFAULT_AUDIT_USER


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False, kw_only=True)
class Entity:
    """Persisted record with a store-assigned identity.

    Equality is by identity only: two entities are equal when they share the
    concrete type and the same non-zero ``id``. An unsaved entity (``id == 0``)
    is not equal to anything, itself included.
    """

    name: str
    id: int = 0
    created_by: str = DEFAULT_AUDIT_USER
    created_at: datetime = field(default_factory=utc_now)
    modified_by: str | None = None
    modified_at: datetime | None = None

    @property
    def is_transient(self) -> bool:
        """True until the store has assigned an id."""
        return self.id == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self.is_transient or other.is_transient:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
