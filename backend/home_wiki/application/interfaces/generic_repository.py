"""Generic repository port — one data-access contract reused across entity types."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from home_wiki.application.interfaces.specification import (
    Predicate,
    SortOrder,
    Specification,
)
from home_wiki.domain.entities import Entity
from home_wiki.domain.paging import PagedList

EntityT = TypeVar("EntityT", bound=Entity)


class GenericRepository(ABC, Generic[EntityT]):
    """Port for entity persistence — implemented in the infrastructure layer.

    Predicates and sort keys are applied to :attr:`model`. Every returned
    entity is detached: mutating it never touches the store.
    """

    @property
    @abstractmethod
    def model(self) -> type:
        """The queryable shape that predicates and sort keys are applied to."""
        ...

    @property
    @abstractmethod
    def entity_name(self) -> str:
        ...

    @abstractmethod
    async def get(
        self,
        predicate: Predicate | None = None,
        order_by: SortOrder | None = None,
    ) -> list[EntityT]:
        """All matching entities, in store order unless ``order_by`` is given."""
        ...

    @abstractmethod
    async def first_or_default(self, predicate: Predicate | None = None) -> EntityT | None:
        """First match, or None when nothing matches."""
        ...

    @abstractmethod
    async def first_or_default_by_id(
        self, entity_id: int, specification: Specification[EntityT]
    ) -> EntityT | None:
        """Entity with the given id, loaded through ``specification``."""
        ...

    @abstractmethod
    async def any(self, predicate: Predicate | None = None) -> bool:
        ...

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """Persist a new entity and return it with the store-assigned id."""
        ...

    @abstractmethod
    async def update(self, entity: EntityT) -> EntityT:
        """Replace the stored record with the same id. Raises when it is missing."""
        ...

    @abstractmethod
    async def remove(self, predicate: Predicate | None = None) -> None:
        """Remove the first match only — at most one row per call."""
        ...

    @abstractmethod
    async def remove_entity(self, entity: EntityT | None) -> None:
        """Remove the stored row of ``entity``; no-op for None or unsaved entities."""
        ...

    @abstractmethod
    async def find(self, entity_id: int) -> EntityT | None:
        ...

    @abstractmethod
    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        predicate: Predicate | None = None,
        order_by: SortOrder | None = None,
    ) -> PagedList[EntityT]:
        ...

    @abstractmethod
    async def get_paged_by_specification(
        self,
        page_number: int,
        page_size: int,
        specification: Specification[EntityT],
    ) -> PagedList[EntityT]:
        ...

    @abstractmethod
    async def list(self, specification: Specification[EntityT]) -> list[EntityT]:
        """All matches of ``specification`` with its includes loaded."""
        ...
