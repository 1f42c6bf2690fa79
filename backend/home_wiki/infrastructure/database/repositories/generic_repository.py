"""Generic repository implementation backed by SQLAlchemy async sessions."""

import asyncio
import functools
import inspect
import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from home_wiki.application.interfaces import (
    GenericRepository,
    Predicate,
    SortOrder,
    Specification,
)
from home_wiki.domain.entities import Entity
from home_wiki.domain.exceptions import EntityNotFoundError, RepositoryError
from home_wiki.domain.paging import PagedList
from home_wiki.infrastructure.database.mappers import EntityMapper
from home_wiki.infrastructure.database.specification_evaluator import (
    apply_ordering,
    get_query,
)

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)

# Public operation → wording used in RepositoryError messages.
_OPERATIONS: dict[str, str] = {
    "get": "getting entities",
    "first_or_default": "getting the first entity",
    "first_or_default_by_id": "getting an entity by id",
    "any": "checking for entities",
    "add": "adding an entity",
    "update": "updating an entity",
    "remove": "removing an entity",
    "remove_entity": "removing an entity",
    "find": "finding an entity",
    "get_paged": "getting a page of entities",
    "get_paged_by_specification": "getting a page of entities by specification",
    "list": "listing entities by specification",
}


def repository_errors(cls: type) -> type:
    """Wrap every public operation of ``cls`` so failures surface as RepositoryError."""

    def wrap(name: str, method: Any) -> Any:
        operation = _OPERATIONS.get(name, name.replace("_", " "))

        @functools.wraps(method)
        async def wrapper(self, *args, **kwargs):
            try:
                return await method(self, *args, **kwargs)
            except RepositoryError:
                raise
            except Exception as exc:
                logger.debug("%s failed while %s: %r", self.entity_name, operation, exc)
                raise RepositoryError(self.entity_name, operation) from exc

        return wrapper

    for name, member in list(vars(cls).items()):
        if not name.startswith("_") and inspect.iscoroutinefunction(member):
            setattr(cls, name, wrap(name, member))
    return cls


def _clamp(value: int) -> int:
    return max(value, 1)


@repository_errors
class SQLAlchemyGenericRepository(GenericRepository[EntityT]):
    """Implements the GenericRepository port for one mapped entity type.

    Every operation runs in its own session from ``session_factory``; the
    factory must be created with ``expire_on_commit=False`` so that mapped
    rows stay readable after commit.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        mapper: EntityMapper,
    ):
        self._session_factory = session_factory
        self._mapper = mapper

    @property
    def model(self) -> type:
        return self._mapper.model

    @property
    def entity_name(self) -> str:
        return self._mapper.entity_name

    # ── Query helpers ────────────────────────────────────────────────

    def _select(self, predicate: Predicate | None = None) -> Select:
        query = select(self.model)
        if predicate is not None:
            query = query.where(predicate(self.model))
        return query

    def _count_query(self, predicate: Predicate | None) -> Select:
        query = select(func.count()).select_from(self.model)
        if predicate is not None:
            query = query.where(predicate(self.model))
        return query

    def _to_entities(self, models: Sequence[Any]) -> list[EntityT]:
        return [self._mapper.to_entity(m) for m in models]

    async def _scalar(self, query: Select) -> Any:
        async with self._session_factory() as session:
            return await session.scalar(query)

    async def _all(self, query: Select) -> list[EntityT]:
        async with self._session_factory() as session:
            result = await session.scalars(query)
            return self._to_entities(result.all())

    async def _page(
        self,
        page_number: int,
        page_size: int,
        count_query: Select,
        slice_query: Select,
    ) -> PagedList[EntityT]:
        page_number, page_size = _clamp(page_number), _clamp(page_size)
        slice_query = slice_query.offset((page_number - 1) * page_size).limit(page_size)
        logger.debug("Paging %s: page=%s size=%s", self.entity_name, page_number, page_size)

        count_task = asyncio.ensure_future(self._scalar(count_query))
        slice_task = asyncio.ensure_future(self._all(slice_query))
        try:
            total, items = await asyncio.gather(count_task, slice_task)
        except BaseException:
            # the surviving query must not keep its session open
            for task in (count_task, slice_task):
                task.cancel()
            await asyncio.gather(count_task, slice_task, return_exceptions=True)
            raise
        return PagedList(
            page_number=page_number,
            page_size=page_size,
            total_item_count=total or 0,
            items=tuple(items),
        )

    # ── Reads ────────────────────────────────────────────────────────

    async def get(
        self,
        predicate: Predicate | None = None,
        order_by: SortOrder | None = None,
    ) -> list[EntityT]:
        return await self._all(apply_ordering(self._select(predicate), self.model, order_by))

    async def first_or_default(self, predicate: Predicate | None = None) -> EntityT | None:
        async with self._session_factory() as session:
            model = await session.scalar(self._select(predicate).limit(1))
            return self._mapper.to_entity(model) if model is not None else None

    async def first_or_default_by_id(
        self, entity_id: int, specification: Specification[EntityT]
    ) -> EntityT | None:
        query = get_query(select(self.model), self.model, specification)
        query = query.where(self.model.id == entity_id).limit(1)
        async with self._session_factory() as session:
            model = await session.scalar(query)
            return self._mapper.to_entity(model) if model is not None else None

    async def any(self, predicate: Predicate | None = None) -> bool:
        inner = select(self.model.id)
        if predicate is not None:
            inner = inner.where(predicate(self.model))
        return bool(await self._scalar(select(inner.exists())))

    async def find(self, entity_id: int) -> EntityT | None:
        async with self._session_factory() as session:
            model = await session.get(self.model, entity_id)
            return self._mapper.to_entity(model) if model is not None else None

    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        predicate: Predicate | None = None,
        order_by: SortOrder | None = None,
    ) -> PagedList[EntityT]:
        slice_query = apply_ordering(self._select(predicate), self.model, order_by)
        if order_by is None:
            slice_query = slice_query.order_by(self.model.id)
        return await self._page(page_number, page_size, self._count_query(predicate), slice_query)

    async def get_paged_by_specification(
        self,
        page_number: int,
        page_size: int,
        specification: Specification[EntityT],
    ) -> PagedList[EntityT]:
        slice_query = get_query(select(self.model), self.model, specification)
        if specification.sorting is None:
            slice_query = slice_query.order_by(self.model.id)
        return await self._page(
            page_number,
            page_size,
            self._count_query(specification.criteria),
            slice_query,
        )

    # ── Writes ───────────────────────────────────────────────────────

    async def add(self, entity: EntityT) -> EntityT:
        async with self._session_factory() as session:
            model = await self._mapper.to_model(session, entity)
            session.add(model)
            await session.commit()
            logger.debug("Added %s with ID: %s", self.entity_name, model.id)
            return self._mapper.to_entity(model)

    async def update(self, entity: EntityT) -> EntityT:
        async with self._session_factory() as session:
            model = await session.get(
                self.model, entity.id, options=self._mapper.update_options()
            )
            if model is None:
                raise EntityNotFoundError(self.entity_name, entity.id)
            await self._mapper.copy_to_model(session, entity, model)
            await session.commit()
            logger.debug("Updated %s with ID: %s", self.entity_name, model.id)
            return self._mapper.to_entity(model)

    async def remove(self, predicate: Predicate | None = None) -> None:
        """Remove the first match only; other matching rows stay in place."""
        async with self._session_factory() as session:
            model = await session.scalar(self._select(predicate).order_by(self.model.id).limit(1))
            if model is None:
                return
            await session.delete(model)
            await session.commit()
            logger.debug("Removed %s with ID: %s", self.entity_name, model.id)

    async def remove_entity(self, entity: EntityT | None) -> None:
        if entity is None or entity.is_transient:
            return
        async with self._session_factory() as session:
            model = await session.get(self.model, entity.id)
            if model is None:
                return
            await session.delete(model)
            await session.commit()
            logger.debug("Removed %s with ID: %s", self.entity_name, entity.id)

    # Kept last: once defined, ``list`` in this class body names the method.
    async def list(self, specification: Specification[EntityT]) -> list[EntityT]:
        return await self._all(get_query(select(self.model), self.model, specification))
