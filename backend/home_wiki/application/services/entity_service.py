"""Application service base — CRUD and query use cases shared by every wiki entity."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from http import HTTPStatus
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from home_wiki.application.expression_translator import (
    TranslatedPredicate,
    translate_ordering,
    translate_predicate,
)
from home_wiki.application.interfaces.generic_repository import GenericRepository
from home_wiki.application.interfaces.specification import (
    Predicate,
    SortOrder,
    Specification,
)
from home_wiki.application.schemas.filters import FilterRequest
from home_wiki.application.schemas.results import (
    ErrorResult,
    PagedResponse,
    ResultModel,
    ResultModels,
)
from home_wiki.application.specifications import entity_details
from home_wiki.domain.entities import Entity, utc_now
from home_wiki.domain.enums import ErrorCode, Sorting
from home_wiki.domain.exceptions import RepositoryError, ServiceError
from home_wiki.domain.paging import PagedList

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)
RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class EntityService(Generic[EntityT, RequestT, ResponseT]):
    """Orchestrates entity use cases on top of the generic repository port.

    Predicates handed to a service are written against its request schema and
    translated onto the repository's shape before they reach the store.
    Every unexpected failure is re-raised as :attr:`error_type`; a missing
    record is reported as a 404 envelope, never as an exception.
    """

    entity_type: ClassVar[type[Entity]]
    request_type: ClassVar[type[BaseModel]]
    response_type: ClassVar[type[BaseModel]]
    error_type: ClassVar[type[ServiceError]] = ServiceError
    detail_includes: ClassVar[tuple[str, ...]] = ()
    filter_specification: ClassVar[Callable[[Any], Specification]]

    def __init__(self, repository: GenericRepository[EntityT]):
        self._repository = repository

    @property
    def label(self) -> str:
        return self.entity_type.__name__

    # ── Mapping ──────────────────────────────────────────────────────

    def _entity_fields(self, request: RequestT) -> dict[str, Any]:
        """Request fields copied onto the entity by create and update."""
        return {"name": request.name}

    def _new_entity(self, request: RequestT) -> EntityT:
        return self.entity_type(
            **self._entity_fields(request),
            created_by=request.created_by,
            created_at=utc_now(),
        )

    def _replacement(self, request: RequestT, existing: EntityT) -> EntityT:
        """Full replacement record; keeps the original creation audit fields."""
        return self.entity_type(
            **self._entity_fields(request),
            id=existing.id,
            created_by=existing.created_by,
            created_at=existing.created_at,
            modified_by=request.modified_by,
            modified_at=utc_now(),
        )

    def _to_response(self, entity: EntityT) -> ResponseT:
        return self.response_type.model_validate(entity, from_attributes=True)

    # ── Translation ──────────────────────────────────────────────────

    def _translate(self, predicate: Predicate | None) -> TranslatedPredicate | None:
        return translate_predicate(predicate, self.request_type, self._repository.model)

    def _ordering(self, sort_field: str, sorting: Sorting) -> SortOrder | None:
        return translate_ordering(sort_field, sorting, self.request_type, self._repository.model)

    def _by_id(self, entity_id: int) -> TranslatedPredicate:
        return self._translate(lambda r: r.id == entity_id)

    # ── Envelopes ────────────────────────────────────────────────────

    @contextmanager
    def _failure(self, message: str) -> Iterator[None]:
        try:
            yield
        except Exception as exc:
            logger.exception(message)
            raise self.error_type(f"{message}: {exc}") from exc

    def _ok(self, message: str, data: Any = None, code: int = HTTPStatus.OK) -> ResultModel:
        return ResultModel(success=True, message=message, code=code, data=data)

    def _not_found(self, message: str) -> ResultModel:
        logger.warning(message)
        return ResultModel(
            success=False,
            message=message,
            code=HTTPStatus.NOT_FOUND,
            error=ErrorResult(message="Not found", code=ErrorCode.NOT_FOUND),
        )

    def _paged(self, message: str, page: PagedList[EntityT]) -> ResultModel:
        return self._ok(message, PagedResponse.from_page(page.map(self._to_response)))

    # ── Use cases ────────────────────────────────────────────────────

    async def create(self, request: RequestT) -> ResultModel:
        logger.info("Creating %s: %s", self.label, request.name)
        with self._failure(f"Error creating {self.label}"):
            try:
                created = await self._repository.add(self._new_entity(request))
            except RepositoryError as exc:
                if not exc.not_found:
                    raise
                return self._not_found(str(exc.__cause__))
        logger.info("%s created with ID: %s", self.label, created.id)
        return self._ok(
            f"{self.label} created successfully",
            self._to_response(created),
            code=HTTPStatus.CREATED,
        )

    async def get_by_id(self, entity_id: int) -> ResultModel:
        logger.info("Getting %s by ID: %s", self.label, entity_id)
        with self._failure(f"Error retrieving {self.label} by ID"):
            entity = await self._repository.first_or_default_by_id(
                entity_id, entity_details(*self.detail_includes)
            )
        if entity is None:
            return self._not_found(f"{self.label} with ID {entity_id} not found.")
        return self._ok(f"{self.label} retrieved successfully", self._to_response(entity))

    async def get(
        self,
        predicate: Predicate | None = None,
        sort_field: str = "name",
        sorting: Sorting = Sorting.NONE,
    ) -> ResultModels:
        logger.info("Retrieving %s list with filters, %s.", self.label, sorting.description)
        with self._failure(f"Error retrieving {self.label} list"):
            entities = await self._repository.get(
                self._translate(predicate), self._ordering(sort_field, sorting)
            )
        return ResultModels(
            success=True,
            message=f"{self.label} list retrieved successfully",
            code=HTTPStatus.OK,
            data=[self._to_response(e) for e in entities],
        )

    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        predicate: Predicate | None = None,
        sort_field: str = "name",
        sorting: Sorting = Sorting.NONE,
    ) -> ResultModel:
        logger.info(
            "Fetching paged %s list. Page: %s, Size: %s, %s",
            self.label,
            page_number,
            page_size,
            sorting.description,
        )
        with self._failure(f"Error retrieving paged {self.label} list"):
            page = await self._repository.get_paged(
                page_number,
                page_size,
                self._translate(predicate),
                self._ordering(sort_field, sorting),
            )
        return self._paged(f"Paged {self.label} list retrieved successfully", page)

    async def get_paged_by_specification(
        self,
        page_number: int,
        page_size: int,
        specification: Specification[EntityT],
    ) -> ResultModel:
        logger.info(
            "Fetching paged %s list via specification. Page: %s, Size: %s",
            self.label,
            page_number,
            page_size,
        )
        with self._failure(f"Error retrieving paged {self.label} list by specification"):
            page = await self._repository.get_paged_by_specification(
                page_number, page_size, specification
            )
        return self._paged(f"Paged {self.label} list retrieved successfully", page)

    async def get_page(self, filter_data: FilterRequest) -> ResultModel:
        """Paged listing driven by a filter DTO."""
        return await self.get_paged_by_specification(
            filter_data.page_number,
            filter_data.page_size,
            self.filter_specification(filter_data),
        )

    async def update(self, request: RequestT) -> ResultModel:
        logger.info("Updating %s ID: %s", self.label, request.id)
        with self._failure(f"Error updating {self.label}"):
            existing = await self._repository.find(request.id)
            if existing is None:
                return self._not_found(f"{self.label} with ID {request.id} not found.")
            try:
                updated = await self._repository.update(self._replacement(request, existing))
            except RepositoryError as exc:
                # removed concurrently, or a referenced record is missing
                if not exc.not_found:
                    raise
                return self._not_found(str(exc.__cause__))
        return self._ok(f"{self.label} updated successfully", self._to_response(updated))

    async def delete(self, entity_id: int) -> ResultModel:
        logger.info("Deleting %s ID: %s", self.label, entity_id)
        with self._failure(f"Error deleting {self.label} ID: {entity_id}"):
            if not await self._repository.any(self._by_id(entity_id)):
                return self._not_found(f"{self.label} with ID: {entity_id} not exists")
            await self._repository.remove(self._by_id(entity_id))
        return self._ok(f"{self.label} deleted successfully")

    async def remove(self, request: RequestT) -> ResultModel:
        """Remove the first stored record whose name matches the request."""
        logger.info("Removing %s: %s", self.label, request.name)
        name = request.name
        with self._failure(f"Error removing {self.label}"):
            await self._repository.remove(self._translate(lambda r: r.name == name))
        return self._ok(f"{self.label} removed successfully")

    async def exists(self, entity_id: int) -> bool:
        with self._failure(f"Error checking {self.label} existence for ID: {entity_id}"):
            return await self._repository.any(self._by_id(entity_id))

    async def any(self, predicate: Predicate | None = None) -> bool:
        with self._failure(f"Error checking {self.label} existence"):
            return await self._repository.any(self._translate(predicate))

    async def first_or_default(self, predicate: Predicate | None = None) -> ResultModel:
        with self._failure(f"Error retrieving first {self.label}"):
            entity = await self._repository.first_or_default(self._translate(predicate))
        if entity is None:
            return self._not_found(f"No matching {self.label} found")
        return self._ok(f"{self.label} retrieved successfully", self._to_response(entity))

    async def list_by_specification(self, specification: Specification[EntityT]) -> ResultModels:
        logger.info("Retrieving %s list via specification.", self.label)
        with self._failure(f"Error retrieving {self.label} list by specification"):
            entities = await self._repository.list(specification)
        return ResultModels(
            success=True,
            message=f"{self.label} list retrieved via specification",
            code=HTTPStatus.OK,
            data=[self._to_response(e) for e in entities],
        )
