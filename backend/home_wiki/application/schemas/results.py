"""Result envelopes returned by the domain services."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from home_wiki.domain.enums import ErrorCode
from home_wiki.domain.paging import PagedList

T = TypeVar("T")


class ErrorResult(BaseModel):
    message: str
    code: ErrorCode = ErrorCode.UNEXPECTED

    def __str__(self) -> str:
        return f"Error code: {self.code.name}, message: {self.message}."


class ResultModel(BaseModel, Generic[T]):
    """Envelope for single-item operations."""

    success: bool
    message: str
    code: int
    data: T | None = None
    error: ErrorResult | None = None


class ResultModels(BaseModel, Generic[T]):
    """Envelope for collection operations."""

    success: bool
    message: str
    code: int
    data: list[T] = Field(default_factory=list)
    error: ErrorResult | None = None


class PagedResponse(BaseModel, Generic[T]):
    """Serializable form of :class:`~home_wiki.domain.paging.PagedList`."""

    page_number: int
    page_size: int
    total_item_count: int
    page_count: int
    has_previous_page: bool
    has_next_page: bool
    items: list[T] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: PagedList[T]) -> "PagedResponse[T]":
        return cls(
            page_number=page.page_number,
            page_size=page.page_size,
            total_item_count=page.total_item_count,
            page_count=page.page_count,
            has_previous_page=page.has_previous_page,
            has_next_page=page.has_next_page,
            items=list(page.items),
        )
