"""Paging value object."""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """A bounded slice of a larger result set plus its pagination metadata."""

    page_number: int
    page_size: int
    total_item_count: int
    items: Sequence[T] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_item_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.page_count

    def map(self, projection: Callable[[T], U]) -> "PagedList[U]":
        """Return the same page with every item projected."""
        return PagedList(
            page_number=self.page_number,
            page_size=self.page_size,
            total_item_count=self.total_item_count,
            items=tuple(projection(item) for item in self.items),
        )

    @classmethod
    def empty(cls) -> "PagedList[T]":
        return cls(page_number=0, page_size=0, total_item_count=0, items=())
