"""Filter DTOs for paged listing endpoints."""

from pydantic import BaseModel, Field

from home_wiki.domain.enums import Sorting


class FilterRequest(BaseModel):
    """Common paging, sorting and name-search parameters."""

    page_number: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    sorting: Sorting = Sorting.NONE
    part_name: str = Field("", description="Case-insensitive substring of the name")


class CategoryFilterRequest(FilterRequest):
    pass


class TagFilterRequest(FilterRequest):
    pass


class ArticleFilterRequest(FilterRequest):
    category_ids: set[int] = Field(default_factory=set)
    tag_ids: set[int] = Field(default_factory=set)
