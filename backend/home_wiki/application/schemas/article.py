"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from home_wiki.application.schemas.category import CategoryResponse
from home_wiki.application.schemas.tag import TagResponse
from home_wiki.domain.constants import (
    AUDIT_USER_MAX_LENGTH,
    DEFAULT_AUDIT_USER,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
)


class ArticleRequest(BaseModel):
    """Schema for creating or replacing an article. ``id`` is ignored on create."""

    id: int = Field(0, ge=0)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Sourdough starter"])
    description: str = Field(..., max_length=DESCRIPTION_MAX_LENGTH, examples=["Flour, water, patience."])
    category_id: int = Field(..., ge=1)
    tag_ids: set[int] = Field(default_factory=set)
    created_by: str = Field(DEFAULT_AUDIT_USER, max_length=AUDIT_USER_MAX_LENGTH)
    modified_by: str | None = Field(None, max_length=AUDIT_USER_MAX_LENGTH)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    description: str
    category_id: int
    category: CategoryResponse | None = None
    tags: list[TagResponse] = Field(default_factory=list)
    created_by: str
    created_at: datetime
    modified_by: str | None = None
    modified_at: datetime | None = None

    model_config = {"from_attributes": True}
