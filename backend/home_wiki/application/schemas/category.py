"""Pydantic DTOs for the Category feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from home_wiki.domain.constants import AUDIT_USER_MAX_LENGTH, DEFAULT_AUDIT_USER, NAME_MAX_LENGTH


class CategoryRequest(BaseModel):
    """Schema for creating or replacing a category."""

    id: int = Field(0, ge=0)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Kitchen"])
    created_by: str = Field(DEFAULT_AUDIT_USER, max_length=AUDIT_USER_MAX_LENGTH)
    modified_by: str | None = Field(None, max_length=AUDIT_USER_MAX_LENGTH)


class CategoryResponse(BaseModel):
    id: int
    name: str
    created_by: str
    created_at: datetime
    modified_by: str | None = None
    modified_at: datetime | None = None

    model_config = {"from_attributes": True}
