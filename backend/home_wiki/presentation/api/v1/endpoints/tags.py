"""Tag endpoints."""

from fastapi import APIRouter, Depends, Query, status

from home_wiki.application.schemas import (
    TagFilterRequest,
    TagRequest,
    TagResponse,
    PagedResponse,
    ResultModel,
    ResultModels,
)
from home_wiki.application.services import TagService
from home_wiki.config import get_settings
from home_wiki.domain.enums import Sorting
from home_wiki.infrastructure.dependencies import get_tag_service
from home_wiki.presentation.api.results import unwrap

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.post(
    "",
    response_model=ResultModel[TagResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_tag(
    data: TagRequest,
    service: TagService = Depends(get_tag_service),
) -> ResultModel:
    return unwrap(await service.create(data))


@router.get("", response_model=ResultModels[TagResponse])
async def list_tags(
    service: TagService = Depends(get_tag_service),
) -> ResultModels:
    """All tags, ordered by name."""
    return unwrap(await service.get(sorting=Sorting.ASCENDING))


@router.get("/page", response_model=ResultModel[PagedResponse[TagResponse]])
async def get_tags_page(
    page_number: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    sorting: Sorting = Sorting.NONE,
    part_name: str = "",
    service: TagService = Depends(get_tag_service),
) -> ResultModel:
    filter_data = TagFilterRequest(
        page_number=page_number,
        page_size=page_size or get_settings().default_page_size,
        sorting=sorting,
        part_name=part_name,
    )
    return unwrap(await service.get_page(filter_data))


@router.get("/{tag_id}", response_model=ResultModel[TagResponse])
async def get_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
) -> ResultModel:
    return unwrap(await service.get_by_id(tag_id))


@router.put("", response_model=ResultModel[TagResponse])
async def update_tag(
    data: TagRequest,
    service: TagService = Depends(get_tag_service),
) -> ResultModel:
    return unwrap(await service.update(data))


@router.delete("/{tag_id}", response_model=ResultModel)
async def delete_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
) -> ResultModel:
    """Delete a tag by ID."""
    return unwrap(await service.delete(tag_id))


@router.post("/remove", response_model=ResultModel)
async def remove_tag(
    data: TagRequest,
    service: TagService = Depends(get_tag_service),
) -> ResultModel:
    """Remove the first tag with the given name."""
    return unwrap(await service.remove(data))
