"""Category endpoints."""

from fastapi import APIRouter, Depends, Query, status

from home_wiki.application.schemas import (
    CategoryFilterRequest,
    CategoryRequest,
    CategoryResponse,
    PagedResponse,
    ResultModel,
    ResultModels,
)
from home_wiki.application.services import CategoryService
from home_wiki.config import get_settings
from home_wiki.domain.enums import Sorting
from home_wiki.infrastructure.dependencies import get_category_service
from home_wiki.presentation.api.results import unwrap

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.post(
    "",
    response_model=ResultModel[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    data: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
) -> ResultModel:
    return unwrap(await service.create(data))


@router.get("", response_model=ResultModels[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> ResultModels:
    """All categories, ordered by name."""
    return unwrap(await service.get(sorting=Sorting.ASCENDING))


@router.get("/page", response_model=ResultModel[PagedResponse[CategoryResponse]])
async def get_categories_page(
    page_number: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    sorting: Sorting = Sorting.NONE,
    part_name: str = "",
    service: CategoryService = Depends(get_category_service),
) -> ResultModel:
    filter_data = CategoryFilterRequest(
        page_number=page_number,
        page_size=page_size or get_settings().default_page_size,
        sorting=sorting,
        part_name=part_name,
    )
    return unwrap(await service.get_page(filter_data))


@router.get("/{category_id}", response_model=ResultModel[CategoryResponse])
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> ResultModel:
    return unwrap(await service.get_by_id(category_id))


@router.put("", response_model=ResultModel[CategoryResponse])
async def update_category(
    data: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
) -> ResultModel:
    return unwrap(await service.update(data))


@router.delete("/{category_id}", response_model=ResultModel)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> ResultModel:
    """Delete a category by ID; its articles are deleted with it."""
    return unwrap(await service.delete(category_id))


@router.post("/remove", response_model=ResultModel)
async def remove_category(
    data: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
) -> ResultModel:
    """Remove the first category with the given name."""
    return unwrap(await service.remove(data))
