"""Article endpoints."""

from fastapi import APIRouter, Depends, Query, status

from home_wiki.application.schemas import (
    ArticleFilterRequest,
    ArticleRequest,
    ArticleResponse,
    PagedResponse,
    ResultModel,
    ResultModels,
)
from home_wiki.application.services import ArticleService
from home_wiki.config import get_settings
from home_wiki.domain.enums import Sorting
from home_wiki.infrastructure.dependencies import get_article_service
from home_wiki.presentation.api.results import unwrap

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.post(
    "",
    response_model=ResultModel[ArticleResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    data: ArticleRequest,
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    """Create a new article."""
    return unwrap(await service.create(data))


@router.get("", response_model=ResultModels[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> ResultModels:
    """All articles, ordered by name."""
    return unwrap(await service.get(sorting=Sorting.ASCENDING))


@router.get("/page", response_model=ResultModel[PagedResponse[ArticleResponse]])
async def get_articles_page(
    page_number: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    sorting: Sorting = Sorting.NONE,
    part_name: str = "",
    category_ids: list[int] = Query(default=[]),
    tag_ids: list[int] = Query(default=[]),
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    """Filtered, paged article list with category and tags loaded."""
    filter_data = ArticleFilterRequest(
        page_number=page_number,
        page_size=page_size or get_settings().default_page_size,
        sorting=sorting,
        part_name=part_name,
        category_ids=set(category_ids),
        tag_ids=set(tag_ids),
    )
    return unwrap(await service.get_page(filter_data))


@router.get(
    "/by-category/{category_id}",
    response_model=ResultModel[PagedResponse[ArticleResponse]],
)
async def get_articles_by_category(
    category_id: int,
    page_number: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    page_size = page_size or get_settings().default_page_size
    return unwrap(await service.get_by_category(category_id, page_number, page_size))


@router.get("/{article_id}", response_model=ResultModel[ArticleResponse])
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    """Retrieve a single article by ID, with its category and tags."""
    return unwrap(await service.get_by_id(article_id))


@router.put("", response_model=ResultModel[ArticleResponse])
async def update_article(
    data: ArticleRequest,
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    """Replace an existing article."""
    return unwrap(await service.update(data))


@router.delete("/{article_id}", response_model=ResultModel)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    """Delete an article by ID."""
    return unwrap(await service.delete(article_id))


@router.post("/remove", response_model=ResultModel)
async def remove_article(
    data: ArticleRequest,
    service: ArticleService = Depends(get_article_service),
) -> ResultModel:
    """Remove the first article with the given name."""
    return unwrap(await service.remove(data))
