"""Application service (use case) for Article operations."""

import logging
from typing import Any

from home_wiki.application.schemas import ArticleRequest, ArticleResponse
from home_wiki.application.schemas.results import ResultModel
from home_wiki.application.services.entity_service import EntityService
from home_wiki.application.specifications import (
    ARTICLE_RELATIONS,
    article_for_filter,
    articles_by_category,
)
from home_wiki.domain.entities import Article
from home_wiki.domain.exceptions import ArticleServiceError

logger = logging.getLogger(__name__)


class ArticleService(EntityService[Article, ArticleRequest, ArticleResponse]):
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    entity_type = Article
    request_type = ArticleRequest
    response_type = ArticleResponse
    error_type = ArticleServiceError
    detail_includes = ARTICLE_RELATIONS
    filter_specification = staticmethod(article_for_filter)

    def _entity_fields(self, request: ArticleRequest) -> dict[str, Any]:
        return {
            "name": request.name,
            "description": request.description,
            "category_id": request.category_id,
            "tag_ids": set(request.tag_ids),
        }

    async def get_by_category(
        self, category_id: int, page_number: int, page_size: int
    ) -> ResultModel:
        """Name-ordered page of the articles in one category, with relations loaded."""
        logger.info("Fetching articles of category %s", category_id)
        return await self.get_paged_by_specification(
            page_number, page_size, articles_by_category(category_id)
        )
