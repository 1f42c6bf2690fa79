"""Application service (use case) for Category operations."""

from home_wiki.application.schemas import CategoryRequest, CategoryResponse
from home_wiki.application.services.entity_service import EntityService
from home_wiki.application.specifications import category_for_filter
from home_wiki.domain.entities import Category
from home_wiki.domain.exceptions import CategoryServiceError


class CategoryService(EntityService[Category, CategoryRequest, CategoryResponse]):
    """Orchestrates category business logic."""

    entity_type = Category
    request_type = CategoryRequest
    response_type = CategoryResponse
    error_type = CategoryServiceError
    filter_specification = staticmethod(category_for_filter)
