from .entity_service import EntityService
from .article_service import ArticleService
from .category_service import CategoryService
from .tag_service import TagService

__all__ = [
    "EntityService",
    "ArticleService",
    "CategoryService",
    "TagService",
]
