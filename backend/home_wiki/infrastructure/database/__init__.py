from .base import Base
from .session import engine, async_session_factory
from .models import ArticleModel, CategoryModel, TagModel, article_tag

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "ArticleModel",
    "CategoryModel",
    "TagModel",
    "article_tag",
]
