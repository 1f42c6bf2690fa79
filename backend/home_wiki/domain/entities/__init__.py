from .base import Entity, utc_now
from .article import Article
from .category import Category
from .tag import Tag

__all__ = [
    "Entity",
    "utc_now",
    "Article",
    "Category",
    "Tag",
]
