from .article import ArticleRequest, ArticleResponse
from .category import CategoryRequest, CategoryResponse
from .tag import TagRequest, TagResponse
from .filters import (
    ArticleFilterRequest,
    CategoryFilterRequest,
    FilterRequest,
    TagFilterRequest,
)
from .results import ErrorResult, PagedResponse, ResultModel, ResultModels

__all__ = [
    "ArticleRequest",
    "ArticleResponse",
    "CategoryRequest",
    "CategoryResponse",
    "TagRequest",
    "TagResponse",
    "ArticleFilterRequest",
    "CategoryFilterRequest",
    "FilterRequest",
    "TagFilterRequest",
    "ErrorResult",
    "PagedResponse",
    "ResultModel",
    "ResultModels",
]
