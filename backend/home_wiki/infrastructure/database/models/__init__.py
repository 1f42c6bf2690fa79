from .wiki_models import ArticleModel, CategoryModel, TagModel, article_tag

__all__ = [
    "ArticleModel",
    "CategoryModel",
    "TagModel",
    "article_tag",
]
