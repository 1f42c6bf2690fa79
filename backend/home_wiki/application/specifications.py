"""Ready-made specifications and filter → predicate conversions."""

import functools
import operator

from home_wiki.application.interfaces.specification import (
    Predicate,
    SortOrder,
    Specification,
)
from home_wiki.application.schemas.filters import ArticleFilterRequest, FilterRequest
from home_wiki.domain.entities import Article, Category, Tag
from home_wiki.domain.enums import Sorting

ARTICLE_RELATIONS = ("category", "tags")


def _all_of(conditions: list[Predicate]) -> Predicate | None:
    if not conditions:
        return None
    return lambda a: functools.reduce(operator.and_, (condition(a) for condition in conditions))


def name_contains(part_name: str) -> Predicate:
    return lambda e: e.name.icontains(part_name, autoescape=True)


def filter_predicate(filter_data: FilterRequest) -> Predicate | None:
    """Case-insensitive name search; None when the filter is empty."""
    if not filter_data.part_name:
        return None
    return name_contains(filter_data.part_name)


def article_filter_predicate(filter_data: ArticleFilterRequest) -> Predicate | None:
    conditions: list[Predicate] = []

    if filter_data.part_name:
        conditions.append(name_contains(filter_data.part_name))

    if filter_data.category_ids:
        category_ids = sorted(filter_data.category_ids)
        conditions.append(lambda a: a.category_id.in_(category_ids))

    if filter_data.tag_ids:
        tag_ids = sorted(filter_data.tag_ids)
        conditions.append(
            lambda a: functools.reduce(operator.or_, (a.tags.any(id=tag_id) for tag_id in tag_ids))
        )

    return _all_of(conditions)


def sort_by_name(sorting: Sorting) -> SortOrder | None:
    if sorting is Sorting.NONE:
        return None
    return SortOrder.by("name", descending=sorting is Sorting.DESCENDING)


def entity_details(*includes: str) -> Specification:
    """Includes only; used to load one entity with its relations."""
    return Specification(includes=includes)


def articles_by_category(category_id: int) -> Specification[Article]:
    return Specification(
        criteria=lambda a: a.category_id == category_id,
        includes=ARTICLE_RELATIONS,
        sorting=SortOrder.by("name"),
    )


def articles_with_category_and_tags() -> Specification[Article]:
    return Specification(includes=ARTICLE_RELATIONS, sorting=SortOrder.by("name"))


def article_for_filter(filter_data: ArticleFilterRequest) -> Specification[Article]:
    return Specification(
        criteria=article_filter_predicate(filter_data),
        includes=ARTICLE_RELATIONS,
        sorting=sort_by_name(filter_data.sorting),
    )


def category_for_filter(filter_data: FilterRequest) -> Specification[Category]:
    return Specification(
        criteria=filter_predicate(filter_data),
        sorting=sort_by_name(filter_data.sorting),
    )


def tag_for_filter(filter_data: FilterRequest) -> Specification[Tag]:
    return Specification(
        criteria=filter_predicate(filter_data),
        sorting=sort_by_name(filter_data.sorting),
    )
