"""Unit tests for domain entities and the paging value object."""

import math

import pytest

from home_wiki.domain.entities import Article, Category, Tag
from home_wiki.domain.paging import PagedList


def test_unsaved_entity_is_not_equal_to_itself():
    category = Category(name="Kitchen")
    assert category.is_transient
    assert not (category == category)


def test_saved_entities_compare_by_type_and_id():
    assert Category(id=3, name="Kitchen") == Category(id=3, name="Renamed")
    assert Category(id=3, name="Kitchen") != Category(id=4, name="Kitchen")
    assert Category(id=3, name="Kitchen") != Tag(id=3, name="Kitchen")


def test_entity_hash_follows_identity():
    tags = {Tag(id=1, name="a"), Tag(id=1, name="b"), Tag(id=2, name="c")}
    assert len(tags) == 2


def test_article_defaults():
    article = Article(name="Recipe1", description="...", category_id=1)
    assert article.tags == []
    assert article.tag_ids == set()
    assert article.category is None
    assert article.created_by == "system"
    assert article.created_at.tzinfo is not None


@pytest.mark.parametrize("total,size", [(0, 10), (1, 10), (10, 10), (11, 10), (25, 7)])
def test_page_count_is_ceiling(total: int, size: int):
    page = PagedList(page_number=1, page_size=size, total_item_count=total)
    assert page.page_count == math.ceil(total / size)


def test_first_page_has_no_previous_and_last_page_has_no_next():
    first = PagedList(page_number=1, page_size=5, total_item_count=12)
    last = PagedList(page_number=3, page_size=5, total_item_count=12)

    assert not first.has_previous_page
    assert first.has_next_page
    assert last.has_previous_page
    assert not last.has_next_page


def test_map_projects_items_and_keeps_metadata():
    page = PagedList(page_number=2, page_size=2, total_item_count=5, items=(1, 2))
    mapped = page.map(str)

    assert mapped.items == ("1", "2")
    assert (mapped.page_number, mapped.page_size, mapped.total_item_count) == (2, 2, 5)


def test_empty_page():
    page = PagedList.empty()
    assert page.page_count == 0
    assert page.items == ()
    assert not page.has_next_page
