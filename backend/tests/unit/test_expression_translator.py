"""Unit tests for predicate and ordering translation."""

import pytest

from home_wiki.application.expression_translator import translate_ordering, translate_predicate
from home_wiki.application.schemas import ArticleRequest, CategoryRequest
from home_wiki.domain.entities import Article, Category
from home_wiki.domain.enums import Sorting
from home_wiki.domain.exceptions import TranslationError
from home_wiki.infrastructure.database.models import ArticleModel, CategoryModel


def _categories() -> list[Category]:
    return [
        Category(id=1, name="Kitchen"),
        Category(id=2, name="Garden"),
        Category(id=3, name="Kitchen"),
    ]


def test_none_translates_to_none():
    assert translate_predicate(None, CategoryRequest, Category) is None


def test_translated_name_and_id_predicate_matches_per_item():
    translated = translate_predicate(
        lambda c: (c.name == "Kitchen") & (c.id > 1), CategoryRequest, Category
    )

    for category in _categories():
        request = CategoryRequest(id=category.id, name=category.name)
        expected = (request.name == "Kitchen") & (request.id > 1)
        assert translated(category) == expected


def test_translated_predicate_records_members():
    translated = translate_predicate(
        lambda a: (a.name == "Recipe1") | (a.category_id == 2), ArticleRequest, Article
    )
    assert translated.members == ("name", "category_id")
    assert "ArticleRequest -> Article" in repr(translated)


def test_translated_predicate_builds_sql_on_model():
    translated = translate_predicate(lambda c: c.name == "Kitchen", CategoryRequest, CategoryModel)
    clause = str(translated(CategoryModel))
    assert "category.name" in clause


def test_member_missing_on_source_fails_at_translation_time():
    with pytest.raises(TranslationError) as exc_info:
        translate_predicate(lambda c: c.description == "x", CategoryRequest, Category)
    assert exc_info.value.member == "description"


def test_member_missing_on_destination_fails_at_translation_time():
    # tag_ids is write-side only; the article table has no such column
    with pytest.raises(TranslationError) as exc_info:
        translate_predicate(lambda a: a.tag_ids == {1}, ArticleRequest, ArticleModel)
    assert exc_info.value.member == "tag_ids"


def test_failing_expression_is_reported_as_translation_error():
    def broken(shape):
        raise ValueError("boom")

    with pytest.raises(TranslationError) as exc_info:
        translate_predicate(broken, CategoryRequest, Category)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_ordering_none_sorting_gives_no_order():
    assert translate_ordering("name", Sorting.NONE, CategoryRequest, Category) is None


@pytest.mark.parametrize("sorting,expected", [
    (Sorting.ASCENDING, ["Garden", "Kitchen", "Kitchen"]),
    (Sorting.DESCENDING, ["Kitchen", "Kitchen", "Garden"]),
])
def test_ordering_sorts_by_field(sorting: Sorting, expected: list[str]):
    order = translate_ordering("name", sorting, CategoryRequest, Category)
    assert [c.name for c in order.sort(_categories())] == expected


def test_ordering_on_unknown_field_fails():
    with pytest.raises(TranslationError):
        translate_ordering("title", Sorting.ASCENDING, CategoryRequest, Category)


@pytest.mark.parametrize("predicate", [
    lambda c: c.name == "Garden" and c.id == 1,
    lambda c: c.name == "Kitchen" or c.id == 1,
    lambda c: not c.name == "Kitchen",
    lambda c: "kit" in c.name,
    lambda c: c.name in ("Kitchen", "Garden"),
])
def test_boolean_keywords_are_rejected_at_translation_time(predicate):
    with pytest.raises(TranslationError) as exc_info:
        translate_predicate(predicate, CategoryRequest, CategoryModel)
    assert "use &, | and ~" in str(exc_info.value)


def test_or_cannot_hide_a_missing_member():
    with pytest.raises(TranslationError):
        translate_predicate(
            lambda c: c.name == "Kitchen" or c.bogus == 1, CategoryRequest, CategoryModel
        )
