"""Integration tests for the article, category and tag services on SQLite."""

import pytest

from home_wiki.application.schemas import (
    ArticleFilterRequest,
    ArticleRequest,
    CategoryRequest,
    FilterRequest,
    TagRequest,
)
from home_wiki.domain.enums import ErrorCode, Sorting
from home_wiki.domain.exceptions import CategoryServiceError, TranslationError


async def _create_category(category_service, name: str = "Kitchen"):
    return (await category_service.create(CategoryRequest(name=name, created_by="alice"))).data


async def _create_article(article_service, category_id: int, name: str, tag_ids=()):
    result = await article_service.create(
        ArticleRequest(
            name=name,
            description=f"How to make {name}",
            category_id=category_id,
            tag_ids=set(tag_ids),
        )
    )
    return result.data


@pytest.mark.asyncio
async def test_kitchen_recipe_scenario(category_service, article_service):
    kitchen = await _create_category(category_service)
    await _create_article(article_service, kitchen.id, "Recipe1")

    result = await article_service.get_by_category(kitchen.id, 1, 10)

    assert result.success
    page = result.data
    assert page.total_item_count == 1
    assert page.page_count == 1
    assert not page.has_previous_page
    assert not page.has_next_page
    assert page.items[0].name == "Recipe1"
    assert page.items[0].category.name == "Kitchen"


@pytest.mark.asyncio
async def test_create_then_get_by_id_round_trip(category_service):
    created = await _create_category(category_service, "Garden")

    fetched = (await category_service.get_by_id(created.id)).data

    assert fetched.id == created.id
    assert fetched.name == "Garden"
    assert fetched.created_by == "alice"
    assert fetched.created_at.replace(tzinfo=None) == created.created_at.replace(tzinfo=None)
    assert fetched.modified_by is None


@pytest.mark.asyncio
async def test_get_by_id_includes_article_relations(category_service, tag_service, article_service):
    kitchen = await _create_category(category_service)
    tag = (await tag_service.create(TagRequest(name="baking"))).data
    created = await _create_article(article_service, kitchen.id, "Bread", [tag.id])

    fetched = (await article_service.get_by_id(created.id)).data

    assert fetched.category.id == kitchen.id
    assert [t.name for t in fetched.tags] == ["baking"]


@pytest.mark.asyncio
async def test_update_keeps_created_fields(category_service):
    created = await _create_category(category_service)

    result = await category_service.update(
        CategoryRequest(id=created.id, name="Scullery", created_by="mallory", modified_by="bob")
    )

    stored = (await category_service.get_by_id(created.id)).data
    assert result.success
    assert stored.name == "Scullery"
    assert stored.created_by == "alice"
    assert stored.created_at.replace(tzinfo=None) == created.created_at.replace(tzinfo=None)
    assert stored.modified_by == "bob"
    assert stored.modified_at is not None


@pytest.mark.asyncio
async def test_update_of_missing_id_is_not_found(category_service):
    await _create_category(category_service)

    result = await category_service.update(CategoryRequest(id=999, name="Ghost"))

    assert result.code == 404
    names = [c.name for c in (await category_service.get()).data]
    assert names == ["Kitchen"]


@pytest.mark.asyncio
async def test_delete_and_remove(category_service):
    first = await _create_category(category_service, "Attic")
    await _create_category(category_service, "Cellar")
    await _create_category(category_service, "Cellar")

    assert (await category_service.delete(first.id)).success
    assert (await category_service.delete(first.id)).code == 404

    await category_service.remove(CategoryRequest(name="Cellar"))
    assert len((await category_service.get()).data) == 1


@pytest.mark.asyncio
async def test_filtering_never_widens_results(category_service, tag_service, article_service):
    kitchen = await _create_category(category_service, "Kitchen")
    garden = await _create_category(category_service, "Garden")
    recipe = (await tag_service.create(TagRequest(name="recipe"))).data
    await _create_article(article_service, kitchen.id, "Pancakes", [recipe.id])
    await _create_article(article_service, kitchen.id, "Kettle care")
    await _create_article(article_service, garden.id, "Pancake tree", [recipe.id])

    unfiltered = (await article_service.get_page(ArticleFilterRequest(page_size=50))).data
    by_name = (await article_service.get_page(ArticleFilterRequest(page_size=50, part_name="PANCAKE"))).data
    by_name_and_category = (
        await article_service.get_page(
            ArticleFilterRequest(page_size=50, part_name="pancake", category_ids={kitchen.id})
        )
    ).data
    by_tag = (await article_service.get_page(ArticleFilterRequest(page_size=50, tag_ids={recipe.id}))).data

    assert unfiltered.total_item_count == 3
    assert {a.name for a in by_name.items} == {"Pancakes", "Pancake tree"}
    assert [a.name for a in by_name_and_category.items] == ["Pancakes"]
    assert {a.name for a in by_tag.items} == {"Pancakes", "Pancake tree"}
    assert {a.id for a in by_name_and_category.items} <= {a.id for a in by_name.items}


@pytest.mark.asyncio
async def test_get_page_sorting(tag_service):
    for name in ("b", "c", "a"):
        await tag_service.create(TagRequest(name=name))

    descending = (await tag_service.get_page(FilterRequest(sorting=Sorting.DESCENDING))).data

    assert [t.name for t in descending.items] == ["c", "b", "a"]


@pytest.mark.asyncio
async def test_request_predicates_are_translated(category_service):
    await _create_category(category_service, "Kitchen")
    await _create_category(category_service, "Garden")

    assert await category_service.any(lambda c: c.name == "Garden")
    first = await category_service.first_or_default(lambda c: c.name == "Kitchen")
    missing = await category_service.first_or_default(lambda c: c.name == "Garage")

    assert first.data.name == "Kitchen"
    assert missing.code == 404


@pytest.mark.asyncio
async def test_repository_failures_surface_as_service_errors(category_service):
    with pytest.raises(CategoryServiceError) as exc_info:
        await category_service.get(lambda c: c.name.no_such_operator("x"))

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_python_and_in_a_predicate_is_refused_instead_of_dropping_a_condition(category_service):
    await _create_category(category_service, "Kitchen")
    await _create_category(category_service, "Garden")

    with pytest.raises(CategoryServiceError) as exc_info:
        await category_service.get(lambda c: c.name == "Garden" and c.id == 1)

    assert isinstance(exc_info.value.__cause__, TranslationError)
    combined = await category_service.get(lambda c: (c.name == "Garden") & (c.id == 1))
    assert [c.name for c in combined.data] == []


@pytest.mark.asyncio
async def test_unknown_references_on_create_are_not_found(category_service, article_service):
    kitchen = await _create_category(category_service)

    unknown_tag = await article_service.create(
        ArticleRequest(name="Recipe1", description="...", category_id=kitchen.id, tag_ids={777})
    )
    unknown_category = await article_service.create(
        ArticleRequest(name="Recipe1", description="...", category_id=4242)
    )

    assert unknown_tag.code == 404
    assert unknown_tag.error.code == ErrorCode.NOT_FOUND
    assert "Tag" in unknown_tag.message
    assert unknown_category.code == 404
    assert "Category" in unknown_category.message
    assert not await article_service.any()


@pytest.mark.asyncio
async def test_unknown_tag_on_update_is_not_found_and_keeps_the_article(
    category_service, tag_service, article_service
):
    kitchen = await _create_category(category_service)
    tag = (await tag_service.create(TagRequest(name="baking"))).data
    created = await _create_article(article_service, kitchen.id, "Bread", [tag.id])

    result = await article_service.update(
        ArticleRequest(
            id=created.id,
            name="Bread v2",
            description="...",
            category_id=kitchen.id,
            tag_ids={777},
        )
    )

    assert result.code == 404
    stored = (await article_service.get_by_id(created.id)).data
    assert stored.name == "Bread"
    assert [t.id for t in stored.tags] == [tag.id]
