"""Tests for the demo data seeder."""

import pytest

from home_wiki.infrastructure.database.seeder import WikiSeeder


@pytest.mark.asyncio
async def test_seed_fills_an_empty_store(session_factory, category_repository, article_repository):
    seeder = WikiSeeder(session_factory)
    assert not await seeder.already_seeded()

    await seeder.seed()

    assert await seeder.already_seeded()
    assert len(await category_repository.get()) == 3
    articles = await article_repository.get()
    assert len(articles) == 4
    assert all(a.created_by == "seeder" for a in articles)
