"""Demo content for an empty wiki store."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from home_wiki.domain.entities import Article, Category, Tag, utc_now
from home_wiki.infrastructure.database.mappers import ArticleMapper, CategoryMapper, TagMapper
from home_wiki.infrastructure.database.repositories import SQLAlchemyGenericRepository

logger = logging.getLogger(__name__)

_SEED_USER = "seeder"

_CATEGORIES = ("Kitchen", "Garden", "Garage")
_TAGS = ("recipe", "maintenance", "seasonal")

# (article name, description, category, tags)
_ARTICLES = (
    ("Pancakes", "Flour, milk, eggs. Rest the batter for ten minutes.", "Kitchen", ("recipe",)),
    ("Descaling the kettle", "Boil half water, half vinegar; rinse twice.", "Kitchen", ("maintenance",)),
    ("Tomato planting", "Plant out after the last frost, 60 cm apart.", "Garden", ("seasonal",)),
    ("Winter tyres", "Swap when temperatures stay below 7 °C.", "Garage", ("maintenance", "seasonal")),
)


class WikiSeeder:
    """Inserts a small set of categories, tags and articles."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._categories = SQLAlchemyGenericRepository[Category](session_factory, CategoryMapper())
        self._tags = SQLAlchemyGenericRepository[Tag](session_factory, TagMapper())
        self._articles = SQLAlchemyGenericRepository[Article](session_factory, ArticleMapper())

    async def already_seeded(self) -> bool:
        return await self._categories.any() or await self._articles.any()

    async def seed(self) -> None:
        categories: dict[str, Category] = {}
        for name in _CATEGORIES:
            categories[name] = await self._categories.add(
                Category(name=name, created_by=_SEED_USER, created_at=utc_now())
            )

        tags: dict[str, Tag] = {}
        for name in _TAGS:
            tags[name] = await self._tags.add(
                Tag(name=name, created_by=_SEED_USER, created_at=utc_now())
            )

        for name, description, category, tag_names in _ARTICLES:
            await self._articles.add(
                Article(
                    name=name,
                    description=description,
                    category_id=categories[category].id,
                    tag_ids={tags[t].id for t in tag_names},
                    created_by=_SEED_USER,
                    created_at=utc_now(),
                )
            )

        logger.info(
            "Seeded %d categories, %d tags, %d articles",
            len(categories),
            len(tags),
            len(_ARTICLES),
        )
