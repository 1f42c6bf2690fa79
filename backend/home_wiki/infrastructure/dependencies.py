"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from home_wiki.application.services import ArticleService, CategoryService, TagService
from home_wiki.domain.entities import Article, Category, Tag
from home_wiki.infrastructure.database.mappers import ArticleMapper, CategoryMapper, TagMapper
from home_wiki.infrastructure.database.repositories import SQLAlchemyGenericRepository
from home_wiki.infrastructure.database.session import async_session_factory


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory shared by the repositories; overridden in tests."""
    return async_session_factory


async def get_article_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyGenericRepository[Article](session_factory, ArticleMapper())
    yield ArticleService(repository)


async def get_category_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[CategoryService, None]:
    """Provides a CategoryService instance with its repository wired up."""
    repository = SQLAlchemyGenericRepository[Category](session_factory, CategoryMapper())
    yield CategoryService(repository)


async def get_tag_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[TagService, None]:
    """Provides a TagService instance with its repository wired up."""
    repository = SQLAlchemyGenericRepository[Tag](session_factory, TagMapper())
    yield TagService(repository)
