"""Fixtures backed by a temporary SQLite database."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from home_wiki.application.services import ArticleService, CategoryService, TagService
from home_wiki.domain.entities import Article, Category, Tag
from home_wiki.infrastructure.database import Base
from home_wiki.infrastructure.database.mappers import ArticleMapper, CategoryMapper, TagMapper
from home_wiki.infrastructure.database.repositories import SQLAlchemyGenericRepository
from home_wiki.infrastructure.database.session import build_engine, build_session_factory
from home_wiki.infrastructure.dependencies import get_session_factory
from home_wiki.main import app


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = build_engine(f"sqlite:///{tmp_path / 'wiki.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def category_repository(session_factory) -> SQLAlchemyGenericRepository[Category]:
    return SQLAlchemyGenericRepository[Category](session_factory, CategoryMapper())


@pytest.fixture
def tag_repository(session_factory) -> SQLAlchemyGenericRepository[Tag]:
    return SQLAlchemyGenericRepository[Tag](session_factory, TagMapper())


@pytest.fixture
def article_repository(session_factory) -> SQLAlchemyGenericRepository[Article]:
    return SQLAlchemyGenericRepository[Article](session_factory, ArticleMapper())


@pytest.fixture
def category_service(category_repository) -> CategoryService:
    return CategoryService(category_repository)


@pytest.fixture
def tag_service(tag_repository) -> TagService:
    return TagService(tag_repository)


@pytest.fixture
def article_service(article_repository) -> ArticleService:
    return ArticleService(article_repository)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
