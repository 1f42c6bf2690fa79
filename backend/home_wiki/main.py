"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from home_wiki.config import get_settings
from home_wiki.infrastructure.database import Base, engine
from home_wiki.infrastructure.database.seeder import WikiSeeder
from home_wiki.infrastructure.database.session import async_session_factory
from home_wiki.infrastructure.logging.log_config import setup_logging
from home_wiki.presentation.api.error_handlers import register_exception_handlers
from home_wiki.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    """
    from urllib.parse import urlparse

    import asyncpg

    settings = get_settings()
    parsed = urlparse(settings.database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_demo_data() -> None:
    """Insert demo categories, tags and articles into an empty store."""
    seeder = WikiSeeder(async_session_factory)
    if await seeder.already_seeded():
        logger.debug("Wiki store already has data; skipping demo seed")
        return
    await seeder.seed()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables and seed demo content."""
    settings = get_settings()
    setup_logging()

    # 0. Ensure the PostgreSQL database exists (auto-create if missing)
    if settings.database_url.startswith("postgresql://"):
        await _ensure_database_exists()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Optional demo content
    if settings.seed_demo_data:
        await _seed_demo_data()

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "home_wiki.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
