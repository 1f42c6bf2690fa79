"""Tests for the exception handlers registered on the application."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from home_wiki.domain.enums import ErrorCode
from home_wiki.domain.exceptions import (
    CategoryServiceError,
    EntityNotFoundError,
    RepositoryError,
)
from home_wiki.presentation.api.error_handlers import register_exception_handlers


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/service")
    async def raise_service_error():
        raise CategoryServiceError("Error retrieving Category list: boom")

    @app.get("/repository")
    async def raise_repository_error():
        try:
            raise EntityNotFoundError("Category", 7)
        except EntityNotFoundError as exc:
            raise RepositoryError("Category", "updating an entity") from exc

    @app.get("/unexpected")
    async def raise_unexpected():
        raise KeyError("missing")

    return app


async def _get(path: str):
    # Starlette re-raises unhandled exceptions after the 500 response is sent
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


@pytest.mark.asyncio
async def test_service_error_maps_to_500_with_service_prefix():
    response = await _get("/service")

    assert response.status_code == 500
    body = response.json()
    assert body["message"].startswith("Category Service Error: Error retrieving Category list")
    assert body["code"] == ErrorCode.UNEXPECTED


@pytest.mark.asyncio
async def test_repository_error_maps_to_database_exception_code():
    response = await _get("/repository")

    assert response.status_code == 500
    body = response.json()
    assert body["message"].startswith("Repository Error: An error occurred while updating")
    assert body["code"] == ErrorCode.DATABASE_EXCEPTION


@pytest.mark.asyncio
async def test_unexpected_error_maps_to_generic_message():
    response = await _get("/unexpected")

    assert response.status_code == 500
    assert response.json()["message"].startswith("Unexpected Error:")


@pytest.mark.asyncio
async def test_traceback_is_included_outside_production():
    response = await _get("/service")
    assert "StackTrace:" in response.json()["message"]
