"""Exception handlers — map service and repository errors to JSON error results."""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from home_wiki.application.schemas.results import ErrorResult
from home_wiki.config import get_settings
from home_wiki.domain.enums import ErrorCode
from home_wiki.domain.exceptions import RepositoryError, ServiceError

logger = logging.getLogger(__name__)


def _error_response(exc: Exception, prefix: str, code: ErrorCode) -> JSONResponse:
    message = f"{prefix}: {exc}"
    if not get_settings().is_production:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        message += f" StackTrace: {trace}"

    inner = exc.__cause__
    logger.error(
        "HTTP %s - Exception: %s. Inner Exception: %s",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        exc,
        inner if inner is not None else "none",
        exc_info=exc,
    )
    body = ErrorResult(message=message, code=code)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(mode="json"),
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return _error_response(exc, f"{exc.label} Error", ErrorCode.UNEXPECTED)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    return _error_response(exc, "Repository Error", ErrorCode.DATABASE_EXCEPTION)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(exc, "Unexpected Error", ErrorCode.UNEXPECTED)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
