"""Helpers turning service result envelopes into HTTP responses."""

from typing import TypeVar

from fastapi import HTTPException

from home_wiki.application.schemas.results import ResultModel, ResultModels

ResultT = TypeVar("ResultT", ResultModel, ResultModels)


def unwrap(result: ResultT) -> ResultT:
    """Return a successful envelope; raise HTTPException(code, message) otherwise."""
    if not result.success:
        raise HTTPException(status_code=result.code, detail=result.message)
    return result
