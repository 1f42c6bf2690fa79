from .generic_repository import SQLAlchemyGenericRepository, repository_errors

__all__ = [
    "SQLAlchemyGenericRepository",
    "repository_errors",
]
