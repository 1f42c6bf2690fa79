from .generic_repository import GenericRepository
from .specification import Predicate, SortOrder, Specification

__all__ = [
    "GenericRepository",
    "Predicate",
    "SortOrder",
    "Specification",
]
