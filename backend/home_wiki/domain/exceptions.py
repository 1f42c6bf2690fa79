"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class TranslationError(Exception):
    """Raised when a predicate or ordering cannot be re-targeted to another type."""

    def __init__(self, source: type, destination: type, member: str, reason: str):
        self.source = source
        self.destination = destination
        self.member = member
        super().__init__(
            f"Cannot translate member '{member}' from `{source.__name__}` "
            f"to `{destination.__name__}`: {reason}"
        )


class RepositoryError(Exception):
    """Raised by the generic repository for any store-level failure.

    The original exception is always chained as ``__cause__``.
    """

    def __init__(self, entity_type: str, operation: str):
        self.entity_type = entity_type
        self.operation = operation
        super().__init__(
            f"An error occurred while {operation} of type `{entity_type}`."
        )

    @property
    def not_found(self) -> bool:
        """True when the failure was a missing row rather than a store error."""
        return isinstance(self.__cause__, EntityNotFoundError)


class ServiceError(Exception):
    """Base class for errors raised by the domain services."""

    label = "Service"


class ArticleServiceError(ServiceError):
    label = "Article Service"


class CategoryServiceError(ServiceError):
    label = "Category Service"


class TagServiceError(ServiceError):
    label = "Tag Service"
