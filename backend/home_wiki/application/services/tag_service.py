"""Application service (use case) for Tag operations."""

from home_wiki.application.schemas import TagRequest, TagResponse
from home_wiki.application.services.entity_service import EntityService
from home_wiki.application.specifications import tag_for_filter
from home_wiki.domain.entities import Tag
from home_wiki.domain.exceptions import TagServiceError


class TagService(EntityService[Tag, TagRequest, TagResponse]):
    entity_type = Tag
    request_type = TagRequest
    response_type = TagResponse
    error_type = TagServiceError
    filter_specification = staticmethod(tag_for_filter)
