"""Article domain entity."""

from dataclasses import dataclass, field

from home_wiki.domain.entities.base import Entity


@dataclass(eq=False, kw_only=True)
class Article(Entity):
    """A wiki article. Belongs to one category and carries any number of tags.

    ``category`` and ``tags`` are only populated when the relation was loaded;
    ``tag_ids`` is the write-side view of the tag association.
    """

    description: str
    category_id: int
    category: "Category | None" = None
    tags: list["Tag"] = field(default_factory=list)
    tag_ids: set[int] = field(default_factory=set)
