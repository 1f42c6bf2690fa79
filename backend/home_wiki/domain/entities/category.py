"""Category domain entity."""

from dataclasses import dataclass, field

from home_wiki.domain.entities.base import Entity


@dataclass(eq=False, kw_only=True)
class Category(Entity):
    """Groups articles. ``articles`` is informational and only set when loaded."""

    articles: list["Article"] = field(default_factory=list)
