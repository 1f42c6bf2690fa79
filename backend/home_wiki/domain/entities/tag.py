"""Tag domain entity."""

from dataclasses import dataclass, field

from home_wiki.domain.entities.base import Entity


@dataclass(eq=False, kw_only=True)
class Tag(Entity):
    articles: list["Article"] = field(default_factory=list)
