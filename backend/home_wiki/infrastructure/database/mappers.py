"""ORM model ↔ domain entity mapping for the generic repository.

Relations are mapped only when they were loaded on the model, so mapping
never triggers lazy I/O. Each row maps to exactly one entity instance, which
keeps back-references (``article.category.articles``) finite.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from home_wiki.domain.entities import Article, Category, Entity, Tag
from home_wiki.domain.exceptions import EntityNotFoundError
from home_wiki.infrastructure.database.base import Base
from home_wiki.infrastructure.database.models import ArticleModel, CategoryModel, TagModel

EntityT = TypeVar("EntityT", bound=Entity)
ModelT = TypeVar("ModelT", bound=Base)


def _is_loaded(model: Base, relation: str) -> bool:
    return relation not in inspect(model).unloaded


def _common_fields(model: Any) -> dict[str, Any]:
    return {
        "id": model.id,
        "name": model.name,
        "created_by": model.created_by,
        "created_at": model.created_at,
        "modified_by": model.modified_by,
        "modified_at": model.modified_at,
    }


class _GraphMapper:
    """Maps one loaded object graph; remembers every row it has already mapped."""

    def __init__(self):
        self._mapped: dict[int, Entity] = {}

    def map(self, model: Base) -> Entity:
        key = id(model)
        if key in self._mapped:
            return self._mapped[key]

        if isinstance(model, ArticleModel):
            entity = Article(
                **_common_fields(model),
                description=model.description,
                category_id=model.category_id,
            )
        elif isinstance(model, CategoryModel):
            entity = Category(**_common_fields(model))
        elif isinstance(model, TagModel):
            entity = Tag(**_common_fields(model))
        else:
            raise TypeError(f"No entity mapping for {type(model).__name__}")

        self._mapped[key] = entity
        self._map_relations(model, entity)
        return entity

    def _map_relations(self, model: Base, entity: Entity) -> None:
        if isinstance(model, ArticleModel):
            if _is_loaded(model, "category") and model.category is not None:
                entity.category = self.map(model.category)
            if _is_loaded(model, "tags"):
                entity.tags = [self.map(t) for t in model.tags]
                entity.tag_ids = {t.id for t in entity.tags}
        elif _is_loaded(model, "articles"):
            entity.articles = [self.map(a) for a in model.articles]


class EntityMapper(Generic[EntityT, ModelT]):
    """Maps one entity type to its ORM model and back."""

    model: type[ModelT]
    entity_type: type[EntityT]
    write_relations: tuple[str, ...] = ()

    @property
    def entity_name(self) -> str:
        return self.entity_type.__name__

    def to_entity(self, model: ModelT) -> EntityT:
        return _GraphMapper().map(model)

    async def copy_to_model(self, session: AsyncSession, entity: EntityT, model: ModelT) -> None:
        """Copy every writable field of ``entity`` onto ``model`` (the id is never copied)."""
        model.name = entity.name
        model.created_by = entity.created_by
        model.created_at = entity.created_at
        model.modified_by = entity.modified_by
        model.modified_at = entity.modified_at

    async def to_model(self, session: AsyncSession, entity: EntityT) -> ModelT:
        model = self.model()
        await self.copy_to_model(session, entity, model)
        return model

    def update_options(self) -> list:
        """Loader options needed before :meth:`copy_to_model` can replace relations."""
        return [selectinload(getattr(self.model, relation)) for relation in self.write_relations]


class CategoryMapper(EntityMapper[Category, CategoryModel]):
    model = CategoryModel
    entity_type = Category


class TagMapper(EntityMapper[Tag, TagModel]):
    model = TagModel
    entity_type = Tag


class ArticleMapper(EntityMapper[Article, ArticleModel]):
    model = ArticleModel
    entity_type = Article
    write_relations = ("tags",)

    async def copy_to_model(self, session: AsyncSession, entity: Article, model: ArticleModel) -> None:
        await super().copy_to_model(session, entity, model)
        model.description = entity.description
        model.category_id = await self._existing_category_id(session, entity.category_id)
        model.tags = await self._load_tags(session, entity.tag_ids)

    async def _existing_category_id(self, session: AsyncSession, category_id: int) -> int:
        found = await session.scalar(
            select(CategoryModel.id).where(CategoryModel.id == category_id)
        )
        if found is None:
            raise EntityNotFoundError("Category", category_id)
        return found

    async def _load_tags(self, session: AsyncSession, tag_ids: set[int]) -> list[TagModel]:
        if not tag_ids:
            return []
        result = await session.scalars(select(TagModel).where(TagModel.id.in_(tag_ids)))
        tags = list(result.all())
        missing = set(tag_ids) - {t.id for t in tags}
        if missing:
            raise EntityNotFoundError("Tag", min(missing))
        return tags
