"""SQLAlchemy ORM models for articles, categories, tags and their join table."""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from home_wiki.domain.constants import DESCRIPTION_MAX_LENGTH
from home_wiki.infrastructure.database.base import AuditColumns, Base

article_tag = Table(
    "article_tag",
    Base.metadata,
    Column(
        "article_id",
        ForeignKey("article.pk_article", ondelete="CASCADE", name="fk_article_tag_article"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        ForeignKey("tag.pk_tag", ondelete="CASCADE", name="fk_article_tag_tag"),
        primary_key=True,
    ),
)


class CategoryModel(AuditColumns, Base):
    """ORM model — maps to the 'category' table."""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column("pk_category", primary_key=True, autoincrement=True)

    articles: Mapped[list["ArticleModel"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}')>"


class TagModel(AuditColumns, Base):
    """ORM model — maps to the 'tag' table."""

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column("pk_tag", primary_key=True, autoincrement=True)

    articles: Mapped[list["ArticleModel"]] = relationship(
        secondary=article_tag,
        back_populates="tags",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<TagModel(id={self.id}, name='{self.name}')>"


class ArticleModel(AuditColumns, Base):
    """ORM model — maps to the 'article' table."""

    __tablename__ = "article"

    id: Mapped[int] = mapped_column("pk_article", primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("category.pk_category", ondelete="CASCADE", name="fk_article_category"),
        nullable=False,
        index=True,
    )

    category: Mapped[CategoryModel] = relationship(back_populates="articles")
    tags: Mapped[list[TagModel]] = relationship(
        secondary=article_tag,
        back_populates="articles",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, name='{self.name}')>"
