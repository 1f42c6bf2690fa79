"""SQLAlchemy ORM base, shared audit columns and model registry."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from home_wiki.domain.constants import AUDIT_USER_MAX_LENGTH, NAME_MAX_LENGTH


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


class AuditColumns:
    """Name and audit columns carried by every wiki table."""

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False, index=True)
    created_by: Mapped[str] = mapped_column(String(AUDIT_USER_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    modified_by: Mapped[str | None] = mapped_column(String(AUDIT_USER_MAX_LENGTH), nullable=True)
    modified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
