"""Turns a Specification into a SQLAlchemy select."""

from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import selectinload

from home_wiki.application.interfaces.specification import SortOrder, Specification


def _include_option(model: type, path: str) -> Any:
    """Chained eager-load option for a dotted relation path such as ``"category.articles"``."""
    option = None
    owner = model
    for relation in path.split("."):
        attribute = getattr(owner, relation)
        option = selectinload(attribute) if option is None else option.selectinload(attribute)
        owner = attribute.property.mapper.class_
    return option


def apply_ordering(query: Select, model: type, order_by: SortOrder | None) -> Select:
    if order_by is None:
        return query
    column = order_by.key(model)
    return query.order_by(column.desc() if order_by.descending else column.asc())


def get_query(query: Select, model: type, specification: Specification) -> Select:
    """Apply criteria, then includes, then sorting to ``query``."""
    if specification.criteria is not None:
        query = query.where(specification.criteria(model))

    for path in specification.includes:
        query = query.options(_include_option(model, path))

    return apply_ordering(query, model, specification.sorting)
