"""Specification — a declarative, immutable query object for one entity type.

Criteria and sort keys are callables over a *shape*. The repository applies
them to its mapped class, which turns attribute accesses into column
expressions; the same callables also work on plain instances::

    spec = Specification(
        criteria=lambda a: a.category_id == 3,
        includes=("category", "tags"),
        sorting=SortOrder.by("name"),
    )

Combine conditions with ``&``, ``|`` and ``~`` rather than ``and``/``or``/``not``.
"""

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], Any]


@dataclass(frozen=True)
class SortOrder:
    """Sort key selector plus direction."""

    key: Callable[[Any], Any]
    descending: bool = False

    @classmethod
    def by(cls, field: str, descending: bool = False) -> "SortOrder":
        return cls(key=operator.attrgetter(field), descending=descending)

    def sort(self, items: Iterable[Any]) -> list[Any]:
        """Order in-memory items the way the store would."""
        return sorted(items, key=self.key, reverse=self.descending)


@dataclass(frozen=True)
class Specification(Generic[T]):
    """Filter criteria, relation includes and sort order for one entity type.

    ``includes`` holds relation paths; nested relations use dots
    (``"category.articles"``). Evaluation order is always
    criteria → includes → sorting.
    """

    criteria: Predicate | None = None
    includes: tuple[str, ...] = ()
    sorting: SortOrder | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "includes", tuple(self.includes))
