"""Re-target predicates and orderings written against one type onto another.

Services accept predicates written against their request schemas
(``lambda a: a.name == "Kitchen"``); the repository needs predicates over the
persisted shape. Translation matches members by name: every attribute read
from the source parameter becomes the same-named attribute of the destination.

Validation is eager. The predicate is dry-run once at translation time, so a
member that is missing on either side raises :class:`TranslationError` here,
never later while the query runs.
"""

import dataclasses
import logging
from typing import Any

from pydantic import BaseModel

from home_wiki.application.interfaces.specification import Predicate, SortOrder
from home_wiki.domain.enums import Sorting
from home_wiki.domain.exceptions import TranslationError

logger = logging.getLogger(__name__)


def _declared_members(tp: type) -> frozenset[str] | None:
    """Field names a type declares, or None when only attribute lookup can tell."""
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        return frozenset(tp.model_fields)
    if dataclasses.is_dataclass(tp):
        return frozenset(f.name for f in dataclasses.fields(tp))
    return None


def _has_member(tp: type, name: str) -> bool:
    declared = _declared_members(tp)
    if declared is not None:
        return name in declared
    return hasattr(tp, name)


def _check_member(source: type, destination: type, name: str) -> None:
    if not _has_member(source, name):
        raise TranslationError(source, destination, name, "not declared on the source type")
    if not _has_member(destination, name):
        raise TranslationError(source, destination, name, "no same-named member on the destination type")


_BOOLEAN_HINT = "use &, | and ~ instead of and/or/not/in"


class _Symbol:
    """Stands in for any value while a predicate is dry-run.

    Truth testing, membership and iteration are refused: against a mapped
    class ``and``/``or``/``not``/``in`` cannot become SQL.
    """

    __hash__ = object.__hash__

    def __getattr__(self, name: str) -> "_Symbol":
        if name.startswith("__"):
            raise AttributeError(name)
        return _Symbol()

    def __call__(self, *args: Any, **kwargs: Any) -> "_Symbol":
        return _Symbol()

    def __bool__(self) -> bool:
        raise TypeError(_BOOLEAN_HINT)

    def __contains__(self, item: Any) -> bool:
        raise TypeError(_BOOLEAN_HINT)

    def __iter__(self):
        raise TypeError(_BOOLEAN_HINT)

    def __getitem__(self, key: Any) -> "_Symbol":
        return _Symbol()


def _absorb(self: _Symbol, *args: Any) -> _Symbol:
    return _Symbol()


for _op in (
    "eq", "ne", "lt", "le", "gt", "ge",
    "and", "or", "xor", "invert", "neg", "pos", "abs",
    "rand", "ror", "rxor",
    "add", "sub", "mul", "truediv", "floordiv", "mod", "pow",
    "radd", "rsub", "rmul", "rtruediv", "rfloordiv", "rmod", "rpow",
):
    setattr(_Symbol, f"__{_op}__", _absorb)


class _Recorder:
    """Source-shaped parameter that validates every member it hands out."""

    def __init__(self, source: type, destination: type):
        self._source = source
        self._destination = destination
        self.members: list[str] = []

    def __getattr__(self, name: str) -> _Symbol:
        if name.startswith("__"):
            raise AttributeError(name)
        _check_member(self._source, self._destination, name)
        self.members.append(name)
        return _Symbol()


class TranslatedPredicate:
    """A predicate over the destination type, produced by :func:`translate_predicate`."""

    def __init__(
        self,
        predicate: Predicate,
        source: type,
        destination: type,
        members: tuple[str, ...],
    ):
        self._predicate = predicate
        self.source = source
        self.destination = destination
        self.members = members

    def __call__(self, shape: Any) -> Any:
        return self._predicate(shape)

    def __repr__(self) -> str:
        return (
            f"<TranslatedPredicate {self.source.__name__} -> "
            f"{self.destination.__name__} members={list(self.members)}>"
        )


def translate_predicate(
    predicate: Predicate | None,
    source: type,
    destination: type,
) -> TranslatedPredicate | None:
    """Rewrite a predicate over ``source`` into one over ``destination``.

    Raises:
        TranslationError: a referenced member is not declared on ``source`` or
            has no same-named member on ``destination``.
    """
    if predicate is None:
        return None

    recorder = _Recorder(source, destination)
    try:
        predicate(recorder)
    except TranslationError:
        raise
    except Exception as exc:
        raise TranslationError(source, destination, "<expression>", str(exc)) from exc

    members = tuple(dict.fromkeys(recorder.members))
    logger.debug(
        "Translated predicate %s -> %s over %s",
        source.__name__,
        destination.__name__,
        members,
    )
    return TranslatedPredicate(predicate, source, destination, members)


def translate_ordering(
    field: str,
    sorting: Sorting,
    source: type,
    destination: type,
) -> SortOrder | None:
    """Map a sort field of ``source`` onto the same-named member of ``destination``."""
    if sorting is Sorting.NONE:
        return None
    _check_member(source, destination, field)
    return SortOrder.by(field, descending=sorting is Sorting.DESCENDING)
