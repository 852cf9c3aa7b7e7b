from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from numbers import Real
from typing import Any, Callable, Iterable, List, Tuple

from ..utils.dates import as_utc
from .predicates import Predicate
from .schemas import Document, SearchHit

logger = logging.getLogger(__name__)

KeySelector = Callable[[Document], Any]


def sort_key(value: Any) -> Tuple[int, int, Any]:
    """Total ordering over index values.

    Absent values first, then numbers, dates (compared in UTC), strings, and
    anything else by its string form. Values of different kinds never meet
    in a comparison.
    """
    if value is None:
        return (0, 0, "")
    if isinstance(value, Real):
        return (1, 0, value)
    if isinstance(value, date):
        return (1, 1, as_utc(value))
    if isinstance(value, str):
        return (1, 2, value)
    return (1, 3, str(value))


def _keyed(selector: KeySelector) -> Callable[[Document], Tuple[int, int, Any]]:
    return lambda document: sort_key(selector(document))


@dataclass(frozen=True)
class _Step:
    kind: str
    arg: Any


class Query:
    """Immutable, lazily evaluated query over the documents of a search context.

    Every builder method returns a new Query; nothing touches the index until
    `count()` or `execute()` is called. Steps are applied in the order they
    were added, so `.skip(n).take(m)` after an ordering pages the ordered set.
    """

    def __init__(
        self,
        source: Callable[[], Iterable[Document]],
        steps: Tuple[_Step, ...] = (),
    ) -> None:
        self._source = source
        self._steps = steps

    def _with(self, kind: str, arg: Any) -> "Query":
        return Query(self._source, self._steps + (_Step(kind, arg),))

    def where(self, predicate: Predicate) -> "Query":
        return self._with("where", predicate)

    def order_by(self, key: KeySelector) -> "Query":
        return self._with("order", (key, False))

    def order_by_descending(self, key: KeySelector) -> "Query":
        return self._with("order", (key, True))

    def skip(self, count: int) -> "Query":
        if count < 0:
            raise ValueError("skip count must be non-negative")
        return self._with("skip", count)

    def take(self, count: int) -> "Query":
        if count < 0:
            raise ValueError("take count must be non-negative")
        return self._with("take", count)

    def _documents(self) -> List[Document]:
        documents: List[Document] = list(self._source())
        for step in self._steps:
            if step.kind == "where":
                documents = [d for d in documents if step.arg.matches(d)]
            elif step.kind == "order":
                selector, descending = step.arg
                documents = sorted(
                    documents, key=_keyed(selector), reverse=descending
                )
            elif step.kind == "skip":
                documents = documents[step.arg:]
            elif step.kind == "take":
                documents = documents[: step.arg]
        return documents

    def count(self) -> int:
        return len(self._documents())

    def execute(self) -> List[SearchHit]:
        documents = self._documents()
        logger.debug("Query returned %d documents", len(documents))
        return [SearchHit(document=d) for d in documents]
