from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .query import Query
from .schemas import Document

logger = logging.getLogger(__name__)


class InMemorySearchContext:
    """Search context over a snapshot of an in-memory index."""

    def __init__(self, index: "InMemoryIndex") -> None:
        self.index = index
        self._documents: Optional[List[Document]] = None
        self.closed = False

    def __enter__(self) -> "InMemorySearchContext":
        self._documents = list(self.index.documents)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._documents = None
        self.closed = True

    def _iter_documents(self) -> Iterator[Document]:
        if self.closed or self._documents is None:
            raise RuntimeError(f"Search context for index '{self.index.name}' is not open")
        return iter(self._documents)

    def queryable(self) -> Query:
        return Query(self._iter_documents)


class InMemoryIndex:
    """A named collection of documents held in memory."""

    def __init__(self, name: str, documents: Iterable[Document] = ()) -> None:
        self.name = name
        self.documents: List[Document] = list(documents)

    def create_search_context(self) -> InMemorySearchContext:
        return InMemorySearchContext(self)


class InMemoryIndexProvider:
    def __init__(self, indexes: Iterable[InMemoryIndex] = ()) -> None:
        self._indexes: Dict[str, InMemoryIndex] = {i.name: i for i in indexes}

    def get_index(self, name: str) -> InMemoryIndex:
        try:
            return self._indexes[name]
        except KeyError:
            logger.error("Index '%s' is not registered", name)
            raise LookupError(f"Index '{name}' not found") from None
