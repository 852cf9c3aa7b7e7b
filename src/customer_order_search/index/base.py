"""Contracts between the search core and an index backend."""

from __future__ import annotations

from typing import ContextManager, Protocol

from .query import Query


class SearchContext(Protocol):
    def queryable(self) -> Query: ...


class IndexHandle(Protocol):
    name: str

    def create_search_context(self) -> ContextManager[SearchContext]: ...


class IndexProvider(Protocol):
    def get_index(self, name: str) -> IndexHandle: ...
