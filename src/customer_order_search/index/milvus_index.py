from __future__ import annotations

import logging
import os
from typing import Iterable, List, Mapping, Optional, Sequence

from pymilvus import MilvusClient

from .milvus_client import get_milvus_client
from .query import Query
from .schemas import Document

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = int(os.getenv("MILVUS_BATCH_SIZE", 1000))
OUTPUT_FIELDS = ["id", "metadata"]


class MilvusSearchContext:
    """Reads a collection's rows once and serves queries over them until closed."""

    def __init__(self, index: "MilvusIndex") -> None:
        self.index = index
        self._documents: Optional[List[Document]] = None
        self._open = False

    def __enter__(self) -> "MilvusSearchContext":
        self._open = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._documents = None
        self._open = False

    def _load(self) -> List[Document]:
        if not self._open:
            raise RuntimeError(
                f"Search context for collection '{self.index.name}' is not open"
            )
        if self._documents is None:
            self._documents = [
                Document.from_row(row, date_fields=self.index.date_fields)
                for row in self.index.iter_rows()
            ]
            logger.debug(
                "Loaded %d documents from collection '%s'",
                len(self._documents),
                self.index.name,
            )
        return self._documents

    def queryable(self) -> Query:
        return Query(self._load)


class MilvusIndex:
    """A Milvus collection whose rows are {id, metadata JSON} documents.

    Each search context scans the whole collection once (`filter=""`) and
    evaluates predicates in Python. Milvus filter expressions compare JSON
    strings case-sensitively (`==`, `like`), while every term and scope
    condition issued by the query builder is case-insensitive, so a pushed
    down filter would drop matching rows.
    """

    def __init__(
        self,
        client: MilvusClient,
        name: str,
        *,
        date_fields: Sequence[str] = (),
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self.client = client
        self.name = name
        self.date_fields = tuple(date_fields)
        self.batch_size = batch_size

    def iter_rows(self) -> Iterable[dict]:
        iterator = self.client.query_iterator(
            collection_name=self.name,
            batch_size=self.batch_size,
            filter="",
            output_fields=OUTPUT_FIELDS,
        )
        try:
            while True:
                batch = iterator.next()
                if not batch:
                    break
                yield from batch
        finally:
            iterator.close()

    def create_search_context(self) -> MilvusSearchContext:
        return MilvusSearchContext(self)


class MilvusIndexProvider:
    def __init__(
        self,
        client: Optional[MilvusClient] = None,
        *,
        date_fields: Optional[Mapping[str, Sequence[str]]] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self.client = client or get_milvus_client()
        # collection name -> fields stored as ISO strings
        self.date_fields = dict(date_fields or {})
        self.batch_size = batch_size

    def get_index(self, name: str) -> MilvusIndex:
        if not self.client.has_collection(name):
            raise LookupError(f"Collection '{name}' not found")
        return MilvusIndex(
            self.client,
            name,
            date_fields=self.date_fields.get(name, ()),
            batch_size=self.batch_size,
        )
