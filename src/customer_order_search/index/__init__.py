"""Index access layer.

Documents, composable match predicates, a lazy query over a search context,
and two backends: Milvus collections and in-memory document sets.
"""

from .base import IndexHandle, IndexProvider, SearchContext
from .memory_index import InMemoryIndex, InMemoryIndexProvider
from .query import Query
from .schemas import CustomerFields, Document, OrderFields, SearchHit

__all__ = [
    "CustomerFields",
    "Document",
    "InMemoryIndex",
    "InMemoryIndexProvider",
    "IndexHandle",
    "IndexProvider",
    "OrderFields",
    "Query",
    "SearchContext",
    "SearchHit",
]
