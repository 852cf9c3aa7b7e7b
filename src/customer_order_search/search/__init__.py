"""Search application layer.

This package turns customer/order search requests into index queries and
shapes the matched documents into flat records:
- QueryBuilder: term predicate, total count, sort and page slice
- ResultProjector: mandatory fields plus caller-requested fields
- SearchService: ties both to an index provider, one search context per call
"""

from .models import EntityKind, SearchOutcome, SearchRequest
from .projector import ResultProjector
from .query_builder import QueryBuilder
from .service import SearchService

__all__ = [
    "EntityKind",
    "QueryBuilder",
    "ResultProjector",
    "SearchOutcome",
    "SearchRequest",
    "SearchService",
]
