from __future__ import annotations

import logging
from typing import Optional

from ..config import SearchConfig
from ..index.base import IndexProvider
from .models import EntityKind, SearchOutcome, SearchRequest
from .projector import ResultProjector
from .query_builder import QueryBuilder

logger = logging.getLogger(__name__)


class SearchService:
    """Application-layer search over the customer and order indexes.

    One call opens one search context on the index for the requested entity
    kind, builds the query, projects every hit and closes the context.

    Returns records plus the total item count before paging.
    """

    def __init__(
        self,
        indexes: IndexProvider,
        config: SearchConfig | None = None,
        *,
        query_builder: Optional[QueryBuilder] = None,
        projector: Optional[ResultProjector] = None,
    ):
        self.config = config or SearchConfig()
        self.indexes = indexes
        self.query_builder = query_builder or QueryBuilder()
        self.projector = projector or ResultProjector(self.config.application_base_url)

    def get_search_results(self, request: SearchRequest) -> SearchOutcome:
        # Validate before touching any index.
        entity_kind = EntityKind.parse(request.entity_kind)

        logger.info(
            "Searching %s: term=%r scope=%r sort=%r/%r page=%r size=%r",
            entity_kind.value,
            request.term,
            request.scope_key,
            request.sort_direction,
            request.sort_field,
            request.page_index,
            request.page_size,
        )

        index = self.indexes.get_index(self.config.index_name_for(entity_kind))
        with index.create_search_context() as context:
            built = self.query_builder.build(
                context.queryable(),
                entity_kind,
                request.term,
                request.scope_key,
                request.sort_field,
                request.sort_direction,
                request.page_index,
                request.page_size,
            )
            records = [
                self.projector.project(entity_kind, hit.document, request.requested_fields)
                for hit in built.query.execute()
            ]

        logger.info(
            "Found %d %s records (total %d)",
            len(records),
            entity_kind.value,
            built.total_item_count,
        )
        return SearchOutcome(records=records, total_item_count=built.total_item_count)
