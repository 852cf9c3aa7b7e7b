from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..index.predicates import (
    FieldContains,
    FieldEndsWith,
    FieldEquals,
    FieldStartsWith,
    MatchAll,
    Predicate,
    WILDCARD,
)
from ..index.query import Query
from ..index.schemas import CustomerFields, Document, OrderDocument, OrderFields
from .models import ASCENDING, EntityKind

logger = logging.getLogger(__name__)


@dataclass
class BuiltQuery:
    query: Query
    total_item_count: int


def is_paging_specified(page_index: Optional[int], page_size: Optional[int]) -> bool:
    return page_size is not None and page_index is not None and page_size > 0 and page_index >= 0


def scope_predicate(scope_key: str) -> Predicate:
    return FieldEquals(OrderFields.artifact_store_id, scope_key or "", ignore_case=True)


def order_predicate(term: Optional[str], scope_key: str) -> Predicate:
    if not term:
        return scope_predicate(scope_key)
    matches_term = FieldEquals(
        OrderFields.confirmation_id, term, ignore_case=True
    ) | FieldEquals(OrderFields.email, term, ignore_case=True)
    return matches_term & scope_predicate(scope_key)


def customer_predicate(term: Optional[str]) -> Predicate:
    """Return the customer term predicate; MatchAll when no term filter applies."""

    if not term:
        return MatchAll()

    if WILDCARD in term:
        if term.endswith(WILDCARD):
            affix = FieldStartsWith
        elif term.startswith(WILDCARD):
            affix = FieldEndsWith
        else:
            # Wildcard only inside the term: no term filter is applied.
            logger.debug("Customer term %r has an inner wildcard; not filtering", term)
            return MatchAll()
        return (
            FieldEquals(CustomerFields.user_id, term, ignore_case=True)
            | affix(CustomerFields.email, term, ignore_case=True)
            | affix(CustomerFields.first_name, term, ignore_case=True)
            | affix(CustomerFields.last_name, term, ignore_case=True)
            | FieldContains(CustomerFields.content, term)
        )

    return (
        FieldEquals(CustomerFields.user_id, term, ignore_case=True)
        | FieldEquals(CustomerFields.email, term, ignore_case=True)
        | FieldEquals(CustomerFields.first_name, term, ignore_case=True)
        | FieldEquals(CustomerFields.last_name, term, ignore_case=True)
        | FieldEquals(CustomerFields.content, term)
    )


def apply_sorting(
    query: Query, entity_kind: EntityKind, sort_field: Optional[str], sort_direction: str
) -> Query:
    if not sort_field or not sort_field.strip():
        return query

    def key(document: Document):
        if entity_kind is EntityKind.order and sort_field == OrderFields.order_placed_date:
            return OrderDocument(document).order_date
        return document.lookup(sort_field)

    if sort_direction == ASCENDING:
        return query.order_by(key)
    return query.order_by_descending(key)


class QueryBuilder:
    """Turns search parameters into a filtered, counted, sorted and paged query."""

    def build(
        self,
        queryable: Query,
        entity_kind: EntityKind,
        term: Optional[str],
        scope_key: str,
        sort_field: Optional[str],
        sort_direction: str,
        page_index: Optional[int],
        page_size: Optional[int],
    ) -> BuiltQuery:
        term = term.strip() if term is not None else None

        if entity_kind is EntityKind.order:
            query = queryable.where(order_predicate(term, scope_key))
        else:
            query = queryable.where(customer_predicate(term))
            logger.debug("Customer search is not scoped (scope key %r ignored)", scope_key)

        total_item_count = query.count()

        query = apply_sorting(query, entity_kind, sort_field, sort_direction)

        if is_paging_specified(page_index, page_size):
            query = query.skip(page_index * page_size).take(page_size)

        return BuiltQuery(query=query, total_item_count=total_item_count)
