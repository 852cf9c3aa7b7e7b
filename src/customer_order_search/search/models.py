from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..errors import InvalidArgument, UnrecognizedEntityKind

ResultRecord = Dict[str, Any]

ASCENDING = "Asc"
DESCENDING = "Desc"


class EntityKind(str, Enum):
    customer = "customer"
    order = "order"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EntityKind":
        """Resolve a raw item type, case-insensitively.

        Raises InvalidArgument for blank input and UnrecognizedEntityKind for
        anything outside {customer, order}.
        """
        if value is None or not value.strip():
            raise InvalidArgument("The parameter itemType cannot be empty.")
        try:
            return cls(value.lower())
        except ValueError:
            raise UnrecognizedEntityKind(value) from None


@dataclass
class SearchRequest:
    entity_kind: str
    term: Optional[str] = None
    scope_key: str = ""
    sort_field: Optional[str] = None
    # Only the exact string "Asc" sorts ascending; anything else sorts descending.
    sort_direction: str = ""
    page_index: Optional[int] = None
    page_size: Optional[int] = None
    requested_fields: List[str] = field(default_factory=list)


@dataclass
class SearchOutcome:
    records: List[ResultRecord]
    total_item_count: int
