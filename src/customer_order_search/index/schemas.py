from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional

from ..errors import FieldNotFound
from ..utils.dates import is_date_value, parse_date


class OrderFields:
    """Field names of the orders index."""

    order_id = "orderid"
    confirmation_id = "orderconfirmationid"
    email = "email"
    artifact_store_id = "artifactstoreid"
    order_placed_date = "orderplaceddate"


class CustomerFields:
    """Field names of the customer profiles index."""

    user_id = "user_id"
    first_name = "first_name"
    last_name = "last_name"
    email = "email_address"
    external_id = "externalid"
    content = "_content"


_MISSING = object()


@dataclass
class Document:
    """A raw index document: an id plus its field mapping."""

    id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def get_field(self, name: str) -> Any:
        """Return the value stored under `name`; raise FieldNotFound if absent."""
        value = self.fields.get(name, _MISSING)
        if value is _MISSING:
            raise FieldNotFound(name, document_id=self.id)
        return value

    def lookup(self, name: str) -> Any:
        """Indexer-style access used for sorting: None when the field is absent."""
        return self.fields.get(name)

    def text(self, name: str) -> str:
        value = self.fields.get(name)
        return "" if value is None else str(value)

    @classmethod
    def from_row(
        cls, row: Mapping[str, Any], *, date_fields: Iterable[str] = ()
    ) -> "Document":
        """Build a document from a stored row shaped {id, metadata: {...}}.

        Fields listed in `date_fields` are parsed from ISO strings into datetimes.
        """
        metadata = row.get("metadata")
        fields = dict(metadata) if isinstance(metadata, Mapping) else {}
        for name in date_fields:
            if name in fields:
                fields[name] = parse_date(fields[name])
        return cls(id=str(row.get("id", "")), fields=fields)


class OrderDocument:
    """Typed view over an orders index document."""

    def __init__(self, document: Document):
        self.document = document

    @property
    def order_id(self) -> str:
        return self.document.text(OrderFields.order_id)

    @property
    def confirmation_id(self) -> str:
        return self.document.text(OrderFields.confirmation_id)

    @property
    def order_date(self) -> Optional[date]:
        value = parse_date(self.document.lookup(OrderFields.order_placed_date))
        return value if is_date_value(value) else None


class CustomerDocument:
    """Typed view over a customer profiles index document."""

    def __init__(self, document: Document):
        self.document = document

    @property
    def user_id(self) -> str:
        return self.document.text(CustomerFields.user_id)

    @property
    def first_name(self) -> str:
        return self.document.text(CustomerFields.first_name)

    @property
    def last_name(self) -> str:
        return self.document.text(CustomerFields.last_name)

    @property
    def email(self) -> str:
        return self.document.text(CustomerFields.email)

    @property
    def external_id(self) -> str:
        return self.document.text(CustomerFields.external_id)


@dataclass
class SearchHit:
    document: Document
    score: Optional[float] = None
