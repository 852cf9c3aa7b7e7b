from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Set

from ..index.schemas import CustomerDocument, Document, OrderDocument, OrderFields
from ..utils.dates import is_date_value, to_iso_date
from .models import EntityKind, ResultRecord

logger = logging.getLogger(__name__)

COMMERCE_USERS_MARKER = "CommerceUsers"
CUSTOMER_TEMPLATE = "Customer"


class RecordBuilder:
    """Insertion-ordered record with case-insensitive key collision checks."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self._folded: Set[str] = set()

    def __contains__(self, key: str) -> bool:
        return key.casefold() in self._folded

    def add(self, key: str, value: Any) -> bool:
        """Insert `key` unless a case-insensitive match already exists."""
        if key in self:
            return False
        self._values[key] = value
        self._folded.add(key.casefold())
        return True

    def add_requested(self, document: Document, fields: Iterable[str]) -> None:
        for name in fields:
            if name in self:
                logger.debug("Requested field %r already present; skipping", name)
                continue
            value = document.get_field(name)
            self.add(name, to_iso_date(value) if is_date_value(value) else value)

    def build(self) -> ResultRecord:
        return dict(self._values)


class ResultProjector:
    """Shapes raw index documents into flat records for the client grid."""

    def __init__(
        self,
        application_base_url: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.application_base_url = application_base_url.rstrip("/")
        self.clock = clock

    def target_url(self, page: str, target: str) -> str:
        return f"{self.application_base_url}/{page}?target={target}"

    def project(
        self, entity_kind: EntityKind, document: Document, requested_fields: Iterable[str]
    ) -> ResultRecord:
        if entity_kind is EntityKind.order:
            builder = self._order_record(OrderDocument(document))
        else:
            builder = self._customer_record(CustomerDocument(document))
        builder.add_requested(document, requested_fields)
        return builder.build()

    def _order_record(self, order: OrderDocument) -> RecordBuilder:
        order_date = order.order_date
        builder = RecordBuilder()
        builder.add(OrderFields.order_id, order.order_id)
        builder.add(OrderFields.confirmation_id, order.confirmation_id)
        builder.add("ordertargeturl", self.target_url("Order", order.order_id))
        builder.add(
            OrderFields.order_placed_date,
            to_iso_date(order_date) if order_date is not None else "",
        )
        return builder

    def _customer_record(self, customer: CustomerDocument) -> RecordBuilder:
        user_id = customer.user_id
        external_id = customer.external_id
        builder = RecordBuilder()
        builder.add("Id", user_id)
        builder.add("first_name", customer.first_name)
        builder.add("last_name", customer.last_name)
        builder.add("email_address", customer.email)
        builder.add(
            "ItemId",
            user_id if COMMERCE_USERS_MARKER in external_id else external_id,
        )
        builder.add("Template", CUSTOMER_TEMPLATE)
        # Stand-in until a last-order lookup over the orders index exists.
        builder.add("LastOrderDate", to_iso_date(self.clock()))
        builder.add("customertargeturl", self.target_url("Customer", user_id))
        return builder
