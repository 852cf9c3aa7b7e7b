from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw: Optional[str] = os.getenv(name)
    if raw is None:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class SearchConfig:
    """Index collection names and URL prefixes used by the search service.

    Env overrides (see `load_config`):
      - ORDERS_INDEX_NAME
      - CUSTOMERS_INDEX_NAME
      - APPLICATION_BASE_URL
      - ORDER_DATE_FIELDS, CUSTOMER_DATE_FIELDS (comma-separated field names
        whose stored ISO strings are read back as datetimes)
    """

    orders_index_name: str = "commerce_orders_index"
    customers_index_name: str = "commerce_userprofiles_index_master"
    application_base_url: str = "/sitecore/client/Applications/CustomerOrderManager"
    order_date_fields: Tuple[str, ...] = ("orderplaceddate",)
    customer_date_fields: Tuple[str, ...] = ()

    def index_name_for(self, entity_kind: str) -> str:
        if entity_kind == "order":
            return self.orders_index_name
        return self.customers_index_name

    def date_fields_by_index(self) -> Dict[str, Tuple[str, ...]]:
        return {
            self.orders_index_name: self.order_date_fields,
            self.customers_index_name: self.customer_date_fields,
        }


def load_config() -> SearchConfig:
    defaults = SearchConfig()
    return SearchConfig(
        orders_index_name=os.getenv("ORDERS_INDEX_NAME", defaults.orders_index_name),
        customers_index_name=os.getenv(
            "CUSTOMERS_INDEX_NAME", defaults.customers_index_name
        ),
        application_base_url=os.getenv(
            "APPLICATION_BASE_URL", defaults.application_base_url
        ).rstrip("/"),
        order_date_fields=_env_list("ORDER_DATE_FIELDS", defaults.order_date_fields),
        customer_date_fields=_env_list(
            "CUSTOMER_DATE_FIELDS", defaults.customer_date_fields
        ),
    )
