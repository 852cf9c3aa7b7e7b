"""
Pytest configuration and shared fixtures

In-memory order and customer indexes plus a search service wired to them.
"""
from datetime import datetime

import pytest

from customer_order_search.config import SearchConfig
from customer_order_search.index import Document, InMemoryIndex, InMemoryIndexProvider
from customer_order_search.search import SearchService
from customer_order_search.search.projector import ResultProjector

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0)

CONFIG = SearchConfig(
    orders_index_name="orders_test",
    customers_index_name="customers_test",
    application_base_url="/apps/com",
)


def make_order(order_id, confirmation_id, email, store, placed, **extra):
    fields = {
        "orderid": order_id,
        "orderconfirmationid": confirmation_id,
        "email": email,
        "artifactstoreid": store,
        "orderplaceddate": placed,
    }
    fields.update(extra)
    return Document(id=order_id, fields=fields)


def make_customer(user_id, first_name, last_name, email, external_id=None, content="", **extra):
    fields = {
        "user_id": user_id,
        "first_name": first_name,
        "last_name": last_name,
        "email_address": email,
        "externalid": external_id if external_id is not None else user_id,
        "_content": content,
    }
    fields.update(extra)
    return Document(id=user_id, fields=fields)


@pytest.fixture
def orders():
    docs = [
        make_order(
            f"o{i:02d}",
            f"CONF-{i:02d}",
            f"buyer{i % 3}@example.com",
            "Store1",
            datetime(2024, 1, 1 + i),
            total=float(i * 10),
        )
        for i in range(15)
    ]
    docs += [
        make_order("x01", "CONF-X1", "buyer0@example.com", "Store2", datetime(2023, 6, 1), total=5.0),
        make_order("x02", "CONF-00", "other@example.com", "store2", datetime(2023, 7, 1), total=7.0),
    ]
    return docs


@pytest.fixture
def customers():
    return [
        make_customer("u1", "John", "Smith", "john.smith@example.com", "Entity-Customer-u1",
                      content="John Smith loyal", city="Lyon", joined=datetime(2020, 5, 4, 8, 30)),
        make_customer("u2", "Joanna", "Adams", "joanna@example.com", "sitecore/CommerceUsers/123",
                      content="Joanna Adams", city="Paris", joined=datetime(2021, 1, 2)),
        make_customer("u3", "Mark", "Jones", "mark@example.com", "Entity-Customer-u3",
                      content="Mark Jones", city="Nice", joined=datetime(2019, 9, 9)),
        make_customer("u4", "Alice", "Brown", "alice@shop.org", "Entity-Customer-u4",
                      content="Alice Brown", city="Lille", joined=datetime(2022, 2, 2)),
        make_customer("u5", "Bob", "Johnson", "bob@shop.org", "Entity-Customer-u5",
                      content="Bob Johnson", city="Metz", joined=datetime(2018, 8, 8)),
    ]


@pytest.fixture
def provider(orders, customers):
    return InMemoryIndexProvider(
        [
            InMemoryIndex(CONFIG.orders_index_name, orders),
            InMemoryIndex(CONFIG.customers_index_name, customers),
        ]
    )


@pytest.fixture
def service(provider):
    projector = ResultProjector(CONFIG.application_base_url, clock=lambda: FIXED_NOW)
    return SearchService(provider, CONFIG, projector=projector)
