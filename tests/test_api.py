"""Tests for the search HTTP endpoints."""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock

from customer_order_search.api.app import app
from customer_order_search.api.routers.search import get_search_service
from customer_order_search.search import SearchOutcome


@pytest.fixture
def client(service):
    app.dependency_overrides[get_search_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSearchResultsEndpoint:
    def test_order_search_with_paging(self, client):
        response = client.post(
            "/search/results",
            data={
                "itemType": "order",
                "searchTerm": "",
                "Headers": "Language:en|Environment:Store1",
                "Sorting": "dorderplaceddate",
                "PageIndex": "0",
                "PageSize": "10",
                "fields": "email|total",
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["TotalItemCount"] == 15
        assert len(body["Items"]) == 10
        first = body["Items"][0]
        assert list(first) == [
            "orderid", "orderconfirmationid", "ordertargeturl", "orderplaceddate", "email", "total"
        ]
        assert first["orderplaceddate"] == "20240115T000000"

    def test_malformed_paging_returns_everything(self, client):
        response = client.post(
            "/search/results",
            data={"itemType": "customer", "searchTerm": "jo*", "Sorting": "alast_name", "PageIndex": "x", "PageSize": "ten"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["TotalItemCount"] == 4
        assert [item["last_name"] for item in body["Items"]] == ["Adams", "Johnson", "Jones", "Smith"]

    def test_unknown_item_type_is_bad_request(self, client):
        response = client.post("/search/results", data={"itemType": "widget"})
        assert response.status_code == 400
        assert "widget" in response.json()["detail"]

    def test_missing_item_type_is_bad_request(self, client):
        response = client.post("/search/results", data={"searchTerm": "jo*"})
        assert response.status_code == 400

    def test_missing_requested_field_is_unprocessable(self, client):
        response = client.post("/search/results", data={"itemType": "customer", "fields": "loyalty_tier"})
        assert response.status_code == 422

    def test_index_failure_is_server_error(self):
        failing = Mock()
        failing.get_search_results.side_effect = ConnectionError("index unavailable")
        app.dependency_overrides[get_search_service] = lambda: failing
        try:
            response = TestClient(app).post("/search/results", data={"itemType": "order"})
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 500
        assert "index unavailable" in response.json()["detail"]

    def test_request_fields_reach_service(self):
        recorder = Mock()
        recorder.get_search_results.return_value = SearchOutcome(records=[], total_item_count=0)
        app.dependency_overrides[get_search_service] = lambda: recorder
        try:
            response = TestClient(app).post(
                "/search/results",
                data={
                    "itemType": "customer",
                    "searchTerm": "*son",
                    "Sorting": "zemail",
                    "PageIndex": "2",
                    "PageSize": "5",
                    "fields": "a|b",
                    "Headers": "Environment:StoreX",
                },
            )
        finally:
            app.dependency_overrides.clear()
        assert response.json() == {"Items": [], "TotalItemCount": 0}
        request = recorder.get_search_results.call_args.args[0]
        assert request.entity_kind == "customer"
        assert request.term == "*son"
        assert (request.sort_direction, request.sort_field) == ("", "email")
        assert (request.page_index, request.page_size) == (2, 5)
        assert request.requested_fields == ["a", "b"]
        assert request.scope_key == "StoreX"


class TestOpsEndpoints:
    def test_health(self):
        assert TestClient(app).get("/health").json() == {"status": "ok"}

    def test_openapi_lists_search_route(self):
        response = TestClient(app).get("/openapi.json")
        assert response.status_code == 200
        assert "/search/results" in response.json()["paths"]
