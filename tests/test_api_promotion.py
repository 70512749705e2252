"""
Tests for the promotion API endpoints.

Exercises FastAPI routes end to end against in-memory SQLite.
Validates status codes, response bodies and error mapping.
"""

from decimal import Decimal
from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from promotion_tracking.application.promotion.service import PromotionService
from promotion_tracking.interfaces.promotion.dependencies import get_promotion_service

URL = "/api/v1/promotions"


def _create(client: TestClient, promotion_id: str = "P1", **fields):
    body = {"promotion_id": promotion_id, "name": "Spring Sale", **fields}
    return client.post(URL, json=body)


class TestPromotionLifecycle:
    """The full create → get → update → delete → get flow."""

    def test_spring_sale_scenario(self, client: TestClient) -> None:
        created = _create(client)
        assert created.status_code == 201
        assert created.json()["promotion_id"] == "P1"
        assert created.json()["name"] == "Spring Sale"

        fetched = client.get(f"{URL}/P1")
        assert fetched.status_code == 200
        assert fetched.json() == created.json()

        updated = client.put(f"{URL}/P1", json={"name": "Spring Sale v2"})
        assert updated.status_code == 200
        assert updated.json()["promotion_id"] == "P1"
        assert updated.json()["name"] == "Spring Sale v2"

        deleted = client.delete(f"{URL}/P1")
        assert deleted.status_code == 204
        assert deleted.content == b""

        gone = client.get(f"{URL}/P1")
        assert gone.status_code == 404
        assert "P1" in gone.json()["error"]


class TestCreateEndpoint:
    """Tests for POST /api/v1/promotions."""

    def test_returns_store_assigned_fields(self, client: TestClient) -> None:
        response = _create(
            client,
            product_name="Sneakers",
            discount_percentage="15",
            start_date="2024-03-01",
            end_date="2024-03-31",
        )

        body = response.json()
        assert response.status_code == 201
        assert body["id"] is not None
        assert body["created_at"] is not None
        assert Decimal(body["discount_percentage"]) == Decimal("15")
        assert body["start_date"] == "2024-03-01"

    def test_malformed_json_returns_400_without_writing(self, client: TestClient) -> None:
        response = client.post(
            URL, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid promotion data"}
        assert client.get(URL).json() == []

    def test_missing_required_field_returns_400(self, client: TestClient) -> None:
        response = client.post(URL, json={"name": "No id"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid promotion data"

    def test_out_of_range_discount_returns_400(self, client: TestClient) -> None:
        response = _create(client, discount_percentage=150)
        assert response.status_code == 400

    def test_discount_keeps_two_decimal_places(self, client: TestClient) -> None:
        body = _create(client, discount_percentage="10.10").json()

        assert body["discount_percentage"] == "10.10"
        assert client.get(f"{URL}/P1").json()["discount_percentage"] == "10.10"

    def test_discount_with_three_decimal_places_returns_400(self, client: TestClient) -> None:
        response = _create(client, discount_percentage="12.345")

        assert response.status_code == 400
        assert client.get(URL).json() == []

    def test_duplicate_promotion_id_returns_500(self, client: TestClient) -> None:
        _create(client)

        response = _create(client, name="Again")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create promotion"}


class TestListEndpoint:
    """Tests for GET /api/v1/promotions."""

    def test_empty_store_returns_empty_array(self, client: TestClient) -> None:
        response = client.get(URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_length_matches_persisted_records(self, client: TestClient) -> None:
        for pid in ("P1", "P2", "P3"):
            _create(client, pid)
        client.delete(f"{URL}/P2")

        body = client.get(URL).json()

        assert [p["promotion_id"] for p in body] == ["P1", "P3"]

    def test_failure_includes_underlying_error(self, app: FastAPI, client: TestClient) -> None:
        failing = MagicMock(spec=PromotionService)
        failing.get_all_promotions.side_effect = RuntimeError("connection refused")
        app.dependency_overrides[get_promotion_service] = lambda: failing
        try:
            response = client.get(URL)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to retrieve promotions: connection refused"
        }


class TestGetEndpoint:
    """Tests for GET /api/v1/promotions/{promotion_id}."""

    def test_unknown_id_on_empty_store_is_404(self, client: TestClient) -> None:
        response = client.get(f"{URL}/does-not-exist")

        assert response.status_code == 404
        assert "does-not-exist" in response.json()["error"]

    def test_storage_failure_is_500_with_fixed_message(
        self, app: FastAPI, client: TestClient
    ) -> None:
        failing = MagicMock(spec=PromotionService)
        failing.get_promotion_by_promotion_id.side_effect = RuntimeError("secret detail")
        app.dependency_overrides[get_promotion_service] = lambda: failing
        try:
            response = client.get(f"{URL}/P1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to get promotion"}


class TestUpdateEndpoint:
    """Tests for PUT /api/v1/promotions/{promotion_id}."""

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.put(f"{URL}/ghost", json={"name": "x"})

        assert response.status_code == 404
        assert "ghost" in response.json()["error"]

    def test_omitted_fields_keep_stored_values(self, client: TestClient) -> None:
        _create(client, product_name="Sneakers", discount_percentage="10")

        body = client.put(f"{URL}/P1", json={"discount_percentage": "25"}).json()

        assert body["name"] == "Spring Sale"
        assert body["product_name"] == "Sneakers"
        assert Decimal(body["discount_percentage"]) == Decimal("25")

    def test_explicit_null_clears_optional_field(self, client: TestClient) -> None:
        _create(client, product_name="Sneakers")

        body = client.put(f"{URL}/P1", json={"product_name": None}).json()

        assert body["product_name"] is None

    def test_null_name_is_400(self, client: TestClient) -> None:
        _create(client)

        response = client.put(f"{URL}/P1", json={"name": None})

        assert response.status_code == 400
        assert client.get(f"{URL}/P1").json()["name"] == "Spring Sale"

    def test_body_promotion_id_is_ignored(self, client: TestClient) -> None:
        _create(client)

        body = client.put(f"{URL}/P1", json={"promotion_id": "P2", "name": "Moved?"}).json()

        assert body["promotion_id"] == "P1"
        assert client.get(f"{URL}/P2").status_code == 404

    def test_malformed_json_returns_400_without_writing(self, client: TestClient) -> None:
        _create(client)

        response = client.put(
            f"{URL}/P1", content="[oops", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert client.get(f"{URL}/P1").json()["name"] == "Spring Sale"

    def test_response_matches_stored_record(self, client: TestClient) -> None:
        _create(client, discount_percentage="10")

        updated = client.put(f"{URL}/P1", json={"discount_percentage": "12.34"})
        fetched = client.get(f"{URL}/P1")

        assert updated.status_code == 200
        assert updated.json()["discount_percentage"] == "12.34"
        assert updated.json() == fetched.json()

    def test_storage_failure_is_500_with_fixed_message(
        self, app: FastAPI, client: TestClient
    ) -> None:
        failing = MagicMock(spec=PromotionService)
        failing.update_promotion_by_promotion_id.side_effect = RuntimeError("deadlock detected")
        app.dependency_overrides[get_promotion_service] = lambda: failing
        try:
            response = client.put(f"{URL}/P1", json={"name": "Summer Sale"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update promotion"}

    def test_reapplying_same_update_is_idempotent(self, client: TestClient) -> None:
        _create(client)
        payload = {"name": "Summer Sale", "end_date": "2024-08-31"}

        client.put(f"{URL}/P1", json=payload)
        first = client.get(f"{URL}/P1").json()
        second = client.put(f"{URL}/P1", json=payload)

        assert second.status_code == 200
        assert client.get(f"{URL}/P1").json() == first


class TestDeleteEndpoint:
    """Tests for DELETE /api/v1/promotions/{promotion_id}."""

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.delete(f"{URL}/ghost")

        assert response.status_code == 404
        assert "ghost" in response.json()["error"]

    def test_second_delete_is_404(self, client: TestClient) -> None:
        _create(client)

        assert client.delete(f"{URL}/P1").status_code == 204
        assert client.delete(f"{URL}/P1").status_code == 404

    def test_storage_failure_is_500_with_fixed_message(
        self, app: FastAPI, client: TestClient
    ) -> None:
        failing = MagicMock(spec=PromotionService)
        failing.delete_promotion_by_promotion_id.side_effect = RuntimeError("locked")
        app.dependency_overrides[get_promotion_service] = lambda: failing
        try:
            response = client.delete(f"{URL}/P1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete promotion"}
