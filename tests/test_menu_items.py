"""
Integration tests for the menu item API.
"""

import pytest


@pytest.fixture
def arepa(api_client, arepa_payload) -> dict:
    response = api_client.post("/api/menu-items", json=arepa_payload)
    assert response.status_code == 201
    return response.json()


class TestCreateMenuItem:
    def test_defaults_status_to_available(self, api_client, arepa_payload):
        response = api_client.post("/api/menu-items", json=arepa_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["name"] == "Arepa"
        assert data["price"] == 5
        assert data["category"] == "snack"
        assert data["status"] == "available"

    def test_keeps_given_status(self, api_client, arepa_payload):
        response = api_client.post(
            "/api/menu-items", json={**arepa_payload, "status": "unavailable"}
        )

        assert response.status_code == 201
        assert response.json()["status"] == "unavailable"

    def test_created_item_is_listed(self, api_client, arepa):
        response = api_client.get("/api/menu-items")

        assert response.status_code == 200
        assert [i["id"] for i in response.json()] == [arepa["id"]]

    @pytest.mark.parametrize("missing", ["name", "price", "category"])
    def test_missing_required_field(self, api_client, arepa_payload, missing):
        del arepa_payload[missing]

        response = api_client.post("/api/menu-items", json=arepa_payload)

        assert response.status_code == 400
        assert missing in response.json()["message"]

    def test_empty_name_rejected(self, api_client, arepa_payload):
        response = api_client.post("/api/menu-items", json={**arepa_payload, "name": ""})

        assert response.status_code == 400

    def test_empty_category_rejected(self, api_client, arepa_payload):
        response = api_client.post("/api/menu-items", json={**arepa_payload, "category": ""})

        assert response.status_code == 400
        assert "category" in response.json()["message"]
        assert api_client.get("/api/menu-items").json() == []

    def test_unknown_status_rejected(self, api_client, arepa_payload):
        response = api_client.post(
            "/api/menu-items", json={**arepa_payload, "status": "sold-out"}
        )

        assert response.status_code == 400
        assert api_client.get("/api/menu-items").json() == []

    def test_non_numeric_price_rejected(self, api_client, arepa_payload):
        response = api_client.post(
            "/api/menu-items", json={**arepa_payload, "price": "cheap"}
        )

        assert response.status_code == 400


class TestUpdateMenuItem:
    def test_changes_only_given_fields(self, api_client, arepa):
        response = api_client.put(f"/api/menu-items/{arepa['id']}", json={"price": 6.5})

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 6.5
        assert data["name"] == "Arepa"
        assert data["category"] == "snack"
        assert data["status"] == "available"

    def test_empty_body_returns_record_unchanged(self, api_client, arepa):
        response = api_client.put(f"/api/menu-items/{arepa['id']}", json={})

        assert response.status_code == 200
        assert response.json() == arepa

    def test_unknown_id(self, api_client):
        response = api_client.put("/api/menu-items/does-not-exist", json={"price": 1})

        assert response.status_code == 404
        assert response.json() == {"message": "Menu item not found"}

    def test_null_required_field_rejected(self, api_client, arepa):
        response = api_client.put(f"/api/menu-items/{arepa['id']}", json={"name": None})

        assert response.status_code == 400
        assert api_client.get(f"/api/menu-items/{arepa['id']}").json()["name"] == "Arepa"

    def test_unknown_status_rejected(self, api_client, arepa):
        response = api_client.put(f"/api/menu-items/{arepa['id']}", json={"status": "gone"})

        assert response.status_code == 400

    def test_empty_category_rejected(self, api_client, arepa):
        response = api_client.put(f"/api/menu-items/{arepa['id']}", json={"category": ""})

        assert response.status_code == 400
        assert api_client.get(f"/api/menu-items/{arepa['id']}").json()["category"] == "snack"


class TestDeleteMenuItem:
    def test_delete_returns_no_content(self, api_client, arepa):
        response = api_client.delete(f"/api/menu-items/{arepa['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert api_client.get("/api/menu-items").json() == []

    def test_deleted_item_is_not_found_afterwards(self, api_client, arepa):
        item_url = f"/api/menu-items/{arepa['id']}"
        api_client.delete(item_url)

        assert api_client.get(item_url).status_code == 404
        assert api_client.put(item_url, json={"price": 1}).status_code == 404
        assert api_client.patch(f"{item_url}/status").status_code == 404
        assert api_client.delete(item_url).status_code == 404


class TestToggleAvailability:
    def test_flips_status(self, api_client, arepa):
        response = api_client.patch(f"/api/menu-items/{arepa['id']}/status")

        assert response.status_code == 200
        assert response.json()["status"] == "unavailable"
        assert response.json()["name"] == "Arepa"

    def test_two_toggles_restore_original(self, api_client, arepa):
        api_client.patch(f"/api/menu-items/{arepa['id']}/status")
        response = api_client.patch(f"/api/menu-items/{arepa['id']}/status")

        assert response.json()["status"] == "available"

    def test_unknown_id(self, api_client):
        response = api_client.patch("/api/menu-items/missing/status")

        assert response.status_code == 404
        assert response.json()["message"] == "Menu item not found"


def test_get_single_item(api_client, arepa):
    response = api_client.get(f"/api/menu-items/{arepa['id']}")

    assert response.status_code == 200
    assert response.json() == arepa
