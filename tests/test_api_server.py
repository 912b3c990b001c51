"""Tests for the FastAPI shopping-list endpoint."""
import pytest
from fastapi.testclient import TestClient

from pantry_checker.api.server import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def reference_request():
    return {
        "target_servings": 6,
        "recipe": {
            "base_servings": 4,
            "ingredients": [
                {"name": "Flour", "quantity": 500, "unit": "g"},
                {"name": "Sugar", "quantity": 200, "unit": "g"},
                {"name": "Milk", "quantity": 1, "unit": "l"},
                {"name": "Eggs", "quantity": 4, "unit": "pcs"},
            ],
        },
        "pantry": [
            {"name": "Flour", "quantity": 1, "unit": "kg"},
            {"name": "Sugar", "quantity": 150, "unit": "g"},
            {"name": "Milk", "quantity": 500, "unit": "ml"},
            {"name": "Eggs", "quantity": 2, "unit": "pcs"},
        ],
    }


class TestShoppingListEndpoint:
    """Tests for POST /api/shopping-list."""

    def test_reference_request(self, client, reference_request):
        response = client.post("/api/shopping-list", json=reference_request)

        assert response.status_code == 200
        data = response.json()
        assert data["has_everything"] is False
        assert data["shortages"] == [
            {"name": "Sugar", "quantity": 150.0, "unit": "g"},
            {"name": "Milk", "quantity": 1.0, "unit": "l"},
            {"name": "Eggs", "quantity": 4.0, "unit": "pcs"},
        ]

    def test_zero_base_servings_is_422(self, client, reference_request):
        reference_request["recipe"]["base_servings"] = 0
        response = client.post("/api/shopping-list", json=reference_request)

        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "VALIDATION_FAILURE"

    def test_unsupported_conversion_is_422(self, client, reference_request):
        reference_request["pantry"][3]["unit"] = "g"
        response = client.post("/api/shopping-list", json=reference_request)

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error_code"] == "UNSUPPORTED_CONVERSION"
        assert detail["context"] == {"from_unit": "g", "to_unit": "pcs"}

    def test_malformed_body_is_rejected(self, client):
        response = client.post("/api/shopping-list", json={"recipe": {}})
        assert response.status_code == 422
