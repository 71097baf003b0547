"""Integration tests for the error body shape."""

import pytest

pytestmark = pytest.mark.integration


class TestErrorFormat:
    def test_auth_error_has_error_key(self, api_client):
        response = api_client.post("/api/products/save", {}, format="json")
        assert response.status_code == 401
        data = response.json()
        assert set(data) == {"error"}
        assert isinstance(data["error"], str)

    def test_permission_error_has_error_key(self, customer_client):
        response = customer_client.post("/api/products/save", {}, format="json")
        assert response.status_code == 403
        assert set(response.json()) == {"error"}

    def test_parse_error_has_error_key(self, admin_client):
        response = admin_client.post(
            "/api/products/save", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert set(response.json()) == {"error"}

    def test_method_not_allowed_has_error_key(self, api_client):
        response = api_client.get("/api/products/save")
        assert response.status_code == 405
        assert set(response.json()) == {"error"}
