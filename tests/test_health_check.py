from unittest.mock import patch


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_document_store_status(self, client):
        response = client.get("/health")
        data = response.json()
        assert data["services"]["document_store"]["status"] == "up"
        assert "response_time_ms" in data["services"]["document_store"]

    def test_health_check_returns_503_when_store_is_down(self, client):
        with patch(
            "modules.core.views.ping_document_store",
            side_effect=ConnectionError("unreachable"),
        ):
            response = client.get("/health")
        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["document_store"] == {"status": "down"}
