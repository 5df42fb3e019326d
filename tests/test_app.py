"""Tests for app-level routes and error payloads."""


class TestApp:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_index_serves_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Semantic Blog Mastermind" in response.text

    def test_unknown_route_uses_error_payload(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert "error" in response.json()
