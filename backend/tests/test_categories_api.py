"""Tests for the categories and runtime-switch endpoints."""


class TestCategories:
    def test_lists_with_counts(self, client) -> None:
        resp = client.get("/api/categories")

        assert resp.status_code == 200
        assert [(c["name"], c["news_count"]) for c in resp.json()["data"]] == [
            ("Big Waves", 2),
            ("Competitions", 3),
            ("Equipment", 0),
        ]

    def test_mock_mode(self, mock_client) -> None:
        body = mock_client.get("/api/categories").json()

        assert body["success"] is True
        assert {"id", "name", "slug", "description", "news_count"} <= set(body["data"][0])

    def test_only_get_is_allowed(self, client) -> None:
        resp = client.post("/api/categories", json={"name": "Longboard"})

        assert resp.status_code == 405
        assert resp.json()["success"] is False


class TestMockModeSwitch:
    def test_reports_mock_mode_off(self, client) -> None:
        assert client.get("/api/mock-mode").json() == {"success": True, "data": {"mockMode": False}}

    def test_reports_mock_mode_on(self, mock_client) -> None:
        assert mock_client.get("/api/mock-mode").json()["data"] == {"mockMode": True}
