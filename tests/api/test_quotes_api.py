"""
API tests for quote tree endpoints.

Tests cover:
- Root list after a manual refresh
- Detail rows
- Version/status polling
- Health, info and website redirect
"""

from fastapi.testclient import TestClient


def _set_watchlist(client: TestClient, entries: list[str]) -> None:
    response = client.put("/watchlist", json={"entries": entries})
    assert response.status_code == 200


# =============================================================================
# ROOT LIST
# =============================================================================


class TestRootItemsAPI:
    """Tests for GET /quotes and POST /quotes/refresh."""

    def test_refresh_returns_root_rows(self, client: TestClient):
        """
        GIVEN a watch-list with an index and a held HK stock
        WHEN I POST /quotes/refresh
        THEN both instruments, the P&L row and the update-time row are returned
        """
        _set_watchlist(client, ["1.000001", "116.00700:100"])

        response = client.post("/quotes/refresh")

        assert response.status_code == 200
        rows = response.json()
        assert [r["kind"] for r in rows] == ["INSTRUMENT", "INSTRUMENT", "TOTAL_PNL", "UPDATE_TIME"]
        assert rows[0]["label"] == "上证指数"
        assert rows[0]["code"] == "1.000001"
        assert rows[0]["expandable"] is True
        assert rows[1]["description"] == "372.400 ↑ 1.14% ［港］"
        assert rows[2]["description"] == "+420.00"
        assert rows[2]["label"] == "今日盈亏"

    def test_get_matches_last_refresh(self, client: TestClient):
        _set_watchlist(client, ["105.AAPL:10"])
        refreshed = client.post("/quotes/refresh").json()

        response = client.get("/quotes")

        assert response.status_code == 200
        assert response.json() == refreshed

    def test_unknown_code_shows_failed_row(self, client: TestClient):
        _set_watchlist(client, ["0.999999"])

        rows = client.post("/quotes/refresh").json()

        assert rows[0]["kind"] == "FAILED"
        assert rows[0]["label"] == "0.999999"
        assert rows[0]["description"] == "加载失败"


# =============================================================================
# DETAILS
# =============================================================================


class TestDetailItemsAPI:
    """Tests for GET /quotes/{code}/details."""

    def test_held_instrument_details(self, client: TestClient):
        _set_watchlist(client, ["105.AAPL:10"])
        client.post("/quotes/refresh")

        response = client.get("/quotes/105.AAPL/details")

        assert response.status_code == 200
        rows = response.json()
        assert [r["label"] for r in rows] == ["昨日收盘", "涨跌点数", "持有股数", "今日盈亏"]
        assert rows[0]["description"] == "186.750"
        assert rows[3]["description"] == "-12.50"

    def test_listed_instrument_without_quote_has_no_details(self, client: TestClient):
        client.put("/watchlist", json={"entries": ["0.999999"]})
        client.post("/quotes/refresh")

        response = client.get("/quotes/0.999999/details")

        assert response.status_code == 200
        assert response.json() == []

    def test_unlisted_instrument_is_404(self, client: TestClient):
        response = client.get("/quotes/0.888888/details")

        assert response.status_code == 404
        assert response.json() == {
            "error": "NOT_FOUND",
            "message": "Instrument not found: 0.888888",
        }


# =============================================================================
# STATUS
# =============================================================================


class TestVersionAPI:
    """Tests for GET /quotes/version."""

    def test_version_advances_after_refresh(self, client: TestClient):
        before = client.get("/quotes/version").json()

        client.post("/quotes/refresh")
        after = client.get("/quotes/version").json()

        assert after["version"] > before["version"]
        assert after["loading"] is False
        assert after["refreshing"] is False
        assert after["last_update_time"] is not None


# =============================================================================
# MISC ENDPOINTS
# =============================================================================


class TestMiscAPI:
    """Tests for health, info and link endpoints."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_info(self, client: TestClient):
        data = client.get("/").json()

        assert data["docs"] == "/docs"
        assert "version" in data

    def test_website_redirect(self, client: TestClient, api_context):
        response = client.get("/website", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == api_context.settings.website_url
