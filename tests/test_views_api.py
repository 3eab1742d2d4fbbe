"""Tests for the shaped table endpoints and the HTML pages."""

import pytest
from sqlalchemy.exc import OperationalError

from agentdesk.interfaces.http.deps import get_report_service
from agentdesk.modules.reports import ReportService

pytestmark = pytest.mark.asyncio


class TestTransactionView:
    """GET /api/views/transactions."""

    async def test_default_page(self, client, auth_headers, seed) -> None:
        """The first page is newest first with paging metadata."""
        await seed()
        data = (await client.get("/api/views/transactions", headers=auth_headers)).json()["data"]
        assert [row["amount"] for row in data["rows"]] == [4000, 500, 700, 300]
        assert data["page"] == 1
        assert data["totalPages"] == 1
        assert data["pageSize"] == 5
        assert data["hasNext"] is False
        assert data["state"]["sortKey"] == "date"
        assert data["state"]["sortDirection"] == "desc"

    async def test_search_region_and_sort(self, client, auth_headers, seed) -> None:
        """Filters and sort parameters shape the page."""
        await seed()
        data = (
            await client.get(
                "/api/views/transactions",
                params={"region": "South", "sortKey": "amount", "sortDirection": "asc"},
                headers=auth_headers,
            )
        ).json()["data"]
        assert [row["amount"] for row in data["rows"]] == [500, 700]

        data = (
            await client.get("/api/views/transactions", params={"search": "c ag"}, headers=auth_headers)
        ).json()["data"]
        assert [row["agentName"] for row in data["rows"]] == ["C Agent"]

    async def test_page_is_clamped(self, client, auth_headers, seed) -> None:
        """Pages beyond the end come back as the last page."""
        await seed()
        data = (
            await client.get(
                "/api/views/transactions", params={"page": 9, "viewMode": "scroll"}, headers=auth_headers
            )
        ).json()["data"]
        assert data["page"] == 1
        assert data["pageSize"] == 20
        assert data["state"]["currentPage"] == 1

    async def test_unknown_sort_key(self, client, auth_headers) -> None:
        """Sorting by a missing column is a 400."""
        response = await client.get("/api/views/transactions", params={"sortKey": "fee"}, headers=auth_headers)
        assert response.status_code == 400
        assert "fee" in response.json()["message"]


class TestAgentView:
    """GET /api/views/agents."""

    async def test_sort_by_fee_descending(self, client, auth_headers, seed) -> None:
        """Agents can be sorted numerically."""
        await seed([])
        data = (
            await client.get(
                "/api/views/agents",
                params={"sortKey": "fee", "sortDirection": "desc"},
                headers=auth_headers,
            )
        ).json()["data"]
        assert [row["fee"] for row in data["rows"]] == [2500, 1500, 500]
        assert data["rows"][0]["name"] == "C Agent"


class TestPages:
    """Server-rendered pages."""

    async def test_redirects_without_session(self, client) -> None:
        """Pages send anonymous browsers to the login page."""
        response = await client.get("/transactions")
        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    async def test_login_page(self, client) -> None:
        """The login page renders without a session."""
        response = await client.get("/login")
        assert response.status_code == 200
        assert "Log in" in response.text

    async def test_pages_with_session(self, client, user, seed) -> None:
        """A logged-in browser sees the rendered tables."""
        await seed()
        login = await client.post(
            "/api/users/login", json={"email": user.email, "password": "Secret!pass1"}
        )
        client.cookies.set("session_token", login.json()["data"]["sessionToken"])

        response = await client.get("/transactions")
        assert response.status_code == 200
        assert "C Agent" in response.text

        response = await client.get("/agents", params={"sortKey": "fee"})
        assert response.status_code == 200
        assert "A Agent" in response.text

        response = await client.get("/reports", params={"startDate": "2024-01-01", "endDate": "2024-01-31"})
        assert response.status_code == 200
        assert "5500.00" in response.text

    async def test_inverted_report_window_falls_back(self, client, user, seed) -> None:
        """An inverted window renders the open report with the error shown."""
        await seed()
        await _log_in(client, user)
        response = await client.get("/reports", params={"startDate": "2024-02-01", "endDate": "2024-01-01"})
        assert response.status_code == 200
        assert "startDate must not be after endDate" in response.text
        assert "C Agent" in response.text
        assert "Highest agent total: 4000.00" in response.text

    async def test_report_page_store_failure_with_inverted_window(self, app, client, user) -> None:
        """A store failure while rendering the fallback report is a 503."""
        await _log_in(client, user)
        app.dependency_overrides[get_report_service] = lambda: ReportService(UnreachableRepository())
        response = await client.get("/reports", params={"startDate": "2024-02-01", "endDate": "2024-01-01"})
        assert response.status_code == 503
        assert response.json()["status"] == "error"


class UnreachableRepository:
    async def agent_totals(self, lower, upper):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    async def daily_totals(self, lower, upper):
        raise OperationalError("SELECT", {}, Exception("database is locked"))


async def _log_in(client, user) -> None:
    login = await client.post("/api/users/login", json={"email": user.email, "password": "Secret!pass1"})
    client.cookies.set("session_token", login.json()["data"]["sessionToken"])
