"""Async HTTP client for the agentdesk API."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import httpx

from .errors import ServiceUnavailableError, error_for_status

logger = logging.getLogger(__name__)


class AgentDeskClient:
    """Thin wrapper over :class:`httpx.AsyncClient` that unwraps response envelopes.

    Every call returns the envelope's ``data`` member. Error envelopes and
    transport failures are raised as :class:`AgentDeskAPIError` subclasses.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        api_prefix: str = "/api",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.token = token
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AgentDeskClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        url = f"{self.api_prefix}{path}"
        try:
            response = await self._client.request(
                method,
                url,
                params=_clean(params),
                json=body,
                headers=headers,
            )
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ServiceUnavailableError(0, f"Could not reach the server: {exc}") from exc

        if response.status_code == 204:
            return None
        payload = _json_or_none(response)
        if response.status_code >= 400 or (payload or {}).get("status") == "error":
            message = (payload or {}).get("message") or response.reason_phrase
            raise error_for_status(response.status_code, message)
        return (payload or {}).get("data")

    # Users

    async def register(self, first_name: str, last_name: str, email: str, password: str) -> dict:
        body = {"firstName": first_name, "lastName": last_name, "email": email, "password": password}
        return await self.request("POST", "/users/register", body=body)

    async def login(self, email: str, password: str) -> dict:
        data = await self.request("POST", "/users/login", body={"email": email, "password": password})
        self.token = data["token"]
        return data

    async def validate_token(self, session_token: str) -> dict:
        return await self.request("GET", "/users/validate_token", params={"token": session_token})

    async def logout(self, session_token: str) -> None:
        await self.request("POST", "/users/logout", body={"sessionToken": session_token})

    # Agents

    async def list_agents(self) -> list[dict]:
        return await self.request("GET", "/agents")

    async def get_agent(self, agent_id: str) -> dict:
        return await self.request("GET", f"/agents/{agent_id}")

    async def create_agent(self, **fields: Any) -> dict:
        return await self.request("POST", "/agents", body=fields)

    async def replace_agent(self, agent_id: str, **fields: Any) -> dict:
        return await self.request("PUT", f"/agents/{agent_id}", body=fields)

    async def update_agent(self, agent_id: str, **fields: Any) -> dict:
        return await self.request("PATCH", f"/agents/{agent_id}", body=fields)

    async def delete_agent(self, agent_id: str) -> None:
        await self.request("DELETE", f"/agents/{agent_id}")

    # Transactions

    async def transaction_data(self) -> dict:
        return await self.request("GET", "/transactions/transaction-data")

    async def get_transaction(self, transaction_id: str) -> dict:
        return await self.request("GET", f"/transactions/transaction/{transaction_id}")

    async def create_transaction(self, amount: float, agent_id: str, when: date | None = None) -> dict:
        body = {"amount": amount, "agentId": agent_id, "date": when.isoformat() if when else None}
        return await self.request("POST", "/transactions/transaction", body=body)

    async def update_transaction(
        self, transaction_id: str, amount: float, agent_id: str, when: date | None = None
    ) -> dict:
        body = {"amount": amount, "agentId": agent_id, "date": when.isoformat() if when else None}
        return await self.request("PUT", f"/transactions/transaction/{transaction_id}", body=body)

    # Reports and views

    async def report_data(self, start_date: date | None = None, end_date: date | None = None) -> dict:
        return await self.request("GET", "/reports/report-data", params=_window(start_date, end_date))

    async def charts(self, start_date: date | None = None, end_date: date | None = None) -> dict:
        return await self.request("GET", "/reports/charts", params=_window(start_date, end_date))

    async def transaction_view(self, **params: Any) -> dict:
        return await self.request("GET", "/views/transactions", params=params)

    async def agent_view(self, **params: Any) -> dict:
        return await self.request("GET", "/views/agents", params=params)


def _window(start_date: date | None, end_date: date | None) -> dict[str, Any]:
    return {
        "startDate": start_date.isoformat() if start_date else None,
        "endDate": end_date.isoformat() if end_date else None,
    }


def _clean(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _json_or_none(response: httpx.Response) -> dict | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
