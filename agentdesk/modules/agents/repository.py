"""Repository protocol for agent persistence operations."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from .models import Agent


class AgentRepository(Protocol):
    async def get_by_id(self, agent_id: str) -> Agent | None:
        ...

    async def list_agents(self) -> Sequence[Agent]:
        ...

    async def create_agent(
        self,
        *,
        first_name: str,
        last_name: str,
        region: str,
        rating: float,
        fee: float,
    ) -> Agent:
        ...

    async def update_agent(self, agent_id: str, values: dict[str, Any]) -> Agent | None:
        ...

    async def delete_agent(self, agent_id: str) -> bool:
        ...
