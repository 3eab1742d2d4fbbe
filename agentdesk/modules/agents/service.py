"""Domain service orchestrating agent CRUD workflows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import AgentNotFoundError, AgentValidationError
from .models import Agent, AgentCreateInput, AgentUpdateInput, Region
from .repository import AgentRepository

logger = logging.getLogger(__name__)

RATING_RANGE = (0.0, 100.0)


@dataclass(slots=True)
class AgentService:
    repository: AgentRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AgentService":
        # Deferred import: the repository module imports this package's models
        from agentdesk.infrastructure.database.repositories.agent_repository import SqlAgentRepository

        return cls(SqlAgentRepository(session))

    async def list_agents(self) -> Sequence[Agent]:
        return await self.repository.list_agents()

    async def get_agent(self, agent_id: str) -> Agent:
        agent = await self.repository.get_by_id(agent_id)
        if agent is None:
            raise AgentNotFoundError(agent_id)
        return agent

    async def create_agent(self, payload: AgentCreateInput) -> Agent:
        values = _validated(
            {
                "first_name": payload.first_name,
                "last_name": payload.last_name,
                "region": payload.region,
                "rating": payload.rating,
                "fee": payload.fee,
            }
        )
        agent = await self.repository.create_agent(**values)
        logger.info("Created agent %s (%s)", agent.id, agent.display_name)
        return agent

    async def replace_agent(self, agent_id: str, payload: AgentCreateInput) -> Agent:
        return await self.update_agent(
            agent_id,
            AgentUpdateInput(
                first_name=payload.first_name,
                last_name=payload.last_name,
                region=payload.region,
                rating=payload.rating,
                fee=payload.fee,
            ),
        )

    async def update_agent(self, agent_id: str, payload: AgentUpdateInput) -> Agent:
        values = _validated(payload.provided())
        if not values:
            return await self.get_agent(agent_id)
        agent = await self.repository.update_agent(agent_id, values)
        if agent is None:
            raise AgentNotFoundError(agent_id)
        logger.info("Updated agent %s fields=%s", agent_id, sorted(values))
        return agent

    async def delete_agent(self, agent_id: str) -> None:
        # Transactions referencing the agent are left untouched.
        if not await self.repository.delete_agent(agent_id):
            raise AgentNotFoundError(agent_id)
        logger.info("Deleted agent %s", agent_id)


def _validated(values: dict[str, Any]) -> dict[str, Any]:
    cleaned: dict[str, Any] = {}
    for name, value in values.items():
        if name in ("first_name", "last_name"):
            value = str(value).strip()
            if not value:
                raise AgentValidationError(f"{name} must not be empty")
        elif name == "region":
            try:
                value = Region(value).value
            except ValueError as exc:
                raise AgentValidationError(f"Unknown region: {value}") from exc
        elif name == "rating":
            low, high = RATING_RANGE
            if not low <= float(value) <= high:
                raise AgentValidationError("rating must be between 0 and 100")
            value = float(value)
        elif name == "fee":
            if float(value) < 0:
                raise AgentValidationError("fee must not be negative")
            value = float(value)
        cleaned[name] = value
    return cleaned
