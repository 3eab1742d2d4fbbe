"""SQLAlchemy powered repository for agent persistence."""

from __future__ import annotations

from typing import Any, Sequence

from agentdesk.db.models import Agent as AgentModel
from agentdesk.modules.agents.models import Agent, Region
from agentdesk.modules.common import AsyncRepository


class SqlAgentRepository(AsyncRepository[AgentModel]):
    model = AgentModel

    async def get_by_id(self, agent_id: str) -> Agent | None:
        model = await self.get(agent_id)
        return self.to_domain(model) if model else None

    async def list_agents(self) -> Sequence[Agent]:
        models = await self.list_all(AgentModel.last_name, AgentModel.first_name, AgentModel.id)
        return [self.to_domain(model) for model in models]

    async def create_agent(
        self,
        *,
        first_name: str,
        last_name: str,
        region: str,
        rating: float,
        fee: float,
    ) -> Agent:
        model = await self.add(
            AgentModel(
                first_name=first_name,
                last_name=last_name,
                region=region,
                rating=rating,
                fee=fee,
            )
        )
        return self.to_domain(model)

    async def update_agent(self, agent_id: str, values: dict[str, Any]) -> Agent | None:
        model = await self.get(agent_id)
        if model is None:
            return None
        for name, value in values.items():
            setattr(model, name, value)
        await self.session.flush()
        await self.session.refresh(model)
        return self.to_domain(model)

    async def delete_agent(self, agent_id: str) -> bool:
        model = await self.get(agent_id)
        if model is None:
            return False
        await self.remove(model)
        return True

    @staticmethod
    def to_domain(model: AgentModel) -> Agent:
        return Agent(
            id=str(model.id),
            first_name=model.first_name,
            last_name=model.last_name,
            region=Region(model.region),
            rating=float(model.rating),
            fee=float(model.fee),
        )
