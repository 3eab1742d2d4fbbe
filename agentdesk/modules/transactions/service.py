"""Transaction use cases and the listing snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from agentdesk.modules.agents.models import NO_AGENT_LABEL, Agent
from agentdesk.modules.agents.repository import AgentRepository
from agentdesk.modules.common import as_utc, utcnow

from .exceptions import TransactionNotFoundError, TransactionValidationError, UnknownAgentError
from .models import ListingSnapshot, Transaction, TransactionInput, TransactionRow
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionService:
    repository: TransactionRepository
    agents: AgentRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransactionService":
        # Deferred import: the repository modules import this package's models
        from agentdesk.infrastructure.database.repositories.agent_repository import SqlAgentRepository
        from agentdesk.infrastructure.database.repositories.transaction_repository import (
            SqlTransactionRepository,
        )

        return cls(SqlTransactionRepository(session), SqlAgentRepository(session))

    async def get_transaction(self, transaction_id: str) -> Transaction:
        transaction = await self.repository.get_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction

    async def create_transaction(self, payload: TransactionInput) -> Transaction:
        await self._validate(payload)
        transaction = await self.repository.create_transaction(
            amount=float(payload.amount),
            agent_id=payload.agent_id,
            date=_effective_date(payload.date),
        )
        logger.info(
            "Created transaction %s amount=%s agent=%s",
            transaction.id,
            transaction.amount,
            transaction.agent_id,
        )
        return transaction

    async def update_transaction(self, transaction_id: str, payload: TransactionInput) -> Transaction:
        current = await self.get_transaction(transaction_id)
        await self._validate(payload)
        updated = await self.repository.update_transaction(
            transaction_id,
            amount=float(payload.amount),
            agent_id=payload.agent_id,
            date=as_utc(payload.date) if payload.date else current.date,
        )
        if updated is None:
            raise TransactionNotFoundError(transaction_id)
        logger.info("Updated transaction %s", transaction_id)
        return updated

    async def listing_snapshot(self) -> ListingSnapshot:
        agents = list(await self.agents.list_agents())
        transactions = await self.repository.list_transactions()
        by_id = {agent.id: agent for agent in agents}

        rows = [_to_row(transaction, by_id.get(transaction.agent_id)) for transaction in transactions]
        dangling = sum(1 for row in rows if row.agent_id and row.agent_id not in by_id)
        if dangling:
            logger.warning("%d transactions reference agents that no longer exist", dangling)
        return ListingSnapshot(transactions=rows, agents=agents)

    async def _validate(self, payload: TransactionInput) -> None:
        if payload.amount is None or payload.amount <= 0:
            raise TransactionValidationError("Amount must be a positive number")
        if not payload.agent_id:
            raise TransactionValidationError("Please select an agent")
        if await self.agents.get_by_id(payload.agent_id) is None:
            raise UnknownAgentError(f"Agent not found: {payload.agent_id}")


def _effective_date(value: datetime | None) -> datetime:
    return as_utc(value) if value is not None else utcnow()


def _to_row(transaction: Transaction, agent: Agent | None) -> TransactionRow:
    if agent is None:
        return TransactionRow(
            id=transaction.id,
            amount=transaction.amount,
            date=transaction.date,
            agent_id=transaction.agent_id,
            agent_first_name=None,
            agent_last_name=None,
            agent_region=None,
            agent_name=NO_AGENT_LABEL,
        )
    return TransactionRow(
        id=transaction.id,
        amount=transaction.amount,
        date=transaction.date,
        agent_id=transaction.agent_id,
        agent_first_name=agent.first_name,
        agent_last_name=agent.last_name,
        agent_region=agent.region.value,
        agent_name=agent.display_name,
    )
