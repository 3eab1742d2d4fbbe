"""SQLAlchemy implementation for the transaction repository."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc

from agentdesk.db.models import Transaction as TransactionModel
from agentdesk.modules.common import AsyncRepository, as_utc
from agentdesk.modules.transactions.models import Transaction


class SqlTransactionRepository(AsyncRepository[TransactionModel]):
    model = TransactionModel

    async def get_by_id(self, transaction_id: str) -> Transaction | None:
        model = await self.get(transaction_id)
        return self._to_domain(model) if model else None

    async def list_transactions(self) -> Sequence[Transaction]:
        models = await self.list_all(desc(TransactionModel.date), TransactionModel.id)
        return [self._to_domain(model) for model in models]

    async def create_transaction(
        self, *, amount: float, agent_id: str, date: datetime
    ) -> Transaction:
        model = await self.add(TransactionModel(amount=amount, agent_id=agent_id, date=date))
        return self._to_domain(model)

    async def update_transaction(
        self, transaction_id: str, *, amount: float, agent_id: str, date: datetime
    ) -> Transaction | None:
        model = await self.get(transaction_id)
        if model is None:
            return None
        model.amount = amount
        model.agent_id = agent_id
        model.date = date
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: TransactionModel) -> Transaction:
        return Transaction(
            id=str(model.id),
            amount=float(model.amount),
            date=as_utc(model.date),
            agent_id=model.agent_id,
        )
