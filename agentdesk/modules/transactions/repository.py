"""Repository protocol for transactions."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .models import Transaction


class TransactionRepository(Protocol):
    async def get_by_id(self, transaction_id: str) -> Transaction | None:
        ...

    async def list_transactions(self) -> Sequence[Transaction]:
        ...

    async def create_transaction(
        self, *, amount: float, agent_id: str, date: datetime
    ) -> Transaction:
        ...

    async def update_transaction(
        self, transaction_id: str, *, amount: float, agent_id: str, date: datetime
    ) -> Transaction | None:
        ...
