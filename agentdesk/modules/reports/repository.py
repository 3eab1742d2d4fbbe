"""Repository protocol for report aggregations."""

from __future__ import annotations

from datetime import date, datetime
from typing import NamedTuple, Optional, Protocol, Sequence


class AgentTotalRow(NamedTuple):
    agent_id: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    total_amount: float


class DailyTotalRow(NamedTuple):
    day: date
    daily_total: float


class ReportRepository(Protocol):
    async def agent_totals(
        self, lower: Optional[datetime], upper: Optional[datetime]
    ) -> Sequence[AgentTotalRow]:
        """Sum of amounts per agent reference; names are ``None`` for dangling references."""
        ...

    async def daily_totals(
        self, lower: Optional[datetime], upper: Optional[datetime]
    ) -> Sequence[DailyTotalRow]:
        ...
