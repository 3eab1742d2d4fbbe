"""SQLAlchemy aggregation queries for the reporting dashboard."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agentdesk.db.models import Agent as AgentModel
from agentdesk.db.models import Transaction as TransactionModel
from agentdesk.modules.reports.repository import AgentTotalRow, DailyTotalRow


class SqlReportRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def agent_totals(
        self, lower: Optional[datetime], upper: Optional[datetime]
    ) -> Sequence[AgentTotalRow]:
        total = func.sum(TransactionModel.amount).label("total_amount")
        stmt = (
            select(TransactionModel.agent_id, AgentModel.first_name, AgentModel.last_name, total)
            .outerjoin(AgentModel, AgentModel.id == TransactionModel.agent_id)
            .group_by(TransactionModel.agent_id, AgentModel.first_name, AgentModel.last_name)
        )
        result = await self._session.execute(_within(stmt, lower, upper))
        return [
            AgentTotalRow(agent_id, first_name, last_name, float(amount or 0))
            for agent_id, first_name, last_name, amount in result.all()
        ]

    async def daily_totals(
        self, lower: Optional[datetime], upper: Optional[datetime]
    ) -> Sequence[DailyTotalRow]:
        # date() truncates to the calendar day on SQLite, PostgreSQL and MySQL alike
        day = func.date(TransactionModel.date).label("day")
        stmt = (
            select(day, func.sum(TransactionModel.amount).label("daily_total"))
            .group_by(day)
            .order_by(day)
        )
        result = await self._session.execute(_within(stmt, lower, upper))
        return [DailyTotalRow(_as_date(value), float(amount or 0)) for value, amount in result.all()]


def _within(stmt: Select, lower: Optional[datetime], upper: Optional[datetime]) -> Select:
    if lower is not None:
        stmt = stmt.where(TransactionModel.date >= lower)
    if upper is not None:
        stmt = stmt.where(TransactionModel.date < upper)
    return stmt


def _as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])
