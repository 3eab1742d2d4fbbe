"""Aggregations behind the reporting dashboard.

Two series are computed from the transaction set for an optional inclusive
calendar-day window:

* per-agent totals (bar chart), one entry per agent with at least one
  qualifying transaction;
* per-day totals (line chart), ascending by day. When no bound is given the
  line series falls back to a trailing window of ``default_window_days``.

Both series are produced by one call; a store failure surfaces as
:class:`ReportUnavailableError` and no partial report is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agentdesk.core.config import get_settings
from agentdesk.modules.agents.models import agent_display_name
from agentdesk.modules.common import day_bounds, utcnow

from .exceptions import InvalidReportWindowError, ReportUnavailableError
from .models import AgentTotal, DailyTotal, Report, ReportWindow
from .repository import ReportRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportService:
    repository: ReportRepository
    default_window_days: int = 14

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ReportService":
        # Deferred import: the repository module imports this package's models
        from agentdesk.infrastructure.database.repositories.report_repository import (
            SqlReportRepository,
        )

        days = get_settings().reporting.default_window_days
        return cls(SqlReportRepository(session), default_window_days=days)

    def line_window(self, window: ReportWindow, today: Optional[date] = None) -> ReportWindow:
        if not window.is_open:
            return window
        today = today or utcnow().date()
        return ReportWindow(start_date=today - timedelta(days=self.default_window_days))

    async def build_report(self, window: ReportWindow, *, today: Optional[date] = None) -> Report:
        if window.start_date and window.end_date and window.start_date > window.end_date:
            raise InvalidReportWindowError("startDate must not be after endDate")

        line_window = self.line_window(window, today)
        try:
            agent_rows = await self.repository.agent_totals(*day_bounds(window.start_date, window.end_date))
            daily_rows = await self.repository.daily_totals(
                *day_bounds(line_window.start_date, line_window.end_date)
            )
        except SQLAlchemyError as exc:
            logger.exception("Failed to aggregate report data")
            raise ReportUnavailableError("Failed to fetch report data") from exc

        agent_totals: list[AgentTotal] = []
        dangling = 0
        for row in agent_rows:
            if row.agent_id is None or row.first_name is None:
                dangling += 1
                continue
            agent_totals.append(
                AgentTotal(
                    agent_id=row.agent_id,
                    agent_name=agent_display_name(row.first_name, row.last_name),
                    total_amount=float(row.total_amount),
                )
            )
        if dangling:
            logger.warning("Excluded %d transaction groups without an existing agent", dangling)
        agent_totals.sort(key=lambda item: (item.agent_name.casefold(), item.agent_id))

        daily_totals = sorted(
            (DailyTotal(date=row.day, daily_total=float(row.daily_total)) for row in daily_rows),
            key=lambda item: item.date,
        )
        return Report(
            agent_totals=agent_totals,
            daily_totals=daily_totals,
            window=window,
            line_window=line_window,
        )
