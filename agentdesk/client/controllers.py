"""Stateful controllers for the report dashboard and the listing tables.

Each refresh takes a new request number. A response is applied only while its
number is still the latest one issued, so a slow response to superseded
parameters never overwrites the state of a newer request. A failed refresh
keeps the previously loaded data and records the error.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from agentdesk.modules.agents import Agent, Region
from agentdesk.modules.reports import (
    AgentTotal,
    ChartSeries,
    DailyTotal,
    Report,
    ReportSummary,
    ReportWindow,
    summarize_report,
    to_bar_chart,
    to_line_chart,
)
from agentdesk.modules.transactions import TransactionRow
from agentdesk.modules.views import (
    TRANSACTION_TABLE,
    PageSizes,
    TableSpec,
    ViewPage,
    ViewState,
    shape_rows,
)
from agentdesk.schemas import (
    AgentResponse,
    AgentTotalResponse,
    DailyTotalResponse,
    TransactionRowResponse,
)

from .api import AgentDeskClient
from .errors import AgentDeskAPIError

logger = logging.getLogger(__name__)

class _LatestRequest:
    def __init__(self) -> None:
        self._issued = 0

    def next(self) -> int:
        self._issued += 1
        return self._issued

    def is_current(self, number: int) -> bool:
        return number == self._issued


class ReportDashboard:
    def __init__(self, client: AgentDeskClient) -> None:
        self.client = client
        self.window = ReportWindow()
        self.report: Optional[Report] = None
        self.loading = False
        self.error: Optional[AgentDeskAPIError] = None
        self._requests = _LatestRequest()

    @property
    def bar_chart(self) -> Optional[ChartSeries]:
        return to_bar_chart(self.report) if self.report else None

    @property
    def line_chart(self) -> Optional[ChartSeries]:
        return to_line_chart(self.report) if self.report else None

    @property
    def summary(self) -> Optional[ReportSummary]:
        return summarize_report(self.report) if self.report else None

    async def refresh(self, start_date: Optional[date] = None, end_date: Optional[date] = None) -> bool:
        """Load the report for a window; ``False`` when the result was not applied."""
        number = self._requests.next()
        window = ReportWindow(start_date=start_date, end_date=end_date)
        self.loading = True
        try:
            data = await self.client.report_data(start_date, end_date)
        except AgentDeskAPIError as exc:
            if not self._requests.is_current(number):
                return False
            logger.warning("Report refresh failed: %s", exc)
            self.error = exc
            self.loading = False
            return False

        if not self._requests.is_current(number):
            logger.debug("Dropped superseded report response #%d", number)
            return False
        self.report = _to_report(data, window)
        self.window = window
        self.error = None
        self.loading = False
        return True


class ListingTable:
    """Client-side table over the listing snapshot.

    The full snapshot is fetched once per refresh; searching, filtering,
    sorting and paging never hit the server.
    """

    def __init__(
        self,
        client: AgentDeskClient,
        table: TableSpec = TRANSACTION_TABLE,
        page_sizes: Optional[PageSizes] = None,
    ) -> None:
        self.client = client
        self.table = table
        self.state: ViewState = table.initial_state(page_sizes)
        self.transactions: list[TransactionRow] = []
        self.agents: list[Agent] = []
        self.loading = False
        self.error: Optional[AgentDeskAPIError] = None
        self._requests = _LatestRequest()

    @property
    def rows(self) -> list:
        return self.transactions if self.table is TRANSACTION_TABLE else self.agents

    @property
    def page(self) -> ViewPage:
        page = shape_rows(self.rows, self.table, self.state)
        # Keep the stored page inside the range of the rows currently held
        self.state = page.state
        return page

    async def refresh(self) -> bool:
        number = self._requests.next()
        self.loading = True
        try:
            data = await self.client.transaction_data()
        except AgentDeskAPIError as exc:
            if not self._requests.is_current(number):
                return False
            logger.warning("Listing refresh failed: %s", exc)
            self.error = exc
            self.loading = False
            return False

        if not self._requests.is_current(number):
            logger.debug("Dropped superseded listing response #%d", number)
            return False
        self.transactions = [_to_row(item) for item in data.get("transactions", [])]
        self.agents = [_to_agent(item) for item in data.get("agents", [])]
        self.state = shape_rows(self.rows, self.table, self.state).state
        self.error = None
        self.loading = False
        return True

    def search(self, term: str) -> ViewPage:
        self.state = self.state.with_search(term)
        return self.page

    def filter_region(self, region: Optional[str]) -> ViewPage:
        self.state = self.state.with_region(region)
        return self.page

    def sort_by(self, key: str) -> ViewPage:
        self.table.column(key)
        self.state = self.state.toggle_sort(key)
        return self.page

    def toggle_view_mode(self) -> ViewPage:
        self.state = self.state.toggle_view_mode()
        return self.page

    def next_page(self) -> ViewPage:
        self.state = self.state.next_page(self.page.total_pages)
        return self.page

    def previous_page(self) -> ViewPage:
        self.state = self.state.previous_page()
        return self.page


def _to_report(data: dict, window: ReportWindow) -> Report:
    agent_totals = [AgentTotalResponse.model_validate(item) for item in data.get("agentBarData", [])]
    daily_totals = [DailyTotalResponse.model_validate(item) for item in data.get("transactionLineData", [])]
    return Report(
        agent_totals=[
            AgentTotal(agent_id=item.agent_id, agent_name=item.agent_name, total_amount=item.total_amount)
            for item in agent_totals
        ],
        daily_totals=[DailyTotal(date=item.date, daily_total=item.daily_total) for item in daily_totals],
        window=window,
    )


def _to_row(item: dict) -> TransactionRow:
    row = TransactionRowResponse.model_validate(item)
    return TransactionRow(
        id=row.id,
        amount=row.amount,
        date=row.date,
        agent_id=row.agent_id,
        agent_first_name=row.agent_first_name,
        agent_last_name=row.agent_last_name,
        agent_region=row.agent_region,
        agent_name=row.agent_name,
    )


def _to_agent(item: dict) -> Agent:
    agent = AgentResponse.model_validate(item)
    return Agent(
        id=agent.id,
        first_name=agent.first_name,
        last_name=agent.last_name,
        region=Region(agent.region),
        rating=agent.rating,
        fee=agent.fee,
    )
