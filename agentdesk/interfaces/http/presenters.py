"""Conversions from domain objects to response schemas."""

from agentdesk.modules.agents import Agent
from agentdesk.modules.reports import ChartSeries, Report, ReportSummary
from agentdesk.modules.transactions import Transaction, TransactionRow
from agentdesk.modules.users import User
from agentdesk.modules.views import ViewPage, ViewState
from agentdesk.schemas import (
    AgentResponse,
    AgentTotalResponse,
    ChartDatasetResponse,
    ChartSeriesResponse,
    DailyTotalResponse,
    ReportResponse,
    ReportSummaryResponse,
    TransactionResponse,
    TransactionRowResponse,
    UserResponse,
    ViewPageResponse,
    ViewStateResponse,
)


def user_to_schema(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        created_at=user.created_at,
    )


def agent_to_schema(agent: Agent) -> AgentResponse:
    return AgentResponse(
        id=agent.id,
        first_name=agent.first_name,
        last_name=agent.last_name,
        name=agent.display_name,
        region=agent.region,
        rating=agent.rating,
        fee=agent.fee,
    )


def transaction_to_schema(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        amount=transaction.amount,
        date=transaction.date,
        agent_id=transaction.agent_id,
    )


def row_to_schema(row: TransactionRow) -> TransactionRowResponse:
    return TransactionRowResponse.model_validate(row)


def report_to_schema(report: Report) -> ReportResponse:
    return ReportResponse(
        agent_bar_data=[
            AgentTotalResponse(
                agent_id=item.agent_id,
                agent_name=item.agent_name,
                total_amount=item.total_amount,
            )
            for item in report.agent_totals
        ],
        transaction_line_data=[
            DailyTotalResponse(date=item.date, daily_total=item.daily_total)
            for item in report.daily_totals
        ],
        start_date=report.window.start_date,
        end_date=report.window.end_date,
    )


def chart_to_schema(series: ChartSeries) -> ChartSeriesResponse:
    return ChartSeriesResponse(
        labels=list(series.labels),
        datasets=[ChartDatasetResponse(label=item.label, data=list(item.data)) for item in series.datasets],
    )


def summary_to_schema(summary: ReportSummary) -> ReportSummaryResponse:
    return ReportSummaryResponse(
        total_amount=summary.total_amount,
        max_agent_total=summary.max_agent_total,
        min_agent_total=summary.min_agent_total,
    )


def state_to_schema(state: ViewState) -> ViewStateResponse:
    return ViewStateResponse(
        search_term=state.search_term,
        region_filter=state.region_filter,
        sort_key=state.sort_key,
        sort_direction=state.sort_direction.value,
        view_mode=state.view_mode.value,
        current_page=state.current_page,
    )


def page_to_schema(page: ViewPage, rows: list) -> ViewPageResponse:
    return ViewPageResponse(
        rows=rows,
        page=page.page,
        total_pages=page.total_pages,
        page_size=page.page_size,
        total_rows=page.total_rows,
        has_previous=page.has_previous,
        has_next=page.has_next,
        state=state_to_schema(page.state),
    )
