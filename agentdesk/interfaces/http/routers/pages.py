"""Server-rendered pages for browsers holding a session cookie."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from agentdesk.core.security import get_page_user
from agentdesk.interfaces.http.deps import (
    get_agent_service,
    get_report_service,
    get_transaction_service,
)
from agentdesk.interfaces.http.routers.views import ViewParams
from agentdesk.interfaces.http.templating import templates
from agentdesk.modules.agents import AgentService, Region
from agentdesk.modules.reports import (
    InvalidReportWindowError,
    Report,
    ReportService,
    ReportUnavailableError,
    ReportWindow,
    summarize_report,
    to_bar_chart,
    to_line_chart,
)
from agentdesk.modules.transactions import TransactionService
from agentdesk.modules.users import User
from agentdesk.modules.views import AGENT_TABLE, TRANSACTION_TABLE, shape_rows

router = APIRouter(include_in_schema=False)


def _to_login() -> RedirectResponse:
    return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def homepage(user: Optional[User] = Depends(get_page_user)):
    if user is None:
        return _to_login()
    return RedirectResponse("/transactions", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html", {})


@router.get("/agents", response_class=HTMLResponse)
async def agents_page(
    request: Request,
    params: ViewParams = Depends(),
    user: Optional[User] = Depends(get_page_user),
    service: AgentService = Depends(get_agent_service),
):
    if user is None:
        return _to_login()
    page = shape_rows(await service.list_agents(), AGENT_TABLE, params.state(AGENT_TABLE))
    return templates.TemplateResponse(
        request,
        "agents.html",
        {"user": user, "page": page, "regions": [region.value for region in Region]},
    )


@router.get("/transactions", response_class=HTMLResponse)
async def transactions_page(
    request: Request,
    params: ViewParams = Depends(),
    user: Optional[User] = Depends(get_page_user),
    service: TransactionService = Depends(get_transaction_service),
):
    if user is None:
        return _to_login()
    snapshot = await service.listing_snapshot()
    page = shape_rows(snapshot.transactions, TRANSACTION_TABLE, params.state(TRANSACTION_TABLE))
    return templates.TemplateResponse(
        request,
        "transactions.html",
        {
            "user": user,
            "page": page,
            "agents": snapshot.agents,
            "regions": [region.value for region in Region],
        },
    )


@router.get("/reports", response_class=HTMLResponse)
async def reports_page(
    request: Request,
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    user: Optional[User] = Depends(get_page_user),
    service: ReportService = Depends(get_report_service),
):
    if user is None:
        return _to_login()
    error = None
    try:
        report = await _page_report(service, ReportWindow(start_date=start_date, end_date=end_date))
    except InvalidReportWindowError as exc:
        error = str(exc)
        report = await _page_report(service, ReportWindow())
    return templates.TemplateResponse(
        request,
        "reports.html",
        {
            "user": user,
            "report": report,
            "bar": to_bar_chart(report),
            "line": to_line_chart(report),
            "summary": summarize_report(report),
            "error": error,
        },
    )


async def _page_report(service: ReportService, window: ReportWindow) -> Report:
    try:
        return await service.build_report(window)
    except ReportUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
