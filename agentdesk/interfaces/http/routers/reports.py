"""Reporting endpoints backing the dashboard charts."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agentdesk.core.security import get_current_user
from agentdesk.interfaces.http.deps import get_report_service
from agentdesk.interfaces.http.presenters import chart_to_schema, report_to_schema, summary_to_schema
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
from agentdesk.schemas import ApiEnvelope, ChartsResponse, ReportResponse

router = APIRouter(dependencies=[Depends(get_current_user)])


async def _load_report(
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    service: ReportService = Depends(get_report_service),
) -> Report:
    try:
        return await service.build_report(ReportWindow(start_date=start_date, end_date=end_date))
    except InvalidReportWindowError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ReportUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("/report-data", response_model=ApiEnvelope[ReportResponse], summary="Per-agent and per-day totals")
async def report_data(report: Report = Depends(_load_report)):
    return ApiEnvelope(data=report_to_schema(report))


@router.get("/charts", response_model=ApiEnvelope[ChartsResponse], summary="Chart-ready series and summary")
async def charts(report: Report = Depends(_load_report)):
    return ApiEnvelope(
        data=ChartsResponse(
            bar=chart_to_schema(to_bar_chart(report)),
            line=chart_to_schema(to_line_chart(report)),
            summary=summary_to_schema(summarize_report(report)),
        )
    )
