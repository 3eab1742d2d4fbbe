"""Reporting aggregations and chart adapters."""

from .charts import summarize_report, to_bar_chart, to_line_chart
from .exceptions import InvalidReportWindowError, ReportError, ReportUnavailableError
from .models import (
    AgentTotal,
    ChartDataset,
    ChartSeries,
    DailyTotal,
    Report,
    ReportSummary,
    ReportWindow,
)
from .service import ReportService

__all__ = [
    "AgentTotal",
    "ChartDataset",
    "ChartSeries",
    "DailyTotal",
    "InvalidReportWindowError",
    "Report",
    "ReportError",
    "ReportService",
    "ReportSummary",
    "ReportUnavailableError",
    "ReportWindow",
    "summarize_report",
    "to_bar_chart",
    "to_line_chart",
]
