"""Chart-shaped views and summary figures over a loaded report."""

from __future__ import annotations

from .models import ChartDataset, ChartSeries, Report, ReportSummary

BAR_LABEL = "Total Transaction Amount"
LINE_LABEL = "Daily Transactions Total"


def to_bar_chart(report: Report) -> ChartSeries:
    return ChartSeries(
        labels=[item.agent_name for item in report.agent_totals],
        datasets=[ChartDataset(label=BAR_LABEL, data=[item.total_amount for item in report.agent_totals])],
    )


def to_line_chart(report: Report) -> ChartSeries:
    return ChartSeries(
        labels=[item.date.isoformat() for item in report.daily_totals],
        datasets=[ChartDataset(label=LINE_LABEL, data=[item.daily_total for item in report.daily_totals])],
    )


def summarize_report(report: Report) -> ReportSummary:
    """Totals over the whole loaded report, regardless of any view filter."""
    agent_amounts = [item.total_amount for item in report.agent_totals]
    return ReportSummary(
        total_amount=sum(item.daily_total for item in report.daily_totals),
        max_agent_total=max(agent_amounts) if agent_amounts else None,
        min_agent_total=min(agent_amounts) if agent_amounts else None,
    )
