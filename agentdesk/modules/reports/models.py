"""Report domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(slots=True, frozen=True)
class ReportWindow:
    """Inclusive calendar-day window; either bound may be open."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_open(self) -> bool:
        return self.start_date is None and self.end_date is None


@dataclass(slots=True)
class AgentTotal:
    agent_id: str
    agent_name: str
    total_amount: float


@dataclass(slots=True)
class DailyTotal:
    date: date
    daily_total: float


@dataclass(slots=True)
class Report:
    agent_totals: list[AgentTotal] = field(default_factory=list)
    daily_totals: list[DailyTotal] = field(default_factory=list)
    window: ReportWindow = field(default_factory=ReportWindow)
    line_window: ReportWindow = field(default_factory=ReportWindow)


@dataclass(slots=True)
class ReportSummary:
    total_amount: float
    max_agent_total: Optional[float]
    min_agent_total: Optional[float]


@dataclass(slots=True)
class ChartDataset:
    label: str
    data: list[float]


@dataclass(slots=True)
class ChartSeries:
    labels: list[str]
    datasets: list[ChartDataset]
