"""Column sets of the agent and transaction tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from agentdesk.modules.agents.models import Agent
from .exceptions import UnknownSortKeyError
from .state import PageSizes, SortDirection, ViewState


class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    DATE = "date"
    TEXT = "text"


@dataclass(slots=True, frozen=True)
class Column:
    key: str
    kind: ColumnKind
    value: Callable[[Any], Any]


@dataclass(slots=True, frozen=True)
class TableSpec:
    name: str
    columns: tuple[Column, ...]
    default_sort_key: str
    default_sort_direction: SortDirection
    search_text: Callable[[Any], str]
    region_of: Callable[[Any], Optional[str]]

    def column(self, key: str) -> Column:
        for column in self.columns:
            if column.key == key:
                return column
        raise UnknownSortKeyError(self.name, key)

    @property
    def keys(self) -> list[str]:
        return [column.key for column in self.columns]

    def initial_state(self, page_sizes: Optional[PageSizes] = None) -> ViewState:
        return ViewState(
            sort_key=self.default_sort_key,
            sort_direction=self.default_sort_direction,
            page_sizes=page_sizes or PageSizes(),
        )


TRANSACTION_TABLE = TableSpec(
    name="transactions",
    columns=(
        Column("agentName", ColumnKind.TEXT, lambda row: row.agent_name),
        Column("amount", ColumnKind.NUMERIC, lambda row: row.amount),
        Column("date", ColumnKind.DATE, lambda row: row.date),
    ),
    default_sort_key="date",
    default_sort_direction=SortDirection.DESC,
    search_text=lambda row: row.agent_name,
    region_of=lambda row: row.agent_region,
)


def _agent_region(agent: Agent) -> str:
    return agent.region.value


AGENT_TABLE = TableSpec(
    name="agents",
    columns=(
        Column("name", ColumnKind.TEXT, lambda agent: agent.display_name),
        Column("region", ColumnKind.TEXT, _agent_region),
        Column("rating", ColumnKind.NUMERIC, lambda agent: agent.rating),
        Column("fee", ColumnKind.NUMERIC, lambda agent: agent.fee),
    ),
    default_sort_key="name",
    default_sort_direction=SortDirection.ASC,
    search_text=lambda agent: agent.display_name,
    region_of=_agent_region,
)

__all__ = [
    "AGENT_TABLE",
    "Column",
    "ColumnKind",
    "TRANSACTION_TABLE",
    "TableSpec",
]
