"""Client-side shaping of the agent and transaction tables."""

from .columns import AGENT_TABLE, TRANSACTION_TABLE, Column, ColumnKind, TableSpec
from .engine import ViewPage, shape_rows, state_for
from .exceptions import UnknownSortKeyError, ViewError
from .state import PageSizes, SortDirection, ViewMode, ViewState

__all__ = [
    "AGENT_TABLE",
    "Column",
    "ColumnKind",
    "PageSizes",
    "SortDirection",
    "TRANSACTION_TABLE",
    "TableSpec",
    "UnknownSortKeyError",
    "ViewError",
    "ViewMode",
    "ViewPage",
    "ViewState",
    "shape_rows",
    "state_for",
]
