"""Filter, sort and paginate in-memory rows for one table view.

``shape_rows`` is a pure function of its inputs: the same rows, table and
state always produce the same page. The pipeline runs in a fixed order:

1. case-insensitive substring search on the table's search text;
2. exact region filter;
3. stable sort by the selected column (numeric, calendar date or
   locale-aware text comparison);
4. pagination, with the requested page clamped to ``[1, max(total_pages, 1)]``.
"""

from __future__ import annotations

import locale
import math
import unicodedata
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from .columns import Column, ColumnKind, TableSpec
from .state import PageSizes, SortDirection, ViewMode, ViewState

RowT = TypeVar("RowT")


@dataclass(slots=True)
class ViewPage(Generic[RowT]):
    rows: list[RowT]
    page: int
    total_pages: int
    page_size: int
    total_rows: int
    state: ViewState
    has_previous: bool = field(init=False)
    has_next: bool = field(init=False)

    def __post_init__(self) -> None:
        self.has_previous = self.page > 1
        self.has_next = self.page < self.total_pages


def shape_rows(rows: Sequence[RowT], table: TableSpec, state: ViewState) -> ViewPage[RowT]:
    column = table.column(state.sort_key)

    visible = _search(rows, table, state.search_term)
    visible = _filter_region(visible, table, state.region_filter)
    visible = sorted(
        visible,
        key=_sort_key(column),
        reverse=state.sort_direction is SortDirection.DESC,
    )

    size = state.page_size
    total_pages = math.ceil(len(visible) / size) if visible else 0
    page = min(max(state.current_page, 1), max(total_pages, 1))
    start = (page - 1) * size
    return ViewPage(
        rows=visible[start : start + size],
        page=page,
        total_pages=total_pages,
        page_size=size,
        total_rows=len(visible),
        state=state if page == state.current_page else state.go_to(page),
    )


def state_for(
    table: TableSpec,
    page_sizes: Optional[PageSizes] = None,
    *,
    search: str = "",
    region: Optional[str] = None,
    sort_key: Optional[str] = None,
    sort_direction: Optional[SortDirection] = None,
    view_mode: ViewMode = ViewMode.PAGED,
    page: int = 1,
) -> ViewState:
    """Build the state described by request parameters, starting from the table defaults."""
    key = sort_key or table.default_sort_key
    table.column(key)
    if sort_direction is None:
        sort_direction = (
            table.default_sort_direction if key == table.default_sort_key else SortDirection.ASC
        )
    return replace(
        table.initial_state(page_sizes),
        search_term=search,
        region_filter=region or None,
        sort_key=key,
        sort_direction=sort_direction,
        view_mode=view_mode,
        current_page=max(1, page),
    )


def _search(rows: Sequence[RowT], table: TableSpec, term: str) -> list[RowT]:
    needle = term.strip().casefold()
    if not needle:
        return list(rows)
    return [row for row in rows if needle in (table.search_text(row) or "").casefold()]


def _filter_region(rows: list[RowT], table: TableSpec, region: str | None) -> list[RowT]:
    if not region:
        return rows
    return [row for row in rows if table.region_of(row) == region]


def _sort_key(column: Column) -> Callable[[Any], tuple]:
    convert = _CONVERTERS[column.kind]

    def key(row: Any) -> tuple:
        value = column.value(row)
        # Missing values sort after present ones in ascending order
        if value is None:
            return (1, _EMPTY[column.kind])
        return (0, convert(value))

    return key


def _as_calendar_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _text(value: Any) -> str:
    # Accented letters collate with their base letter, whatever LC_COLLATE is
    decomposed = unicodedata.normalize("NFKD", str(value).casefold())
    return locale.strxfrm("".join(char for char in decomposed if not unicodedata.combining(char)))


_CONVERTERS: dict[ColumnKind, Callable[[Any], Any]] = {
    ColumnKind.NUMERIC: float,
    ColumnKind.DATE: _as_calendar_date,
    ColumnKind.TEXT: _text,
}

_EMPTY: dict[ColumnKind, Any] = {
    ColumnKind.NUMERIC: 0.0,
    ColumnKind.DATE: date.min,
    ColumnKind.TEXT: "",
}
