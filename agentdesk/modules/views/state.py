"""Immutable view parameters for the listing tables."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ViewMode(str, Enum):
    PAGED = "paged"
    SCROLL = "scroll"

    def toggled(self) -> "ViewMode":
        return ViewMode.SCROLL if self is ViewMode.PAGED else ViewMode.PAGED


@dataclass(slots=True, frozen=True)
class PageSizes:
    paged: int = 5
    scroll: int = 20

    def for_mode(self, mode: ViewMode) -> int:
        return self.scroll if mode is ViewMode.SCROLL else self.paged


@dataclass(slots=True, frozen=True)
class ViewState:
    """Search, filter, sort and page position of one table.

    Every transition returns a new state. Search, region and view-mode changes
    go back to the first page; sort changes keep the current page.
    """

    sort_key: str
    sort_direction: SortDirection = SortDirection.ASC
    search_term: str = ""
    region_filter: Optional[str] = None
    view_mode: ViewMode = ViewMode.PAGED
    current_page: int = 1
    page_sizes: PageSizes = PageSizes()

    @property
    def page_size(self) -> int:
        return self.page_sizes.for_mode(self.view_mode)

    def with_search(self, term: str) -> "ViewState":
        return replace(self, search_term=term, current_page=1)

    def with_region(self, region: Optional[str]) -> "ViewState":
        return replace(self, region_filter=region or None, current_page=1)

    def toggle_sort(self, key: str) -> "ViewState":
        if key == self.sort_key:
            return replace(self, sort_direction=self.sort_direction.flipped())
        return replace(self, sort_key=key, sort_direction=SortDirection.ASC)

    def toggle_view_mode(self) -> "ViewState":
        return replace(self, view_mode=self.view_mode.toggled(), current_page=1)

    def go_to(self, page: int) -> "ViewState":
        return replace(self, current_page=max(1, page))

    def next_page(self, total_pages: int) -> "ViewState":
        return self.go_to(min(self.current_page + 1, max(total_pages, 1)))

    def previous_page(self) -> "ViewState":
        return self.go_to(self.current_page - 1)
