"""Tests for the table shaping pipeline and view state transitions."""

from datetime import datetime, timezone

import pytest

from agentdesk.modules.agents import NO_AGENT_LABEL, Agent, Region
from agentdesk.modules.transactions import TransactionRow
from agentdesk.modules.views import (
    AGENT_TABLE,
    TRANSACTION_TABLE,
    PageSizes,
    SortDirection,
    UnknownSortKeyError,
    ViewMode,
    shape_rows,
    state_for,
)


def _row(index: int, name: str, amount: float, day: int, region: str | None = "North") -> TransactionRow:
    return TransactionRow(
        id=f"t{index}",
        amount=amount,
        date=datetime(2024, 1, day, 8, tzinfo=timezone.utc),
        agent_id=f"agent-{name}" if region else None,
        agent_first_name=name if region else None,
        agent_last_name="Doe" if region else None,
        agent_region=region,
        agent_name=f"{name} Doe" if region else NO_AGENT_LABEL,
    )


@pytest.fixture
def rows() -> list[TransactionRow]:
    return [
        _row(1, "Alice", 300, 1),
        _row(2, "Bob", 150, 2, "South"),
        _row(3, "Carol", 900, 3, "East"),
        _row(4, "alan", 300, 4),
        _row(5, "Dave", 75, 5, "West"),
        _row(6, "Eve", 500, 6, "South"),
        _row(7, "Frank", 20, 7, None),
    ]


@pytest.fixture
def agents() -> list[Agent]:
    return [
        Agent(id="1", first_name="zoe", last_name="young", region=Region.WEST, rating=70, fee=100),
        Agent(id="2", first_name="adam", last_name="baker", region=Region.NORTH, rating=90, fee=50),
        Agent(id="3", first_name="Mia", last_name="Chen", region=Region.NORTH, rating=80, fee=300),
    ]


class TestShapeRows:
    """Tests for shape_rows()."""

    def test_default_transaction_view_is_newest_first(self, rows) -> None:
        """Transactions default to date descending with five rows per page."""
        page = shape_rows(rows, TRANSACTION_TABLE, TRANSACTION_TABLE.initial_state())
        assert [row.id for row in page.rows] == ["t7", "t6", "t5", "t4", "t3"]
        assert page.total_pages == 2
        assert page.has_next is True
        assert page.has_previous is False

    def test_search_is_case_insensitive_substring(self, rows) -> None:
        """Search matches the agent display name ignoring case."""
        state = TRANSACTION_TABLE.initial_state().with_search("AL")
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert sorted(row.id for row in page.rows) == ["t1", "t4"]

    def test_search_matches_sentinel_label(self, rows) -> None:
        """Rows without an agent are searchable by their sentinel label."""
        state = TRANSACTION_TABLE.initial_state().with_search("no agent")
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert [row.id for row in page.rows] == ["t7"]

    def test_region_filter_is_exact(self, rows) -> None:
        """Region filter keeps exact matches only."""
        state = TRANSACTION_TABLE.initial_state().with_region("South")
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert sorted(row.id for row in page.rows) == ["t2", "t6"]

    def test_search_then_region(self, rows) -> None:
        """Both filters apply together."""
        state = TRANSACTION_TABLE.initial_state().with_search("ev").with_region("South")
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert [row.id for row in page.rows] == ["t6"]

    def test_numeric_sort_is_stable(self, rows) -> None:
        """Equal amounts keep their input order in both directions."""
        state = state_for(TRANSACTION_TABLE, sort_key="amount", view_mode=ViewMode.SCROLL)
        ascending = shape_rows(rows, TRANSACTION_TABLE, state)
        assert [row.id for row in ascending.rows] == ["t7", "t5", "t2", "t1", "t4", "t6", "t3"]

        descending = shape_rows(rows, TRANSACTION_TABLE, state.toggle_sort("amount"))
        assert [row.id for row in descending.rows] == ["t3", "t6", "t1", "t4", "t2", "t5", "t7"]

    def test_toggling_twice_reverses_distinct_keys(self, agents) -> None:
        """Sorting the same key twice yields the exact reverse order."""
        state = AGENT_TABLE.initial_state().toggle_sort("fee")
        first = shape_rows(agents, AGENT_TABLE, state)
        second = shape_rows(agents, AGENT_TABLE, state.toggle_sort("fee"))
        assert [agent.id for agent in second.rows] == [agent.id for agent in reversed(first.rows)]

    def test_text_sort_ignores_case(self, agents) -> None:
        """Agent names sort alphabetically regardless of case."""
        page = shape_rows(agents, AGENT_TABLE, AGENT_TABLE.initial_state())
        assert [agent.display_name for agent in page.rows] == ["Adam Baker", "Mia Chen", "Zoe Young"]

    def test_text_sort_places_accents_beside_base_letter(self) -> None:
        """An accented initial sorts with its unaccented letter, not after z."""
        agents = [
            Agent(id="zoe", first_name="zoe", last_name="young", region=Region.WEST, rating=70, fee=100),
            Agent(id="emile", first_name="émile", last_name="roux", region=Region.NORTH, rating=90, fee=50),
            Agent(id="adam", first_name="adam", last_name="baker", region=Region.NORTH, rating=80, fee=300),
        ]
        page = shape_rows(agents, AGENT_TABLE, AGENT_TABLE.initial_state())
        assert [agent.id for agent in page.rows] == ["adam", "emile", "zoe"]

    def test_date_sort_compares_calendar_days(self) -> None:
        """Rows on the same day keep input order when sorted by date."""
        late = _row(1, "Late", 10, 3)
        late.date = datetime(2024, 1, 3, 23, 0, tzinfo=timezone.utc)
        early = _row(2, "Early", 10, 3)
        early.date = datetime(2024, 1, 3, 1, 0, tzinfo=timezone.utc)
        state = state_for(TRANSACTION_TABLE, sort_key="date", sort_direction=SortDirection.ASC)
        page = shape_rows([late, early], TRANSACTION_TABLE, state)
        assert [row.id for row in page.rows] == ["t1", "t2"]

    def test_page_is_clamped(self, rows) -> None:
        """A page past the end is clamped to the last page."""
        state = TRANSACTION_TABLE.initial_state().go_to(40)
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert page.page == 2
        assert page.state.current_page == 2
        assert [row.id for row in page.rows] == ["t2", "t1"]
        assert page.has_next is False

    def test_empty_result(self, rows) -> None:
        """No matches give an empty first page and zero pages."""
        state = TRANSACTION_TABLE.initial_state().with_search("nobody").go_to(3)
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert page.rows == []
        assert page.page == 1
        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_previous is False

    def test_idempotent(self, rows) -> None:
        """The same inputs always produce the same page."""
        state = state_for(TRANSACTION_TABLE, search="a", sort_key="amount", page=2)
        first = shape_rows(rows, TRANSACTION_TABLE, state)
        second = shape_rows(rows, TRANSACTION_TABLE, state)
        assert first == second

    def test_scroll_mode_page_size(self, rows) -> None:
        """Scroll mode uses the larger page size."""
        state = TRANSACTION_TABLE.initial_state(PageSizes(paged=2, scroll=4)).toggle_view_mode()
        page = shape_rows(rows, TRANSACTION_TABLE, state)
        assert page.page_size == 4
        assert len(page.rows) == 4
        assert page.total_pages == 2

    def test_unknown_sort_key(self, rows) -> None:
        """Sorting by a column the table lacks is rejected."""
        with pytest.raises(UnknownSortKeyError):
            state_for(TRANSACTION_TABLE, sort_key="fee")

    def test_slices_stay_in_range(self, rows) -> None:
        """Every reachable page slices inside the filtered rows."""
        state = TRANSACTION_TABLE.initial_state(PageSizes(paged=3, scroll=20))
        seen = []
        for _ in range(10):
            page = shape_rows(rows, TRANSACTION_TABLE, state)
            assert 1 <= page.page <= max(1, page.total_pages)
            seen.extend(row.id for row in page.rows)
            state = page.state.next_page(page.total_pages)
        assert set(seen) == {row.id for row in rows}


class TestViewState:
    """Tests for ViewState transitions."""

    def test_search_and_region_reset_page(self) -> None:
        """Changing search or region goes back to page one."""
        state = TRANSACTION_TABLE.initial_state().go_to(3)
        assert state.with_search("x").current_page == 1
        assert state.with_region("North").current_page == 1

    def test_empty_region_means_no_filter(self) -> None:
        """An empty region string clears the filter."""
        state = TRANSACTION_TABLE.initial_state().with_region("North").with_region("")
        assert state.region_filter is None

    def test_sort_keeps_page(self) -> None:
        """Changing the sort does not move the page."""
        state = TRANSACTION_TABLE.initial_state().go_to(3)
        assert state.toggle_sort("amount").current_page == 3
        assert state.toggle_sort("date").current_page == 3

    def test_toggle_sort_flips_and_restarts(self) -> None:
        """Same key flips direction, a new key starts ascending."""
        state = TRANSACTION_TABLE.initial_state()
        assert state.sort_direction is SortDirection.DESC
        assert state.toggle_sort("date").sort_direction is SortDirection.ASC
        assert state.toggle_sort("date").toggle_sort("date").sort_direction is SortDirection.DESC
        assert state.toggle_sort("amount").sort_direction is SortDirection.ASC

    def test_view_mode_toggle_resets_page(self) -> None:
        """Switching between paged and scroll mode resets the page."""
        state = TRANSACTION_TABLE.initial_state().go_to(2).toggle_view_mode()
        assert state.view_mode is ViewMode.SCROLL
        assert state.current_page == 1
        assert state.page_size == 20

    def test_page_navigation_bounds(self) -> None:
        """Next and previous never leave the valid range."""
        state = TRANSACTION_TABLE.initial_state()
        assert state.previous_page().current_page == 1
        assert state.next_page(0).current_page == 1
        assert state.next_page(2).next_page(2).next_page(2).current_page == 2

    def test_state_is_immutable(self) -> None:
        """ViewState cannot be mutated in place."""
        state = TRANSACTION_TABLE.initial_state()
        with pytest.raises(AttributeError):
            state.current_page = 4  # type: ignore[misc]
