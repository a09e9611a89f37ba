"""Unit tests for AvailabilityCalendar.

Test categories:
- Month grid shape (42 cells, Sunday first, padding from adjacent months)
- Month navigation across year boundaries
- Cell decoration (past, blocked, selection flags)
- Two-click selection protocol, including blocked-range rejection
"""

import datetime as dt

import pytest

from booking_engine.models import Selection, SelectionState
from booking_engine.services.calendar import AvailabilityCalendar, month_label
from booking_engine.services.dates import (
    MAX_GRID_YEAR,
    MIN_GRID_YEAR,
    days_in_month,
    parse_date_key,
)


@pytest.fixture
def calendar() -> AvailabilityCalendar:
    return AvailabilityCalendar()


# === Month Grid ===


class TestBuildMonthGrid:
    """Tests for the 6-week month grid."""

    @pytest.mark.parametrize("year", [2024, 2026, 2027, 2028])
    @pytest.mark.parametrize("month", range(1, 13))
    def test_grid_always_has_42_cells(
        self, calendar: AvailabilityCalendar, year: int, month: int
    ) -> None:
        """Every month renders as exactly six weeks."""
        assert len(calendar.build_month_grid(year, month)) == 42

    @pytest.mark.parametrize("year", [2024, 2026, 2028])
    @pytest.mark.parametrize("month", range(1, 13))
    def test_current_month_cells_match_month_length(
        self, calendar: AvailabilityCalendar, year: int, month: int
    ) -> None:
        """Cells flagged as current month are exactly the days of that month."""
        cells = calendar.build_month_grid(year, month)
        current = [cell.date for cell in cells if cell.is_current_month]

        assert len(current) == days_in_month(year, month)
        assert current[0] == f"{year:04d}-{month:02d}-01"

    @pytest.mark.parametrize("month", range(1, 13))
    def test_grid_starts_on_sunday_and_is_consecutive(
        self, calendar: AvailabilityCalendar, month: int
    ) -> None:
        """First cell is a Sunday and each cell is the day after the previous one."""
        dates = [parse_date_key(cell.date) for cell in calendar.build_month_grid(2026, month)]

        assert dates[0].weekday() == 6  # Sunday
        for previous, current in zip(dates, dates[1:]):
            assert current - previous == dt.timedelta(days=1)

    def test_february_2026_has_no_leading_padding(self, calendar: AvailabilityCalendar) -> None:
        """February 2026 starts on a Sunday, so its first cell is the 1st."""
        cells = calendar.build_month_grid(2026, 2)

        assert cells[0].date == "2026-02-01"
        assert cells[0].is_current_month is True
        assert cells[27].date == "2026-02-28"
        assert cells[28].date == "2026-03-01"
        assert cells[28].is_current_month is False
        assert cells[-1].date == "2026-03-14"

    def test_january_2026_pads_from_december(self, calendar: AvailabilityCalendar) -> None:
        """January 2026 starts on a Thursday: four days of December lead."""
        cells = calendar.build_month_grid(2026, 1)

        assert [cell.date for cell in cells[:4]] == [
            "2025-12-28",
            "2025-12-29",
            "2025-12-30",
            "2025-12-31",
        ]
        assert not any(cell.is_current_month for cell in cells[:4])
        assert cells[4].date == "2026-01-01"
        assert cells[-1].date == "2026-02-07"

    def test_last_supported_month_renders(self, calendar: AvailabilityCalendar) -> None:
        cells = calendar.build_month_grid(MAX_GRID_YEAR, 12)

        assert len(cells) == 42
        assert cells[-1].date.startswith(f"{MAX_GRID_YEAR + 1:04d}-01")

    def test_first_supported_month_renders(self, calendar: AvailabilityCalendar) -> None:
        cells = calendar.build_month_grid(MIN_GRID_YEAR, 1)

        assert len(cells) == 42
        assert cells[0].date <= f"{MIN_GRID_YEAR:04d}-01-01"

    @pytest.mark.parametrize(
        ("year", "month", "expected"),
        [(9999, 12, (MAX_GRID_YEAR, 12)), (1, 1, (MIN_GRID_YEAR, 1))],
    )
    def test_years_beyond_range_render_nearest_month(
        self,
        calendar: AvailabilityCalendar,
        year: int,
        month: int,
        expected: tuple[int, int],
    ) -> None:
        """The first and last datetime years cannot hold a 6-week grid."""
        assert calendar.build_month_grid(year, month) == calendar.build_month_grid(*expected)
        view = calendar.month_view(year, month, [], Selection(), dt.date(2026, 2, 1))
        assert (view.year, view.month) == expected

    def test_month_label(self) -> None:
        assert month_label(2026, 2) == "February 2026"
        assert month_label(2026, 13) == "January 2027"


# === Navigation ===


class TestNavigateMonth:
    """Tests for previous/next month navigation."""

    def test_next_month(self, calendar: AvailabilityCalendar) -> None:
        assert calendar.navigate_month(2026, 2, 1) == (2026, 3)

    def test_previous_month(self, calendar: AvailabilityCalendar) -> None:
        assert calendar.navigate_month(2026, 2, -1) == (2026, 1)

    def test_wraps_forward_over_year_end(self, calendar: AvailabilityCalendar) -> None:
        assert calendar.navigate_month(2026, 12, 1) == (2027, 1)

    def test_wraps_backward_over_year_start(self, calendar: AvailabilityCalendar) -> None:
        assert calendar.navigate_month(2026, 1, -1) == (2025, 12)

    def test_large_direction_moves_one_step(self, calendar: AvailabilityCalendar) -> None:
        """Only the sign of the direction matters."""
        assert calendar.navigate_month(2026, 5, 7) == (2026, 6)

    def test_navigation_stops_at_supported_range(self, calendar: AvailabilityCalendar) -> None:
        assert calendar.navigate_month(MAX_GRID_YEAR, 12, 1) == (MAX_GRID_YEAR, 12)
        assert calendar.navigate_month(MIN_GRID_YEAR, 1, -1) == (MIN_GRID_YEAR, 1)

    def test_initial_month_follows_check_in(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        selection = Selection(check_in="2026-07-04")
        assert calendar.initial_month(selection, today) == (2026, 7)

    def test_initial_month_defaults_to_today(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        assert calendar.initial_month(Selection(), today) == (2026, 2)


# === Decoration ===


class TestDecorate:
    """Tests for per-day flags."""

    def test_selection_flags(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        """Endpoints are flagged, nights strictly between are in range."""
        view = calendar.month_view(
            2026, 2, [], Selection(check_in="2026-02-10", check_out="2026-02-13"), today
        )
        days = {day.date: day for day in view.days}

        assert days["2026-02-10"].is_check_in is True
        assert days["2026-02-13"].is_check_out is True
        assert days["2026-02-11"].in_range is True
        assert days["2026-02-12"].in_range is True
        assert days["2026-02-10"].in_range is False
        assert days["2026-02-13"].in_range is False
        assert days["2026-02-14"].in_range is False

    def test_no_range_without_check_out(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        view = calendar.month_view(2026, 2, [], Selection(check_in="2026-02-10"), today)
        assert not any(day.in_range for day in view.days)

    def test_past_and_blocked_are_disabled(
        self, calendar: AvailabilityCalendar, blocked_dates: list[str]
    ) -> None:
        view = calendar.month_view(2026, 2, blocked_dates, Selection(), dt.date(2026, 2, 5))
        days = {day.date: day for day in view.days}

        assert days["2026-02-04"].is_past is True
        assert days["2026-02-04"].disabled is True
        assert days["2026-02-05"].is_past is False
        assert days["2026-02-05"].disabled is False
        assert days["2026-02-12"].is_blocked is True
        assert days["2026-02-12"].disabled is True

    def test_blocked_legend_shown_only_with_blocked_dates(
        self, calendar: AvailabilityCalendar, today: dt.date, blocked_dates: list[str]
    ) -> None:
        assert calendar.month_view(2026, 2, blocked_dates, Selection(), today).show_blocked_legend
        assert not calendar.month_view(2026, 2, [], Selection(), today).show_blocked_legend

    def test_month_view_label_and_size(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        view = calendar.month_view(2026, 2, [], Selection(), today)
        assert view.label == "February 2026"
        assert len(view.days) == 42


# === Selection Protocol ===


class TestCellClick:
    """Tests for the two-click date range selection."""

    def test_first_click_sets_check_in(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        result = calendar.click(Selection(), "2026-02-10", [], today)

        assert result.accepted is True
        assert result.selection == Selection(check_in="2026-02-10")
        assert result.state == SelectionState.CHECK_IN_ONLY

    def test_second_click_sets_check_out(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        selection = Selection(check_in="2026-02-10")
        result = calendar.click(selection, "2026-02-13", [], today)

        assert result.selection == Selection(check_in="2026-02-10", check_out="2026-02-13")
        assert result.state == SelectionState.FULL_RANGE

    def test_click_before_check_in_moves_check_in(
        self, calendar: AvailabilityCalendar, today: dt.date
    ) -> None:
        selection = Selection(check_in="2026-02-10")
        new = calendar.on_cell_click(selection, "2026-02-08", [], today)
        assert new == Selection(check_in="2026-02-08")

    def test_click_on_check_in_keeps_single_date(
        self, calendar: AvailabilityCalendar, today: dt.date
    ) -> None:
        """Clicking the check-in day again never produces a zero-night range."""
        selection = Selection(check_in="2026-02-10")
        new = calendar.on_cell_click(selection, "2026-02-10", [], today)
        assert new == Selection(check_in="2026-02-10")

    def test_click_after_full_range_restarts(
        self, calendar: AvailabilityCalendar, today: dt.date
    ) -> None:
        """With both dates chosen, a later click starts a new selection."""
        selection = Selection(check_in="2026-02-10", check_out="2026-02-13")
        result = calendar.click(selection, "2026-02-20", [], today)

        assert result.accepted is True
        assert result.selection == Selection(check_in="2026-02-20")

    def test_click_inside_full_range_restarts(
        self, calendar: AvailabilityCalendar, today: dt.date
    ) -> None:
        """A click between check-in and check-out starts over instead of shortening the stay."""
        selection = Selection(check_in="2026-02-10", check_out="2026-02-15")
        result = calendar.click(selection, "2026-02-12", [], today)

        assert result.accepted is True
        assert result.selection == Selection(check_in="2026-02-12")
        assert result.state == SelectionState.CHECK_IN_ONLY

    def test_blocked_night_in_range_rejects_check_out(
        self, calendar: AvailabilityCalendar, today: dt.date, blocked_dates: list[str]
    ) -> None:
        """Check-in on the 10th, click the 15th with the 12th blocked: ignored."""
        selection = calendar.on_cell_click(Selection(), "2026-02-10", blocked_dates, today)
        result = calendar.click(selection, "2026-02-15", blocked_dates, today)

        assert result.accepted is False
        assert result.reason == "blocked_in_range"
        assert result.selection.check_in == "2026-02-10"
        assert result.selection.check_out == ""

    def test_check_out_just_before_blocked_night(
        self, calendar: AvailabilityCalendar, today: dt.date, blocked_dates: list[str]
    ) -> None:
        """Check-out may fall on the day before a blocked night."""
        selection = Selection(check_in="2026-02-10")
        new = calendar.on_cell_click(selection, "2026-02-11", blocked_dates, today)
        assert new.check_out == "2026-02-11"

    @pytest.mark.parametrize(
        "selection",
        [
            Selection(),
            Selection(check_in="2026-02-10"),
            Selection(check_in="2026-02-10", check_out="2026-02-11"),
        ],
    )
    def test_blocked_click_is_identity(
        self,
        calendar: AvailabilityCalendar,
        today: dt.date,
        blocked_dates: list[str],
        selection: Selection,
    ) -> None:
        """Clicking a blocked cell leaves any selection unchanged."""
        result = calendar.click(selection, "2026-02-12", blocked_dates, today)

        assert result.accepted is False
        assert result.reason == "blocked"
        assert result.selection == selection

    def test_past_click_is_ignored(self, calendar: AvailabilityCalendar) -> None:
        selection = Selection(check_in="2026-02-10")
        result = calendar.click(selection, "2026-02-03", [], dt.date(2026, 2, 5))

        assert result.accepted is False
        assert result.reason == "past"
        assert result.selection == selection

    def test_today_is_selectable(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        result = calendar.click(Selection(), "2026-02-01", [], today)
        assert result.accepted is True

    def test_malformed_date_is_ignored(self, calendar: AvailabilityCalendar, today: dt.date) -> None:
        result = calendar.click(Selection(), "2026-02-31", [], today)

        assert result.accepted is False
        assert result.reason == "invalid"
        assert result.selection == Selection()

    def test_selection_state(self, calendar: AvailabilityCalendar) -> None:
        assert calendar.selection_state(Selection()) == SelectionState.NO_SELECTION
        assert calendar.selection_state(Selection(check_in="2026-02-10")) == SelectionState.CHECK_IN_ONLY
        assert (
            calendar.selection_state(Selection(check_in="2026-02-10", check_out="2026-02-12"))
            == SelectionState.FULL_RANGE
        )
