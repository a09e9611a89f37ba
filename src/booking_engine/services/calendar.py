"""Availability calendar: month grid and two-click range selection.

The calendar owns no state. Callers keep the current Selection and the
displayed month and pass them in; every operation returns new values.

Selection protocol:
- Past and blocked cells ignore clicks.
- With no check-in, or on a date at or before check-in, the click
  (re)starts the selection at that date.
- Once a full range is selected, any valid click starts a new selection.
- Otherwise the click sets check-out, unless a blocked night lies in
  [check-in, clicked), in which case it is ignored.
"""

import datetime as dt
from collections.abc import Iterable

from booking_engine.models import (
    CalendarCell,
    CalendarDay,
    ClickResult,
    MonthView,
    Selection,
    SelectionState,
)
from booking_engine.utils.logging import get_logger, log_selection_event

from .dates import (
    add_months,
    blocked_in_range,
    clamp_month,
    days_in_month,
    normalize_month,
    parse_date_key,
    to_date_key,
    today_key,
)

logger = get_logger(__name__)

GRID_SIZE = 42  # 6 weeks, whatever the month needs

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def month_label(year: int, month: int) -> str:
    year, month = normalize_month(year, month)
    return f"{MONTH_NAMES[month - 1]} {year}"


class AvailabilityCalendar:
    """Month grid rendering and date range selection."""

    def build_month_grid(self, year: int, month: int) -> list[CalendarCell]:
        """Build the 42-cell grid for a month, Sunday first.

        Args:
            year: Calendar year
            month: Month 1-12 (out-of-range values carry into the year)

        Years outside MIN_GRID_YEAR..MAX_GRID_YEAR render the nearest
        supported month.

        Returns:
            Leading days of the previous month, every day of the month,
            then days of the next month up to 42 cells.
        """
        year, month = clamp_month(year, month)
        first = dt.date(year, month, 1)
        start_pad = (first.weekday() + 1) % 7  # Sunday = 0
        month_days = days_in_month(year, month)

        cells: list[CalendarCell] = []
        for offset in range(start_pad, 0, -1):
            day = first - dt.timedelta(days=offset)
            cells.append(CalendarCell(date=to_date_key(day), is_current_month=False))

        for day_number in range(1, month_days + 1):
            day = dt.date(year, month, day_number)
            cells.append(CalendarCell(date=to_date_key(day), is_current_month=True))

        last = dt.date(year, month, month_days)
        for offset in range(1, GRID_SIZE - len(cells) + 1):
            day = last + dt.timedelta(days=offset)
            cells.append(CalendarCell(date=to_date_key(day), is_current_month=False))

        return cells

    def navigate_month(self, year: int, month: int, direction: int) -> tuple[int, int]:
        """Move the displayed month one step back (-1) or forward (+1).

        Any other direction is treated by its sign; 0 stays put. The result
        never leaves the renderable year range.
        """
        step = (direction > 0) - (direction < 0)
        return clamp_month(*add_months(year, month, step))

    def initial_month(
        self,
        selection: Selection,
        today: dt.date | None = None,
    ) -> tuple[int, int]:
        """Month to show first: the check-in month, else the current month."""
        check_in = parse_date_key(selection.check_in)
        anchor = check_in or today or dt.date.today()
        return clamp_month(anchor.year, anchor.month)

    def decorate(
        self,
        cells: Iterable[CalendarCell],
        blocked: Iterable[str],
        selection: Selection,
        today: dt.date | None = None,
    ) -> list[CalendarDay]:
        """Attach past/blocked/selection flags to grid cells."""
        blocked_set = frozenset(blocked)
        now = today_key(today)
        check_in = selection.check_in
        check_out = selection.check_out

        days = []
        for cell in cells:
            is_blocked = cell.date in blocked_set
            is_past = cell.date < now
            days.append(
                CalendarDay(
                    date=cell.date,
                    is_current_month=cell.is_current_month,
                    is_past=is_past,
                    is_blocked=is_blocked,
                    disabled=is_past or is_blocked,
                    is_check_in=cell.date == check_in,
                    is_check_out=cell.date == check_out,
                    in_range=bool(check_in and check_out and check_in < cell.date < check_out),
                )
            )
        return days

    def month_view(
        self,
        year: int,
        month: int,
        blocked: Iterable[str],
        selection: Selection,
        today: dt.date | None = None,
    ) -> MonthView:
        """Build and decorate a month in one call."""
        year, month = clamp_month(year, month)
        blocked_set = frozenset(blocked)
        days = self.decorate(self.build_month_grid(year, month), blocked_set, selection, today)
        return MonthView(
            year=year,
            month=month,
            label=month_label(year, month),
            days=days,
            show_blocked_legend=len(blocked_set) > 0,
        )

    def click(
        self,
        selection: Selection,
        date: str,
        blocked: Iterable[str],
        today: dt.date | None = None,
    ) -> ClickResult:
        """Apply a cell click to the selection.

        Args:
            selection: Current selection
            date: DateKey of the clicked cell
            blocked: Blocked DateKeys for the listing
            today: Guest's local date (defaults to the server's)

        Returns:
            ClickResult with the new selection; rejected clicks return the
            selection unchanged with ``accepted=False``.
        """
        blocked_set = frozenset(blocked)

        clicked = parse_date_key(date)
        if clicked is None:
            return self._reject(selection, str(date), "invalid")
        date = to_date_key(clicked)

        reason = None
        if date in blocked_set:
            reason = "blocked"
        elif date < today_key(today):
            reason = "past"
        if reason:
            return self._reject(selection, date, reason)

        state = selection.state
        if state == SelectionState.NO_SELECTION or date <= selection.check_in:
            return self._accept(Selection(check_in=date), date, "check_in")

        if state == SelectionState.FULL_RANGE:
            return self._accept(Selection(check_in=date), date, "restart")

        if blocked_in_range(selection.check_in, date, blocked_set):
            return self._reject(selection, date, "blocked_in_range")

        return self._accept(
            Selection(check_in=selection.check_in, check_out=date),
            date,
            "check_out",
        )

    def on_cell_click(
        self,
        selection: Selection,
        date: str,
        blocked: Iterable[str],
        today: dt.date | None = None,
    ) -> Selection:
        """Selection after a click; unchanged when the click is rejected."""
        return self.click(selection, date, blocked, today).selection

    def selection_state(self, selection: Selection) -> SelectionState:
        return selection.state

    def _accept(self, selection: Selection, date: str, result: str) -> ClickResult:
        log_selection_event(
            logger,
            date,
            result=result,
            check_in=selection.check_in,
            check_out=selection.check_out,
        )
        return ClickResult(selection=selection, accepted=True)

    def _reject(self, selection: Selection, date: str, reason: str) -> ClickResult:
        log_selection_event(
            logger,
            date,
            result="rejected",
            check_in=selection.check_in,
            check_out=selection.check_out,
            reason=reason,
        )
        return ClickResult(selection=selection, accepted=False, reason=reason)
