"""Calendar grid and date selection models.

Dates are DateKeys: zero-padded ``YYYY-MM-DD`` strings built from local
date components, so string comparison matches date order.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import SelectionState


class Selection(BaseModel):
    """Check-in/check-out pair chosen by the guest.

    Either side may be empty. The engine replaces the whole object on
    every change instead of mutating it.
    """

    model_config = ConfigDict(frozen=True)

    check_in: str = Field(default="", description="Check-in DateKey or empty")
    check_out: str = Field(default="", description="Check-out DateKey or empty")

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def _blank_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def state(self) -> SelectionState:
        """Where the two-click protocol currently stands."""
        if not self.check_in:
            return SelectionState.NO_SELECTION
        if not self.check_out:
            return SelectionState.CHECK_IN_ONLY
        return SelectionState.FULL_RANGE


class CalendarCell(BaseModel):
    """One of the 42 cells in a month grid."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="DateKey of the cell", examples=["2026-02-10"])
    is_current_month: bool = Field(
        ..., description="False for padding days from adjacent months"
    )


class CalendarDay(CalendarCell):
    """A grid cell with the flags needed to render it."""

    is_past: bool = False
    is_blocked: bool = False
    disabled: bool = False
    is_check_in: bool = False
    is_check_out: bool = False
    in_range: bool = Field(
        default=False,
        description="Strictly between check-in and check-out",
    )


class MonthView(BaseModel):
    """A rendered month: label, 42 decorated days and legend flag."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    label: str = Field(..., examples=["February 2026"])
    days: list[CalendarDay]
    show_blocked_legend: bool = False


class ClickResult(BaseModel):
    """Outcome of clicking a calendar cell."""

    model_config = ConfigDict(frozen=True)

    selection: Selection
    accepted: bool
    reason: str | None = Field(
        default=None,
        description="Why the click was ignored: invalid, past, blocked, blocked_in_range",
    )

    @property
    def state(self) -> SelectionState:
        return self.selection.state


class SelectionCheck(BaseModel):
    """Submission gate for a selection against the blocked dates."""

    model_config = ConfigDict(frozen=True)

    nights: int = Field(..., ge=0)
    has_unavailable_in_range: bool
    unavailable_dates: list[str] = Field(default_factory=list)
    is_submittable: bool
    warning: str | None = None
