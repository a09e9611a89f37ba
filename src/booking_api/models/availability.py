"""API models for calendar and date selection endpoints.

``today`` is the guest's local date. The server's own date can differ
around midnight, so clients send theirs; it defaults to the server date.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from booking_api.models.common import BlockedDatesMixin
from booking_engine.models import Selection, SelectionState
from booking_engine.services.dates import MAX_GRID_YEAR, MIN_GRID_YEAR


class CalendarRequest(BlockedDatesMixin):
    """A month to render with the current selection."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "year": 2026,
                    "month": 2,
                    "blocked_dates": ["2026-02-12"],
                    "selection": {"check_in": "2026-02-10", "check_out": ""},
                    "today": "2026-02-01",
                }
            ]
        },
    )

    year: int = Field(..., ge=MIN_GRID_YEAR, le=MAX_GRID_YEAR)
    month: int = Field(..., ge=1, le=12)
    selection: Selection = Field(default_factory=Selection)
    today: dt.date | None = None


class NavigateResponse(BaseModel):
    """Month shown after pressing previous/next."""

    model_config = ConfigDict(strict=True)

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$", examples=["2026-03"])
    year: int
    month_number: int = Field(..., ge=1, le=12)
    label: str = Field(..., examples=["March 2026"])


class SelectRequest(BlockedDatesMixin):
    """A click on a calendar cell."""

    selection: Selection = Field(default_factory=Selection)
    date: str = Field(..., description="Clicked DateKey", examples=["2026-02-15"])
    today: dt.date | None = None


class SelectResponse(BaseModel):
    """Selection after the click."""

    selection: Selection
    state: SelectionState
    accepted: bool
    reason: str | None = None


class CheckRequest(BlockedDatesMixin):
    """A selection to run through the submission gate."""

    selection: Selection = Field(default_factory=Selection)
