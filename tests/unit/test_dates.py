"""Unit tests for DateKey helpers."""

import datetime as dt

import pytest

from booking_engine.services.dates import (
    MAX_GRID_YEAR,
    MIN_GRID_YEAR,
    add_months,
    blocked_in_range,
    clamp_month,
    count_nights,
    days_in_month,
    iter_date_keys,
    normalize_month,
    parse_date_key,
    to_date_key,
    today_key,
)


class TestDateKeys:
    """Tests for DateKey conversion."""

    def test_zero_padded_components(self) -> None:
        """Month and day are zero padded so keys sort as dates."""
        assert to_date_key(dt.date(2026, 2, 5)) == "2026-02-05"

    def test_naive_datetime_keeps_its_day(self) -> None:
        """A late-evening local time stays on the same calendar day."""
        assert to_date_key(dt.datetime(2026, 2, 5, 23, 59)) == "2026-02-05"

    def test_parse_valid_key(self) -> None:
        assert parse_date_key("2026-02-10") == dt.date(2026, 2, 10)

    @pytest.mark.parametrize("key", ["", None, "2026-02-30", "not-a-date", "10/02/2026"])
    def test_parse_invalid_returns_none(self, key: str | None) -> None:
        """Malformed keys parse to None instead of raising."""
        assert parse_date_key(key) is None

    def test_today_key_uses_supplied_date(self) -> None:
        assert today_key(dt.date(2026, 2, 1)) == "2026-02-01"

    def test_string_order_matches_date_order(self) -> None:
        """Lexicographic comparison of keys matches chronological order."""
        keys = [to_date_key(dt.date(2026, 1, 1) + dt.timedelta(days=n)) for n in range(0, 400, 17)]
        assert keys == sorted(keys)


class TestCountNights:
    """Tests for night counting."""

    def test_three_nights(self) -> None:
        assert count_nights("2026-02-10", "2026-02-13") == 3

    def test_equal_dates_is_zero(self) -> None:
        assert count_nights("2026-02-10", "2026-02-10") == 0

    def test_reversed_range_is_zero(self) -> None:
        assert count_nights("2026-02-13", "2026-02-10") == 0

    def test_missing_date_is_zero(self) -> None:
        assert count_nights("2026-02-10", "") == 0

    def test_across_month_boundary(self) -> None:
        assert count_nights("2026-01-30", "2026-02-02") == 3


class TestRanges:
    """Tests for range iteration and blocked-date scans."""

    def test_iter_excludes_end(self) -> None:
        """Check-out day is not a night of the stay."""
        assert list(iter_date_keys("2026-02-10", "2026-02-13")) == [
            "2026-02-10",
            "2026-02-11",
            "2026-02-12",
        ]

    def test_iter_invalid_bounds_yields_nothing(self) -> None:
        assert list(iter_date_keys("", "2026-02-13")) == []

    def test_blocked_inside_range(self) -> None:
        assert blocked_in_range("2026-02-10", "2026-02-15", ["2026-02-12"]) == ["2026-02-12"]

    def test_blocked_on_checkout_day_is_free(self) -> None:
        """A blocked check-out day does not block the stay."""
        assert blocked_in_range("2026-02-10", "2026-02-12", ["2026-02-12"]) == []

    def test_blocked_on_checkin_day_counts(self) -> None:
        assert blocked_in_range("2026-02-12", "2026-02-14", {"2026-02-12"}) == ["2026-02-12"]


class TestMonthArithmetic:
    """Tests for month normalisation."""

    def test_month_thirteen_is_next_january(self) -> None:
        assert normalize_month(2026, 13) == (2027, 1)

    def test_month_zero_is_previous_december(self) -> None:
        assert normalize_month(2026, 0) == (2025, 12)

    def test_add_months_wraps_year(self) -> None:
        assert add_months(2026, 12, 1) == (2027, 1)
        assert add_months(2026, 1, -1) == (2025, 12)

    def test_days_in_leap_february(self) -> None:
        assert days_in_month(2028, 2) == 29
        assert days_in_month(2026, 2) == 28

    def test_clamp_month_inside_range(self) -> None:
        assert clamp_month(2026, 13) == (2027, 1)

    def test_clamp_month_at_edges(self) -> None:
        assert clamp_month(MAX_GRID_YEAR, 13) == (MAX_GRID_YEAR, 12)
        assert clamp_month(MIN_GRID_YEAR, 0) == (MIN_GRID_YEAR, 1)
