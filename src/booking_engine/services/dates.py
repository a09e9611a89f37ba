"""Date helpers shared by the calendar and pricing services.

DateKeys are built from year/month/day components of the local date.
Never derive them from a UTC timestamp: a guest west of UTC would see
every cell shifted by a day near midnight.
"""

import calendar
import datetime as dt
from collections.abc import Iterable, Iterator

# A 42-cell grid reaches into the neighbouring months, so the first and
# last years datetime supports cannot be rendered.
MIN_GRID_YEAR = dt.MINYEAR + 1
MAX_GRID_YEAR = dt.MAXYEAR - 1


def to_date_key(value: dt.date | dt.datetime) -> str:
    """Convert a date or datetime to a ``YYYY-MM-DD`` DateKey.

    Aware datetimes are converted to local time first; the time of day is
    then dropped.
    """
    if isinstance(value, dt.datetime) and value.tzinfo is not None:
        value = value.astimezone()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str | None) -> dt.date | None:
    """Parse a DateKey. Returns None for empty or malformed input."""
    if not key or not isinstance(key, str):
        return None
    try:
        return dt.date.fromisoformat(key.strip()[:10])
    except ValueError:
        return None


def today_key(today: dt.date | None = None) -> str:
    """DateKey for today in local time, or for the date supplied."""
    return to_date_key(today or dt.date.today())


def count_nights(check_in: str, check_out: str) -> int:
    """Nights between two DateKeys; 0 unless check-out is after check-in."""
    start = parse_date_key(check_in)
    end = parse_date_key(check_out)
    if start is None or end is None or end <= start:
        return 0
    return (end - start).days


def iter_date_keys(start: str, end: str) -> Iterator[str]:
    """Yield DateKeys from ``start`` up to but excluding ``end``."""
    first = parse_date_key(start)
    last = parse_date_key(end)
    if first is None or last is None:
        return
    current = first
    while current < last:
        yield to_date_key(current)
        current += dt.timedelta(days=1)


def blocked_in_range(start: str, end: str, blocked: Iterable[str]) -> list[str]:
    """Blocked DateKeys falling in ``[start, end)``, in date order."""
    blocked_set = blocked if isinstance(blocked, (set, frozenset)) else set(blocked)
    return [key for key in iter_date_keys(start, end) if key in blocked_set]


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year (month 13 -> next January)."""
    index = year * 12 + (month - 1)
    return index // 12, index % 12 + 1


def add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    """Shift (year, month) by ``delta`` months."""
    return normalize_month(year, month + delta)


def clamp_month(year: int, month: int) -> tuple[int, int]:
    """Normalise a month and keep it within the renderable year range."""
    year, month = normalize_month(year, month)
    if year < MIN_GRID_YEAR:
        return MIN_GRID_YEAR, 1
    if year > MAX_GRID_YEAR:
        return MAX_GRID_YEAR, 12
    return year, month


def days_in_month(year: int, month: int) -> int:
    year, month = normalize_month(year, month)
    return calendar.monthrange(year, month)[1]
