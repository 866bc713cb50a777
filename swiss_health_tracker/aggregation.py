from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Protocol, Sequence, TypedDict

from swiss_health_tracker.constants import VISIBLE_DAYS_RADIUS
from swiss_health_tracker.dates import DateLike, parse_date
from swiss_health_tracker.models import TrackedItem


class CompletionLookup(Protocol):
    def get_completion(self, item_id: int, day: DateLike) -> bool:
        """Return whether the item was completed on the given day."""


class TrendPoint(TypedDict):
    date: str
    points: int


def daily_total(day: DateLike, items: Iterable[TrackedItem], completions: CompletionLookup) -> int:
    """Sum the points of the items completed on ``day``."""

    return sum(item.points for item in items if completions.get_completion(item.id, day))


def daily_max(items: Iterable[TrackedItem]) -> int:
    """Total points available from ``items`` on any day."""

    return sum(item.points for item in items)


def progress_ratio(day: DateLike, items: Sequence[TrackedItem], completions: CompletionLookup) -> float:
    """Earned over available points for ``day``; 0.0 when nothing can be earned."""

    maximum = daily_max(items)
    if maximum <= 0:
        return 0.0
    return min(1.0, daily_total(day, items, completions) / maximum)


def window_dates(end_date: DateLike, window_size_days: int) -> list[date]:
    """The ``window_size_days`` dates ending at ``end_date``, oldest first."""

    if window_size_days < 1:
        raise ValueError(f"window_size_days must be at least 1, got {window_size_days}")

    last_day = parse_date(end_date)
    return [last_day - timedelta(days=offset) for offset in range(window_size_days - 1, -1, -1)]


def trend(
    end_date: DateLike, window_size_days: int, items: Sequence[TrackedItem], completions: CompletionLookup
) -> list[int]:
    """Return one daily total per day of the window, oldest first."""

    return [daily_total(day, items, completions) for day in window_dates(end_date, window_size_days)]


def build_trend_series(
    end_date: DateLike, window_size_days: int, items: Sequence[TrackedItem], completions: CompletionLookup
) -> list[TrendPoint]:
    """Daily totals of the window as ``{date, points}`` records for charting."""

    return [
        TrendPoint(date=day.isoformat(), points=daily_total(day, items, completions))
        for day in window_dates(end_date, window_size_days)
    ]


def visible_dates(center: DateLike, radius: int = VISIBLE_DAYS_RADIUS) -> list[date]:
    """Dates from ``center - radius`` to ``center + radius`` inclusive."""

    middle = parse_date(center)
    return [middle + timedelta(days=offset) for offset in range(-radius, radius + 1)]


__all__ = [
    "CompletionLookup",
    "TrendPoint",
    "build_trend_series",
    "daily_max",
    "daily_total",
    "progress_ratio",
    "trend",
    "visible_dates",
    "window_dates",
]
