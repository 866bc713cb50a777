from __future__ import annotations

from datetime import date, timedelta

import pytest

from swiss_health_tracker.aggregation import (
    build_trend_series,
    daily_max,
    daily_total,
    progress_ratio,
    trend,
    visible_dates,
    window_dates,
)
from swiss_health_tracker.completion import CompletionStore
from swiss_health_tracker.models import TrackedItem
from swiss_health_tracker.storage import PreferencesStore

DAY = date(2024, 3, 10)
ITEMS = [TrackedItem(id=1, title="Walk", points=10), TrackedItem(id=2, title="Water", points=20)]


@pytest.fixture()
def completions(store: PreferencesStore) -> CompletionStore:
    return CompletionStore(store, namespace="goals", key="goals_completion")


def test_daily_total_sums_completed_points(completions: CompletionStore) -> None:
    completions.set_completion(1, DAY, True)

    assert daily_total(DAY, ITEMS, completions) == 10

    completions.set_completion(2, DAY, True)
    assert daily_total(DAY, ITEMS, completions) == 30


def test_daily_total_ignores_completions_without_catalog_entry(completions: CompletionStore) -> None:
    completions.set_completion(3, DAY, True)

    assert daily_total(DAY, ITEMS, completions) == 0
    assert daily_total(DAY, [], completions) == 0


def test_daily_max_and_progress_ratio(completions: CompletionStore) -> None:
    completions.set_completion(2, DAY, True)

    assert daily_max(ITEMS) == 30
    assert progress_ratio(DAY, ITEMS, completions) == pytest.approx(2 / 3)


def test_progress_ratio_without_points_is_zero(completions: CompletionStore) -> None:
    zero_items = [TrackedItem(id=1, title="Free", points=0)]
    completions.set_completion(1, DAY, True)

    assert progress_ratio(DAY, zero_items, completions) == 0.0
    assert progress_ratio(DAY, [], completions) == 0.0


def test_trend_is_oldest_first_and_ends_on_end_date(completions: CompletionStore) -> None:
    completions.set_completion(1, DAY, True)
    completions.set_completion(2, DAY - timedelta(days=9), True)
    completions.set_completion(1, DAY - timedelta(days=10), True)

    points = trend(DAY, 10, ITEMS, completions)

    assert len(points) == 10
    assert points[0] == 20
    assert points[-1] == daily_total(DAY, ITEMS, completions) == 10
    assert sum(points) == 30


def test_trend_series_carries_iso_dates(completions: CompletionStore) -> None:
    completions.set_completion(2, DAY - timedelta(days=1), True)

    series = build_trend_series(DAY, 3, ITEMS, completions)

    assert [entry["date"] for entry in series] == ["2024-03-08", "2024-03-09", "2024-03-10"]
    assert [entry["points"] for entry in series] == [0, 20, 0]


def test_window_dates_validates_size() -> None:
    assert window_dates("2024-03-10", 1) == [DAY]
    with pytest.raises(ValueError):
        window_dates(DAY, 0)


def test_visible_dates_span_both_sides() -> None:
    days = visible_dates(DAY)

    assert len(days) == 61
    assert days[0] == DAY - timedelta(days=30)
    assert days[30] == DAY
    assert days[-1] == DAY + timedelta(days=30)
