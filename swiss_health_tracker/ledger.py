"""Composition root wiring catalogs, completion stores and notes to one store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from swiss_health_tracker.aggregation import daily_max, daily_total, progress_ratio, trend, visible_dates, window_dates
from swiss_health_tracker.catalog import GoalCatalog, ResultCatalog
from swiss_health_tracker.completion import CompletionStore
from swiss_health_tracker.constants import (
    GOALS_COMPLETION_KEY,
    GOALS_NAMESPACE,
    RESULTS_COMPLETION_KEY,
    RESULTS_NAMESPACE,
    TREND_WINDOW_DAYS,
    VISIBLE_DAYS_RADIUS,
)
from swiss_health_tracker.dates import DateLike
from swiss_health_tracker.i18n import LanguageCode, LanguageRepository
from swiss_health_tracker.models import TrackedItem
from swiss_health_tracker.notes import NoteStore
from swiss_health_tracker.storage import PreferencesStore

LOGGER = logging.getLogger(__name__)


@dataclass
class DailySummary:
    earned: int
    maximum: int
    ratio: float


@dataclass
class StatsSnapshot:
    dates: list[date]
    goals: list[int]
    results: list[int]


class HealthLedger:
    """Daily completion ledger for goals and results backed by one store."""

    def __init__(self, store: PreferencesStore) -> None:
        self.store = store
        self.languages = LanguageRepository(store)
        self.goal_catalog = GoalCatalog(store)
        self.result_catalog = ResultCatalog()
        self.goal_completions = CompletionStore(store, namespace=GOALS_NAMESPACE, key=GOALS_COMPLETION_KEY)
        self.result_completions = CompletionStore(store, namespace=RESULTS_NAMESPACE, key=RESULTS_COMPLETION_KEY)
        self.notes = NoteStore(store)
        self.goal_catalog.initialize_if_needed(self.language)

    @property
    def language(self) -> LanguageCode:
        return self.languages.get_language()

    def set_language(self, code: str) -> LanguageCode:
        language = self.languages.set_language(code)
        self.goal_catalog.apply_language(language)
        return language

    def goals(self) -> list[TrackedItem]:
        return self.goal_catalog.list_items(self.language)

    def results(self) -> list[TrackedItem]:
        return self.result_catalog.list_items(self.language)

    def goals_for(self, day: DateLike) -> list[TrackedItem]:
        return self.goal_completions.with_status(self.goals(), day)

    def results_for(self, day: DateLike) -> list[TrackedItem]:
        return self.result_completions.with_status(self.results(), day)

    def items_by_date(self, center: DateLike, radius: int = VISIBLE_DAYS_RADIUS) -> dict[date, list[TrackedItem]]:
        goals = self.goals()
        return {day: self.goal_completions.with_status(goals, day) for day in visible_dates(center, radius)}

    def toggle_goal(self, item_id: int, day: DateLike) -> bool:
        return self.goal_completions.toggle_completion(item_id, day)

    def toggle_result(self, item_id: int, day: DateLike) -> bool:
        return self.result_completions.toggle_completion(item_id, day)

    def add_goal(self, title: str, points: object, details: str) -> TrackedItem:
        return self.goal_catalog.add_item(title, points, details)

    def update_goal(self, item_id: int, title: str, points: object, details: str) -> None:
        self.goal_catalog.update_item(item_id, title, points, details)

    def delete_goal(self, item_id: int) -> None:
        self.goal_catalog.delete_item(item_id)

    def get_note(self, day: DateLike) -> str:
        return self.notes.get_note(day)

    def save_note(self, day: DateLike, text: str) -> None:
        self.notes.set_note(day, text)

    def daily_summary(self, day: DateLike) -> DailySummary:
        goals = self.goals()
        return DailySummary(
            earned=daily_total(day, goals, self.goal_completions),
            maximum=daily_max(goals),
            ratio=progress_ratio(day, goals, self.goal_completions),
        )

    def stats(self, end_date: DateLike, window_size_days: int = TREND_WINDOW_DAYS) -> StatsSnapshot:
        return StatsSnapshot(
            dates=window_dates(end_date, window_size_days),
            goals=trend(end_date, window_size_days, self.goals(), self.goal_completions),
            results=trend(end_date, window_size_days, self.results(), self.result_completions),
        )

    def clear_all_data(self) -> list[TrackedItem]:
        """Wipe goals and results history and restore the default goals."""

        language = self.language
        self.store.clear(GOALS_NAMESPACE)
        self.store.clear(RESULTS_NAMESPACE)
        goals = self.goal_catalog.reset_to_defaults(language)
        LOGGER.info("All tracking data cleared (%s)", language)
        return goals


__all__ = ["DailySummary", "HealthLedger", "StatsSnapshot"]
