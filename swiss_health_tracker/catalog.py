from __future__ import annotations

import json
import logging
from typing import Callable, Sequence

from pydantic import ValidationError

from swiss_health_tracker.constants import GOALS_KEY, GOALS_NAMESPACE, INITIALIZED_KEY
from swiss_health_tracker.defaults import default_goals, default_results
from swiss_health_tracker.i18n import coerce_language
from swiss_health_tracker.models import ITEM_LIST_ADAPTER, TrackedItem, coerce_points
from swiss_health_tracker.storage import PreferencesStore, encode_blob

LOGGER = logging.getLogger(__name__)

DefaultsFactory = Callable[[str | None], list[TrackedItem]]


def decode_catalog(raw: object) -> list[TrackedItem]:
    """Decode a stored catalog blob; malformed data yields an empty catalog."""

    if raw is None or raw == "":
        return []

    try:
        payload = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        items = ITEM_LIST_ADAPTER.validate_python(payload)
    except (ValueError, TypeError, ValidationError) as exc:
        LOGGER.warning("Discarding unreadable catalog: %s", exc)
        return []

    return [item.with_completion(False) if item.is_completed else item for item in items]


def encode_catalog(items: Sequence[TrackedItem]) -> str:
    return encode_blob([item.to_storage() for item in items])


def next_item_id(items: Sequence[TrackedItem]) -> int:
    return max((item.id for item in items), default=0) + 1


def merge_language(items: Sequence[TrackedItem], defaults: Sequence[TrackedItem]) -> list[TrackedItem]:
    """Copy localized title and details from defaults onto items with the same id.

    Points, ordering and items without a default counterpart are left untouched.
    """

    lookup = {item.id: item for item in defaults}
    merged: list[TrackedItem] = []
    for item in items:
        default = lookup.get(item.id)
        if default is None:
            merged.append(item)
            continue
        merged.append(item.model_copy(update={"title": default.title, "details": default.details}))
    return merged


class GoalCatalog:
    """Editable, persisted catalog of daily goals."""

    def __init__(
        self,
        store: PreferencesStore,
        *,
        namespace: str = GOALS_NAMESPACE,
        key: str = GOALS_KEY,
        defaults: DefaultsFactory = default_goals,
    ) -> None:
        self._store = store
        self._namespace = namespace
        self._key = key
        self._defaults = defaults

    @property
    def is_initialized(self) -> bool:
        return self._store.get(self._namespace, INITIALIZED_KEY) is True

    def list_items(self, locale: str | None = None) -> list[TrackedItem]:
        return decode_catalog(self._store.get(self._namespace, self._key))

    def save_items(self, items: Sequence[TrackedItem]) -> None:
        with self._store.edit(self._namespace) as values:
            values[self._key] = encode_catalog(items)

    def initialize_if_needed(self, locale: str | None) -> bool:
        """Seed the defaults for ``locale`` once; return whether seeding happened."""

        if self.is_initialized:
            return False

        self.reset_to_defaults(locale)
        return True

    def reset_to_defaults(self, locale: str | None) -> list[TrackedItem]:
        language = coerce_language(locale)
        items = self._defaults(language)
        with self._store.edit(self._namespace) as values:
            values[self._key] = encode_catalog(items)
            values[INITIALIZED_KEY] = True
        LOGGER.info("Catalog '%s' reset to %d default items (%s)", self._namespace, len(items), language)
        return items

    def add_item(self, title: str, points: object, details: str) -> TrackedItem:
        with self._store.edit(self._namespace) as values:
            items = decode_catalog(values.get(self._key))
            item = TrackedItem(id=next_item_id(items), title=title, points=coerce_points(points), details=details)
            values[self._key] = encode_catalog([*items, item])
        return item

    def update_item(self, item_id: int, title: str, points: object, details: str) -> None:
        with self._store.edit(self._namespace) as values:
            items = decode_catalog(values.get(self._key))
            updated = [
                item.model_copy(update={"title": title, "points": coerce_points(points), "details": details})
                if item.id == item_id
                else item
                for item in items
            ]
            values[self._key] = encode_catalog(updated)

    def delete_item(self, item_id: int) -> None:
        with self._store.edit(self._namespace) as values:
            items = decode_catalog(values.get(self._key))
            values[self._key] = encode_catalog([item for item in items if item.id != item_id])

    def apply_language(self, locale: str | None) -> list[TrackedItem]:
        """Relabel stored items for ``locale`` without touching points or history."""

        language = coerce_language(locale)
        current = self.list_items()
        if not current:
            LOGGER.info("No stored goals, seeding defaults for %s", language)
            self.initialize_if_needed(language)
            return self.list_items()

        merged = merge_language(current, self._defaults(language))
        self.save_items(merged)
        return merged


class ResultCatalog:
    """Read-only catalog of subjective results, fixed per language."""

    def __init__(self, defaults: DefaultsFactory = default_results) -> None:
        self._defaults = defaults

    def list_items(self, locale: str | None = None) -> list[TrackedItem]:
        return self._defaults(coerce_language(locale))


__all__ = [
    "GoalCatalog",
    "ResultCatalog",
    "decode_catalog",
    "encode_catalog",
    "merge_language",
    "next_item_id",
]
