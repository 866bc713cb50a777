from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Sequence

from swiss_health_tracker.dates import DateLike, to_date_key
from swiss_health_tracker.models import TrackedItem
from swiss_health_tracker.storage import PreferencesStore, encode_blob

LOGGER = logging.getLogger(__name__)

CompletionMap = dict[str, dict[int, bool]]


def _coerce_day(raw_day: Any) -> dict[int, bool]:
    day: dict[int, bool] = {}
    if not isinstance(raw_day, Mapping):
        return day

    for raw_id, raw_value in raw_day.items():
        if not isinstance(raw_value, bool):
            continue
        try:
            day[int(raw_id)] = raw_value
        except (TypeError, ValueError):
            continue
    return day


def decode_completion_map(raw: object) -> CompletionMap:
    """Decode the nested ``date -> item id -> bool`` blob, fail-soft."""

    if raw is None or raw == "":
        return {}

    try:
        payload = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except ValueError as exc:
        LOGGER.warning("Discarding unreadable completion map: %s", exc)
        return {}

    if not isinstance(payload, Mapping):
        LOGGER.warning("Discarding completion map of type %s", type(payload).__name__)
        return {}

    return {str(date_key): _coerce_day(raw_day) for date_key, raw_day in payload.items()}


def encode_completion_map(completions: Mapping[str, Mapping[int, bool]]) -> str:
    """Serialize the completion map with string item ids."""

    return encode_blob(
        {date_key: {str(item_id): value for item_id, value in day.items()} for date_key, day in completions.items()}
    )


class CompletionStore:
    """Per-date completion flags for one catalog, persisted under a single key.

    Absence of an entry means "not completed". Entries are only ever removed in
    bulk through :meth:`clear_all`.
    """

    def __init__(self, store: PreferencesStore, *, namespace: str, key: str) -> None:
        self._store = store
        self._namespace = namespace
        self._key = key

    def _load(self) -> CompletionMap:
        return decode_completion_map(self._store.get(self._namespace, self._key))

    def get_completion(self, item_id: int, day: DateLike) -> bool:
        """Return the stored flag, ``False`` when absent."""

        return self._load().get(to_date_key(day), {}).get(item_id, False)

    def completions_for(self, day: DateLike) -> dict[int, bool]:
        """Return the item id to flag mapping stored for ``day``."""

        return dict(self._load().get(to_date_key(day), {}))

    def set_completion(self, item_id: int, day: DateLike, completed: bool) -> None:
        """Upsert the flag for ``item_id`` on ``day``."""

        date_key = to_date_key(day)
        with self._store.edit(self._namespace) as values:
            completions = decode_completion_map(values.get(self._key))
            completions.setdefault(date_key, {})[item_id] = bool(completed)
            values[self._key] = encode_completion_map(completions)

    def toggle_completion(self, item_id: int, day: DateLike) -> bool:
        """Flip the flag inside one store transaction and return the new value."""

        date_key = to_date_key(day)
        with self._store.edit(self._namespace) as values:
            completions = decode_completion_map(values.get(self._key))
            day_map = completions.setdefault(date_key, {})
            new_value = not day_map.get(item_id, False)
            day_map[item_id] = new_value
            values[self._key] = encode_completion_map(completions)
        return new_value

    def clear_all(self) -> None:
        """Drop every stored flag of this catalog."""

        with self._store.edit(self._namespace) as values:
            values.pop(self._key, None)

    def with_status(self, items: Sequence[TrackedItem], day: DateLike) -> list[TrackedItem]:
        """Return copies of ``items`` with ``is_completed`` merged in for ``day``."""

        day_map = self.completions_for(day)
        return [item.with_completion(day_map.get(item.id, False)) for item in items]


__all__ = [
    "CompletionMap",
    "CompletionStore",
    "decode_completion_map",
    "encode_completion_map",
]
