from __future__ import annotations

import json
import threading
from datetime import date

from swiss_health_tracker.completion import CompletionStore, decode_completion_map
from swiss_health_tracker.constants import GOALS_COMPLETION_KEY, GOALS_NAMESPACE
from swiss_health_tracker.models import TrackedItem
from swiss_health_tracker.storage import MemoryStorageBackend, PreferencesStore

DAY = date(2024, 5, 14)


def _completions(store: PreferencesStore) -> CompletionStore:
    return CompletionStore(store, namespace=GOALS_NAMESPACE, key=GOALS_COMPLETION_KEY)


def test_missing_entries_are_incomplete(store: PreferencesStore) -> None:
    completions = _completions(store)

    assert completions.get_completion(1, DAY) is False
    assert completions.get_completion(99, "2030-01-01") is False
    assert completions.completions_for(DAY) == {}


def test_set_completion_roundtrips_both_values(store: PreferencesStore) -> None:
    completions = _completions(store)

    completions.set_completion(1, DAY, True)
    assert completions.get_completion(1, DAY) is True

    completions.set_completion(1, DAY, False)
    assert completions.get_completion(1, DAY) is False


def test_dates_and_iso_strings_share_keys(store: PreferencesStore) -> None:
    completions = _completions(store)

    completions.set_completion(2, "2024-05-14", True)

    assert completions.get_completion(2, DAY) is True
    assert completions.get_completion(2, date(2024, 5, 15)) is False


def test_persisted_shape_is_nested_date_map(memory_backend: MemoryStorageBackend, store: PreferencesStore) -> None:
    completions = _completions(store)

    completions.set_completion(1, DAY, True)
    completions.set_completion(3, DAY, False)

    raw = memory_backend.namespaces[GOALS_NAMESPACE][GOALS_COMPLETION_KEY]
    assert json.loads(str(raw)) == {"2024-05-14": {"1": True, "3": False}}


def test_toggle_flips_and_returns_new_value(store: PreferencesStore) -> None:
    completions = _completions(store)

    assert completions.toggle_completion(4, DAY) is True
    assert completions.toggle_completion(4, DAY) is False
    assert completions.toggle_completion(4, DAY) is True
    assert completions.get_completion(4, DAY) is True


def test_clear_all_resets_every_entry(store: PreferencesStore) -> None:
    completions = _completions(store)
    completions.set_completion(1, DAY, True)
    completions.set_completion(2, "2024-05-01", True)

    completions.clear_all()

    assert completions.get_completion(1, DAY) is False
    assert completions.get_completion(2, "2024-05-01") is False


def test_stores_with_different_keys_are_independent(store: PreferencesStore) -> None:
    goals = _completions(store)
    results = CompletionStore(store, namespace="results", key="results_completion")

    goals.set_completion(1, DAY, True)

    assert results.get_completion(1, DAY) is False


def test_with_status_merges_flags_for_day(store: PreferencesStore) -> None:
    completions = _completions(store)
    items = [TrackedItem(id=1, title="A", points=10), TrackedItem(id=2, title="B", points=20)]
    completions.set_completion(2, DAY, True)

    merged = completions.with_status(items, DAY)

    assert [item.is_completed for item in merged] == [False, True]
    assert all(item.is_completed is False for item in items)


def test_decode_completion_map_is_fail_soft() -> None:
    assert decode_completion_map("") == {}
    assert decode_completion_map("[1, 2]") == {}
    assert decode_completion_map("{oops") == {}
    assert decode_completion_map('{"2024-05-14": {"1": true, "x": true, "2": "yes"}}') == {"2024-05-14": {1: True}}


def test_corrupt_blob_recovers_on_next_write(store: PreferencesStore) -> None:
    store.set(GOALS_NAMESPACE, GOALS_COMPLETION_KEY, "{corrupt")
    completions = _completions(store)

    assert completions.get_completion(1, DAY) is False
    completions.set_completion(1, DAY, True)
    assert completions.get_completion(1, DAY) is True


def test_concurrent_toggles_do_not_lose_updates(store: PreferencesStore) -> None:
    completions = _completions(store)

    def _toggle_many() -> None:
        for _ in range(25):
            completions.toggle_completion(1, DAY)

    workers = [threading.Thread(target=_toggle_many) for _ in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert completions.get_completion(1, DAY) is False
