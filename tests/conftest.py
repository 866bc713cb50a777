from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict

import pytest
import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from swiss_health_tracker.ledger import HealthLedger  # noqa: E402
from swiss_health_tracker.storage import MemoryStorageBackend, PreferencesStore  # noqa: E402


@pytest.fixture()
def memory_backend() -> MemoryStorageBackend:
    return MemoryStorageBackend()


@pytest.fixture()
def store(memory_backend: MemoryStorageBackend) -> PreferencesStore:
    return PreferencesStore(memory_backend)


@pytest.fixture()
def ledger(store: PreferencesStore) -> HealthLedger:
    return HealthLedger(store)


@pytest.fixture()
def secrets(monkeypatch: pytest.MonkeyPatch) -> Dict[str, object]:
    values: Dict[str, object] = {}
    monkeypatch.setattr(st, "secrets", values, raising=False)
    return values
