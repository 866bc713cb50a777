from __future__ import annotations

import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Mapping, MutableMapping, Protocol

from pydantic_core import to_jsonable_python

LOGGER = logging.getLogger(__name__)

DATA_DIR_ENV = "SWISS_HEALTH_DATA_DIR"
TRACKER_FOLDER_NAME = "SwissHealthTracker"
NAMESPACE_SUFFIX = ".json"


class StorageBackend(Protocol):
    """Abstraction for persisting and restoring preference namespaces."""

    def load_namespace(self, namespace: str) -> Mapping[str, object]:
        """Return the stored key/value pairs of a namespace."""

    def save_namespace(self, namespace: str, values: Mapping[str, object]) -> None:
        """Persist all key/value pairs of a namespace."""


def resolve_data_directory(path: str | Path | None = None, *, env: Mapping[str, str] | None = None) -> Path:
    """Resolve the directory holding the preference files."""

    if path is not None:
        return Path(path).expanduser()

    env_map: Mapping[str, str] = env if env is not None else os.environ
    raw_value = env_map.get(DATA_DIR_ENV)
    if raw_value:
        return Path(raw_value).expanduser()

    return Path(".data") / TRACKER_FOLDER_NAME


def encode_blob(value: object) -> str:
    """Encode a value as the JSON string stored under a preference key."""

    return json.dumps(value, default=to_jsonable_python, ensure_ascii=False, sort_keys=True)


class FileStorageBackend:
    """Persist every namespace as its own JSON file on disk."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.directory = resolve_data_directory(path)
        self._last_fingerprints: dict[str, str] = {}

    def namespace_path(self, namespace: str) -> Path:
        """Return the JSON file backing ``namespace``."""

        return self.directory / f"{namespace}{NAMESPACE_SUFFIX}"

    def load_namespace(self, namespace: str) -> Mapping[str, object]:
        """Read the namespace file; a missing file yields an empty mapping."""

        target = self.namespace_path(namespace)
        if not target.exists():
            return {}

        with target.open("r", encoding="utf-8") as file_handle:
            return json.load(file_handle)

    def save_namespace(self, namespace: str, values: Mapping[str, object]) -> None:
        """Write the namespace file unless its content is unchanged."""

        serialized = encode_blob(dict(values))
        if serialized == self._last_fingerprints.get(namespace):
            return

        target = self.namespace_path(namespace)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as file_handle:
            file_handle.write(serialized)

        self._last_fingerprints[namespace] = serialized


class MemoryStorageBackend:
    """Keep namespaces in memory; used by tests and ephemeral sessions."""

    def __init__(self, initial: Mapping[str, Mapping[str, object]] | None = None) -> None:
        self.namespaces: dict[str, dict[str, object]] = {
            name: dict(values) for name, values in (initial or {}).items()
        }
        self.save_count = 0

    def load_namespace(self, namespace: str) -> Mapping[str, object]:
        """Return a copy of the in-memory namespace."""

        return dict(self.namespaces.get(namespace, {}))

    def save_namespace(self, namespace: str, values: Mapping[str, object]) -> None:
        """Replace the in-memory namespace."""

        self.namespaces[namespace] = dict(values)
        self.save_count += 1


class PreferencesStore:
    """Namespaced key-value store with write-through persistence.

    Reads are served from an in-process cache that is hydrated lazily per
    namespace. Every write goes through :meth:`edit`, which holds the store
    lock for the whole read-modify-write cycle and persists the namespace
    before releasing it.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend
        self._cache: dict[str, dict[str, object]] = {}
        self._lock = threading.RLock()

    def _namespace(self, namespace: str) -> dict[str, object]:
        cached = self._cache.get(namespace)
        if cached is not None:
            return cached

        try:
            loaded = self.backend.load_namespace(namespace)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Failed to load namespace '%s': %s", namespace, exc)
            loaded = {}

        values = dict(loaded) if isinstance(loaded, Mapping) else {}
        self._cache[namespace] = values
        return values

    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        """Return a stored value or ``default``."""

        with self._lock:
            return self._namespace(namespace).get(key, default)

    def snapshot(self, namespace: str) -> dict[str, object]:
        """Return a copy of every key/value pair in ``namespace``."""

        with self._lock:
            return dict(self._namespace(namespace))

    @contextmanager
    def edit(self, namespace: str) -> Iterator[MutableMapping[str, object]]:
        """Yield a mutable copy of a namespace and persist it on success."""

        with self._lock:
            draft = dict(self._namespace(namespace))
            yield draft
            self.backend.save_namespace(namespace, draft)
            self._cache[namespace] = draft

    def set(self, namespace: str, key: str, value: object) -> None:
        """Store one value and persist the namespace."""

        with self.edit(namespace) as values:
            values[key] = value

    def clear(self, namespace: str) -> None:
        """Remove every key of ``namespace`` and persist the empty result."""

        with self.edit(namespace) as values:
            values.clear()


__all__ = [
    "DATA_DIR_ENV",
    "FileStorageBackend",
    "MemoryStorageBackend",
    "PreferencesStore",
    "StorageBackend",
    "TRACKER_FOLDER_NAME",
    "encode_blob",
    "resolve_data_directory",
]
