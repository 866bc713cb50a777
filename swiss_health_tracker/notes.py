from __future__ import annotations

import json
import logging
from typing import Mapping

from swiss_health_tracker.constants import DAILY_NOTES_KEY, RESULTS_NAMESPACE
from swiss_health_tracker.dates import DateLike, to_date_key
from swiss_health_tracker.storage import PreferencesStore, encode_blob

LOGGER = logging.getLogger(__name__)


def decode_notes(raw: object) -> dict[str, str]:
    """Decode the ``date -> text`` blob, skipping non-text values."""

    if raw is None or raw == "":
        return {}

    try:
        payload = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except ValueError as exc:
        LOGGER.warning("Discarding unreadable daily notes: %s", exc)
        return {}

    if not isinstance(payload, Mapping):
        return {}

    return {str(date_key): text for date_key, text in payload.items() if isinstance(text, str)}


class NoteStore:
    """Free-text note per day. Saving overwrites the previous text."""

    def __init__(
        self, store: PreferencesStore, *, namespace: str = RESULTS_NAMESPACE, key: str = DAILY_NOTES_KEY
    ) -> None:
        self._store = store
        self._namespace = namespace
        self._key = key

    def get_note(self, day: DateLike) -> str:
        """Return the note for ``day`` or an empty string."""

        return decode_notes(self._store.get(self._namespace, self._key)).get(to_date_key(day), "")

    def set_note(self, day: DateLike, text: str) -> None:
        """Overwrite the note for ``day``."""

        date_key = to_date_key(day)
        with self._store.edit(self._namespace) as values:
            notes = decode_notes(values.get(self._key))
            notes[date_key] = text
            values[self._key] = encode_blob(notes)

    def clear_all(self) -> None:
        """Remove all notes."""

        with self._store.edit(self._namespace) as values:
            values.pop(self._key, None)


__all__ = ["NoteStore", "decode_notes"]
