"""Language selection and lightweight French/English text switching."""

from __future__ import annotations

import logging
from typing import Literal

from swiss_health_tracker.constants import LANGUAGE_CODE_KEY, LANGUAGE_NAMESPACE
from swiss_health_tracker.storage import PreferencesStore

LOGGER = logging.getLogger(__name__)

LanguageCode = Literal["fr", "en"]
DEFAULT_LANGUAGE: LanguageCode = "fr"
LANGUAGE_OPTIONS: dict[str, LanguageCode] = {"Français": "fr", "English": "en"}


def coerce_language(code: object) -> LanguageCode:
    """Return a supported language code, falling back to French."""

    if code == "en":
        return "en"
    if code == "fr":
        return "fr"
    return DEFAULT_LANGUAGE


def translate_text(text: str | tuple[str, str], language: str | None) -> str:
    """Return the text for the given language.

    Strings that contain " / " delimiters are split into alternating French and
    English fragments. A tuple of two strings may also be provided explicitly.
    """

    active = coerce_language(language)

    if isinstance(text, tuple) and len(text) == 2:
        french, english = text
        return french if active == "fr" else english

    if " / " in text:
        fragments = text.split(" / ")
        french_text = " ".join(fragments[::2]).strip()
        english_text = " ".join(fragments[1::2]).strip()
        return french_text if active == "fr" else english_text

    return text


class LanguageRepository:
    """Persist the chosen application language."""

    def __init__(self, store: PreferencesStore) -> None:
        self._store = store

    def get_language(self) -> LanguageCode:
        return coerce_language(self._store.get(LANGUAGE_NAMESPACE, LANGUAGE_CODE_KEY))

    def set_language(self, code: str) -> LanguageCode:
        language = coerce_language(code)
        self._store.set(LANGUAGE_NAMESPACE, LANGUAGE_CODE_KEY, language)
        LOGGER.info("Language set to %s", language)
        return language


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_OPTIONS",
    "LanguageCode",
    "LanguageRepository",
    "coerce_language",
    "translate_text",
]
